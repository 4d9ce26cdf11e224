"""
Click command implementations for hashext CLI.

Commands are registered with the main CLI group via the
register_commands() function in hashext.cli.
"""

from .algorithms import algorithms
from .digest import digest
from .verify import verify

COMMANDS = [
    algorithms,
    digest,
    verify,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "digest",
    "verify",
]
