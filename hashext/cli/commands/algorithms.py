"""
Native Click implementation of the algorithms command.

Usage: hashext algorithms
"""

from __future__ import annotations

import click

from ...hashing import default_registry


@click.command("algorithms")
def algorithms() -> None:
    """List supported algorithms and their digest sizes in bytes."""
    for hash_type in default_registry.available_algorithms:
        click.echo(f"{hash_type.value:<8}{default_registry.digest_length(hash_type)}")
