"""
Click-based CLI for hashext.

Usage:
    from hashext.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import ConfigValidationError
from .context import HashextContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hashext")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashext")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """hashext - MD and SHA digests as lowercase hex

    \b
    Commands:
        hashext digest FILE...          Print digests of files (or stdin)
        hashext digest --text TEXT      Print the digest of a string
        hashext verify EXPECTED FILE    Check a file against a checksum
        hashext algorithms              List supported algorithms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        try:
            ctx.obj = HashextContext.create()
        except ConfigValidationError as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "HashextContext",
    "__version__",
    "cli",
    "register_commands",
]
