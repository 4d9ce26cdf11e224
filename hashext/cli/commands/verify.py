"""
Native Click implementation of the verify command.

Usage: hashext verify [-a ALGO] EXPECTED FILE
"""

from __future__ import annotations

import click

from ...digest import verify_checksum
from ..context import HashextContext
from ._common import algorithm_option, input_label


@click.command("verify")
@algorithm_option
@click.argument("expected")
@click.argument("file", type=click.File("rb"))
@click.pass_obj
@click.pass_context
def verify(
    click_ctx: click.Context,
    ctx: HashextContext,
    algorithm: str | None,
    expected: str,
    file,
) -> None:
    """Check FILE against the EXPECTED hex checksum.

    Exits with status 1 when the digest does not match.
    """
    algorithm = algorithm or ctx.default_algorithm
    label = input_label(file)

    if verify_checksum(file.read(), algorithm, expected):
        click.echo(f"{label}: OK")
        return

    click.echo(f"{label}: FAILED", err=True)
    click_ctx.exit(1)
