"""Options and helpers shared by hashext commands."""

from __future__ import annotations

import click

from ...hashing import CANONICAL_NAMES

algorithm_option = click.option(
    "-a",
    "--algorithm",
    type=click.Choice(CANONICAL_NAMES, case_sensitive=True),
    default=None,
    help="Hash algorithm (defaults to hash.default_algorithm from config).",
)


def input_label(stream) -> str:
    """Name to print next to a digest: the file path, or '-' for stdin."""
    name = getattr(stream, "name", "-")
    if not isinstance(name, str) or name.startswith("<"):
        return "-"
    return name
