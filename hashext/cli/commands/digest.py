"""
Native Click implementation of the digest command.

Usage: hashext digest [-a ALGO] [--text TEXT | FILE...]
"""

from __future__ import annotations

import click

from ...core.exceptions import EncodingFailureError
from ...digest import hash_hex, hash_text_hex
from ..context import HashextContext
from ._common import algorithm_option, input_label


@click.command("digest")
@algorithm_option
@click.option("--text", "text", default=None, help="Hash this string instead of files.")
@click.argument("files", nargs=-1, type=click.File("rb"))
@click.pass_obj
def digest(
    ctx: HashextContext, algorithm: str | None, text: str | None, files: tuple
) -> None:
    """Print the hex digest of each FILE, of stdin, or of --text.

    Text is encoded with hash.encoding from config (UTF-8 by default).

    \b
    Examples:

        hashext digest -a MD5 setup.tar.gz
        hashext digest --text "The quick brown fox" -a SHA1
        cat data.bin | hashext digest
    """
    algorithm = algorithm or ctx.default_algorithm

    if text is not None:
        if files:
            raise click.UsageError("--text cannot be combined with FILE arguments")
        try:
            click.echo(hash_text_hex(text, algorithm, ctx.encoding))
        except EncodingFailureError as e:
            raise click.ClickException(str(e)) from e
        return

    if not files:
        files = (click.open_file("-", "rb"),)

    for stream in files:
        data = stream.read()
        click.echo(f"{hash_hex(data, algorithm)}  {input_label(stream)}")
