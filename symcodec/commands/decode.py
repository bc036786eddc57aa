"""CLI command that rebuilds a text file from a codebook and packed bits.

Examples
--------
  symcodec decode output.txt codebook.csv encoded.bin
  symcodec decode output.txt codebook.csv encoded.bin --newlines crlf --lenient
"""

from __future__ import annotations

from pathlib import Path

import click

from symcodec.config import Config, NEWLINE_MODES
from symcodec.decoder import decode_file
from symcodec.errors import exit_code_for


@click.command(name="decode")
@click.argument("output_path", metavar="OUTPUT", type=click.Path(path_type=Path))
@click.argument("codebook_path", metavar="CODEBOOK", type=click.Path(path_type=Path))
@click.argument("encoded_path", metavar="ENCODED", type=click.Path(path_type=Path))
@click.option(
    "newlines",
    "--newlines",
    type=click.Choice(list(NEWLINE_MODES), case_sensitive=False),
    default=Config.DEFAULT_NEWLINES,
    show_default=True,
    help="Carriage return handling: keep every CR, collapse CRLF to LF, or drop every CR",
)
@click.option(
    "lenient",
    "--lenient",
    is_flag=True,
    help="Skip malformed codebook lines instead of failing",
)
def decode(
    output_path: Path,
    codebook_path: Path,
    encoded_path: Path,
    newlines: str,
    lenient: bool,
) -> None:
    """Decode ENCODED with CODEBOOK and write the text to OUTPUT."""

    try:
        click.echo(f"Loading codebook from {codebook_path}...")
        result = decode_file(
            output_path,
            codebook_path,
            encoded_path,
            newlines=newlines.lower(),
            strict=not lenient,
        )
        if result.skipped_windows:
            click.secho(f"Warning: {result.skipped_windows} window(s) matched no codeword.", fg="yellow")
        click.echo(
            f"Decoded {encoded_path}: resolved {result.resolved} symbols "
            f"({result.padding_windows} padding window(s) discarded)"
        )
        click.secho(f"Decoding completed. Output written to {output_path}", fg="green")
    except click.ClickException:
        raise
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(exit_code_for(e))
