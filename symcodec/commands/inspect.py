"""CLI command that lists a codebook and summarizes its distribution.

Examples
--------
  symcodec inspect codebook.csv
  symcodec inspect codebook.csv --format json
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from symcodec.codebook import load_codebook
from symcodec.errors import exit_code_for
from symcodec.report import format_codebook, summarize_codebook


@click.command(name="inspect")
@click.argument("codebook_path", metavar="CODEBOOK", type=click.Path(path_type=Path))
@click.option(
    "fmt",
    "--format",
    type=click.Choice(["table", "json", "csv", "markdown"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Listing format",
)
@click.option(
    "lenient",
    "--lenient",
    is_flag=True,
    help="Skip malformed codebook lines instead of failing",
)
def inspect(codebook_path: Path, fmt: str, lenient: bool) -> None:
    """Print the entries of CODEBOOK in rank order."""

    try:
        codebook = load_codebook(codebook_path, strict=not lenient)
        listing = format_codebook(codebook, output_format=fmt.lower())
        if isinstance(listing, dict):
            click.echo(json.dumps(listing, indent=2, ensure_ascii=False))
            return
        click.echo(listing)
        if fmt.lower() == "csv":
            return
        summary = summarize_codebook(codebook)
        click.echo(
            f"\n{summary['entries']} entries, {summary['codeword_width']}-bit codewords, "
            f"entropy {summary['entropy_bits']:.4f} bits/symbol"
        )
        if summary["skipped_lines"]:
            click.secho(f"Warning: {summary['skipped_lines']} malformed line(s) skipped.", fg="yellow")
    except click.ClickException:
        raise
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(exit_code_for(e))
