"""CLI command that builds a codebook and packs a text file.

Examples
--------
  symcodec encode input.txt codebook.csv encoded.bin
  symcodec encode input.txt codebook.csv encoded.bin --width 8 --stats run.json
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import json

import click

from symcodec.config import Config
from symcodec.encoder import encode_file
from symcodec.errors import exit_code_for
from symcodec.utils import compute_sha256, ensure_dir, get_file_size, write_file


@click.command(name="encode")
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.argument("codebook_path", metavar="CODEBOOK", type=click.Path(path_type=Path))
@click.argument("encoded_path", metavar="ENCODED", type=click.Path(path_type=Path))
@click.option(
    "width",
    "--width",
    type=click.IntRange(1, 32),
    default=Config.CODEWORD_WIDTH,
    show_default=True,
    help="Codeword width in bits (the table may hold at most 2**width symbols)",
)
@click.option(
    "capacity",
    "--capacity",
    type=click.IntRange(min=1),
    default=Config.MAX_SYMBOLS,
    show_default=True,
    help="Maximum distinct symbols counted; further new symbols are dropped",
)
@click.option(
    "stats",
    "--stats",
    type=click.Path(path_type=Path),
    required=False,
    help="Write a JSON summary of the run to this path",
)
def encode(
    input_path: Path,
    codebook_path: Path,
    encoded_path: Path,
    width: int,
    capacity: int,
    stats: Optional[Path],
) -> None:
    """Encode INPUT, writing the codebook to CODEBOOK and the bits to ENCODED."""

    try:
        result = encode_file(
            input_path,
            codebook_path,
            encoded_path,
            width=width,
            capacity=capacity,
        )
        table = result.table
        click.echo(
            f"Symbols: {table.total} total, {len(table)} distinct "
            f"({table.dropped} dropped at capacity {table.capacity})"
        )
        click.echo(f"Codebook: {len(result.codebook)} entries, {result.codebook.width}-bit codewords -> {codebook_path}")
        click.echo(
            f"Encoded: {result.encoded_symbols} symbols, {result.bit_length} bits, "
            f"{len(result.payload)} bytes -> {encoded_path}"
        )
        if table.dropped:
            click.secho(f"Warning: {table.dropped} symbol occurrence(s) dropped; they will not be encoded.", fg="yellow")
        if result.lost_tail_symbols:
            click.secho(
                f"Warning: the last {result.lost_tail_symbols} symbol(s) use the all-zero codeword "
                "and will be read back as padding.",
                fg="yellow",
            )

        if stats is not None:
            ensure_dir(stats.parent)
            summary = {
                "command": "encode",
                "input": str(input_path),
                "codebook": str(codebook_path),
                "encoded": str(encoded_path),
                "input_bytes": get_file_size(input_path),
                "input_sha256": f"sha256:{compute_sha256(input_path)}",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
            summary.update(result.to_dict())
            write_file(stats, json.dumps(summary, indent=2, ensure_ascii=False).encode("utf-8"))
            click.echo(f"Stats saved: {stats}")

        click.secho("OK: Encoding completed successfully.", fg="green")
    except click.ClickException:
        raise
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(exit_code_for(e))
