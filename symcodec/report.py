"""Codebook listings and summary statistics for the ``inspect`` command.

Formats a loaded codebook as an ASCII table, Markdown, CSV or a JSON-ready
dict, and reports the empirical entropy of the stored distribution next to
the fixed codeword width actually spent per symbol.
"""

from __future__ import annotations

from typing import Any
import csv
import io

import numpy as np

from symcodec.codebook import Codebook

_HEADERS = ["Rank", "Symbol", "Count", "Probability", "Codeword"]


def codebook_entropy(codebook: Codebook) -> float:
    """Return -sum(p * log2 p) over the stored probabilities (bits/symbol)."""

    probs = np.array([e.probability for e in codebook if e.probability > 0], dtype=float)
    if probs.size == 0:
        return 0.0
    return float(-np.sum(probs * np.log2(probs)))


def summarize_codebook(codebook: Codebook) -> dict[str, Any]:
    entropy = codebook_entropy(codebook)
    return {
        "entries": len(codebook),
        "codeword_width": codebook.width,
        "codeword_space": 1 << codebook.width,
        "total_count": sum(e.count for e in codebook),
        "entropy_bits": entropy,
        # Bits spent per symbol beyond the empirical entropy
        "overhead_bits": codebook.width - entropy if len(codebook) else 0.0,
        "skipped_lines": codebook.skipped_lines,
    }


def _rows(codebook: Codebook) -> list[list[str]]:
    return [
        [str(rank), entry.display, str(entry.count), f"{entry.probability:.7f}", entry.codeword or ""]
        for rank, entry in enumerate(codebook)
    ]


def format_table_ascii(codebook: Codebook) -> str:
    rows = _rows(codebook)
    widths = [max([len(h), *(len(r[i]) for r in rows)]) for i, h in enumerate(_HEADERS)]

    def fmt_row(cols: list[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(_HEADERS), sep]
    lines.extend(fmt_row(r) for r in rows)
    return "\n".join(lines)


def format_table_markdown(codebook: Codebook) -> str:
    lines = ["| " + " | ".join(_HEADERS) + " |"]
    lines.append("| " + " | ".join(["---"] * len(_HEADERS)) + " |")
    for row in _rows(codebook):
        cells = [c.replace("|", "\\|") for c in row]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


def format_table_csv(codebook: Codebook) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow([h.lower() for h in _HEADERS])
    writer.writerows(_rows(codebook))
    return buf.getvalue().rstrip("\n")


def format_codebook(codebook: Codebook, output_format: str = "table") -> str | dict[str, Any]:
    """Return the codebook listing in ``output_format``.

    ``output_format`` may be one of {"table", "json", "csv", "markdown"}; JSON
    is returned as a dict for the caller to serialize.
    """

    if output_format == "json":
        return {
            "summary": summarize_codebook(codebook),
            "entries": codebook.to_records(),
        }
    if output_format == "csv":
        return format_table_csv(codebook)
    if output_format == "markdown":
        return format_table_markdown(codebook)
    return format_table_ascii(codebook)


__all__ = [
    "codebook_entropy",
    "summarize_codebook",
    "format_table_ascii",
    "format_table_markdown",
    "format_table_csv",
    "format_codebook",
]
