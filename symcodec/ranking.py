"""Deterministic ordering of symbol entries.

Entries are ordered by ascending occurrence count; equal counts are broken by
plain byte comparison of the symbol, so the order never depends on the order
in which symbols were first seen.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from symcodec.table import FrequencyTable, SymbolEntry


def rank_key(entry: SymbolEntry) -> tuple[int, bytes]:
    return (entry.count, entry.symbol)


def rank_symbols(entries: FrequencyTable | Iterable[SymbolEntry]) -> list[SymbolEntry]:
    """Return copies of ``entries`` sorted by ``(count, symbol)``.

    Accepts a finalized ``FrequencyTable`` or any iterable of entries. The
    inputs are left untouched.
    """

    if isinstance(entries, FrequencyTable) and not entries.finalized:
        raise RuntimeError("FrequencyTable must be finalized via finalize() before ranking.")
    return [replace(entry) for entry in sorted(entries, key=rank_key)]


__all__ = ["rank_key", "rank_symbols"]
