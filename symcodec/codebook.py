"""Codebook: the persisted symbol table shared by encoder and decoder.

Each entry is written on its own line as::

    [<symbol>],<count>,<probability>,<codeword>

with the probability printed to ``Config.PROBABILITY_DIGITS`` decimals. The
symbol is written as raw bytes between one pair of brackets. Because the
tokenizer escapes ``\\n``, ``\\t`` and ``\\r``, a symbol never contains a line
break, and because ``count``, ``probability`` and ``codeword`` never contain a
comma, a line is parsed from the right: the last three comma-separated fields
are taken first and whatever precedes them is the bracketed symbol. Symbols
such as ``,``, ``[`` and ``]`` therefore need no escaping.

Malformed lines either abort the load (``strict=True``, the default) with a
``CodebookFormatError`` naming the line, or are skipped with a logged warning
(``strict=False``).
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional
import logging
import math

from symcodec.config import Config
from symcodec.errors import CodebookFormatError
from symcodec.table import SymbolEntry
from symcodec.utils import read_file, write_file


_LOGGER = logging.getLogger(__name__)

_BINARY_DIGITS = frozenset(b"01")


class Codebook:
    """In-memory codebook with lookups in both directions.

    Parameters
    ----------
    entries:
        Entries with codewords assigned, typically in rank order.
    width:
        Expected codeword width. Inferred from the entries when omitted; an
        empty codebook falls back to ``Config.CODEWORD_WIDTH``.

    Raises
    ------
    CodebookFormatError
        If an entry lacks a codeword, widths are mixed, or a symbol or
        codeword value appears twice.
    """

    def __init__(self, entries: Iterable[SymbolEntry], width: Optional[int] = None) -> None:
        self._entries: list[SymbolEntry] = list(entries)
        self._by_symbol: dict[bytes, SymbolEntry] = {}
        self._by_value: dict[int, SymbolEntry] = {}
        self.skipped_lines: int = 0

        widths: set[int] = set()
        for entry in self._entries:
            if entry.codeword is None:
                raise CodebookFormatError(f"Symbol {entry.symbol!r} has no codeword.")
            widths.add(len(entry.codeword))
        if width is not None:
            widths.add(width)
        if len(widths) > 1:
            raise CodebookFormatError(f"Mixed codeword widths: {sorted(widths)}")
        self.width: int = widths.pop() if widths else Config.CODEWORD_WIDTH

        for entry in self._entries:
            if entry.symbol in self._by_symbol:
                raise CodebookFormatError(f"Duplicate symbol {entry.symbol!r}.")
            if entry.value in self._by_value:
                raise CodebookFormatError(f"Duplicate codeword {entry.codeword}.")
            self._by_symbol[entry.symbol] = entry
            self._by_value[entry.value] = entry

    @property
    def entries(self) -> list[SymbolEntry]:
        return list(self._entries)

    def lookup(self, symbol: bytes) -> Optional[str]:
        """Return the codeword for ``symbol`` or ``None`` if absent."""

        entry = self._by_symbol.get(symbol)
        return None if entry is None else entry.codeword

    def resolve(self, value: int) -> Optional[SymbolEntry]:
        """Return the entry whose codeword has integer value ``value``."""

        return self._by_value.get(int(value))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def to_records(self) -> list[dict[str, Any]]:
        return [{"rank": i, **entry.to_dict()} for i, entry in enumerate(self._entries)]


# Line format ------------------------------------------------------------------
def format_entry(entry: SymbolEntry, digits: int = Config.PROBABILITY_DIGITS) -> bytes:
    """Serialize one entry as a newline-terminated codebook line."""

    if entry.codeword is None:
        raise ValueError(f"Symbol {entry.symbol!r} has no codeword assigned.")
    tail = f"{entry.count},{entry.probability:.{digits}f},{entry.codeword}\n"
    return b"[" + entry.symbol + b"]," + tail.encode("ascii")


def parse_entry(line: bytes, line_number: Optional[int] = None) -> SymbolEntry:
    """Parse a single codebook line (without its line terminator)."""

    fields = line.rsplit(b",", 3)
    if len(fields) != 4:
        raise CodebookFormatError(
            f"expected 4 comma-separated fields, found {len(fields)}", line_number
        )
    symbol_field, count_field, probability_field, codeword_field = fields

    if len(symbol_field) < 3 or not (
        symbol_field.startswith(b"[") and symbol_field.endswith(b"]")
    ):
        raise CodebookFormatError(
            f"symbol field {symbol_field!r} is not a non-empty bracketed value", line_number
        )
    if not count_field.isdigit():
        raise CodebookFormatError(f"invalid count {count_field!r}", line_number)
    try:
        probability = float(probability_field)
    except ValueError as exc:
        raise CodebookFormatError(f"invalid probability {probability_field!r}", line_number) from exc
    if not math.isfinite(probability) or not 0.0 <= probability <= 1.0:
        raise CodebookFormatError(
            f"probability {probability_field!r} is outside [0, 1]", line_number
        )
    if not codeword_field or not set(codeword_field) <= _BINARY_DIGITS:
        raise CodebookFormatError(f"invalid codeword {codeword_field!r}", line_number)

    return SymbolEntry(
        symbol=symbol_field[1:-1],
        count=int(count_field),
        probability=probability,
        codeword=codeword_field.decode("ascii"),
    )


# Whole-codebook I/O -----------------------------------------------------------
def dump_codebook(entries: Iterable[SymbolEntry], digits: int = Config.PROBABILITY_DIGITS) -> bytes:
    return b"".join(format_entry(entry, digits) for entry in entries)


def write_codebook(entries: Iterable[SymbolEntry], path: Path) -> None:
    """Write ``entries`` to ``path`` in rank order."""

    write_file(path, dump_codebook(entries))
    _LOGGER.info("Codebook written: %s", path)


def _dominant_width(entries: Iterable[SymbolEntry]) -> Optional[int]:
    """Most common codeword width; ties prefer ``Config.CODEWORD_WIDTH``, then the first seen."""

    counts = Counter(len(entry.codeword or "") for entry in entries)
    if not counts:
        return None
    top = max(counts.values())
    tied = [w for w, n in counts.items() if n == top]
    if Config.CODEWORD_WIDTH in tied:
        return Config.CODEWORD_WIDTH
    return tied[0]


def _reject(exc: CodebookFormatError, strict: bool) -> None:
    if strict:
        raise exc
    _LOGGER.warning("Skipping malformed codebook entry: %s", exc)


def loads_codebook(data: bytes, *, strict: bool = True) -> Codebook:
    """Parse codebook bytes into a ``Codebook``.

    Blank lines and trailing carriage returns are ignored. Every line is
    parsed before the codeword width is chosen: the width shared by most
    lines wins. In lenient mode, lines that fail to parse, use another width,
    or repeat a symbol or codeword are skipped.
    """

    parsed: list[tuple[int, SymbolEntry]] = []
    skipped = 0
    for line_number, raw_line in enumerate(data.split(b"\n"), start=1):
        line = raw_line.rstrip(b"\r")
        if not line:
            continue
        try:
            parsed.append((line_number, parse_entry(line, line_number)))
        except CodebookFormatError as exc:
            _reject(exc, strict)
            skipped += 1

    width = _dominant_width(entry for _, entry in parsed)
    entries: list[SymbolEntry] = []
    seen_symbols: set[bytes] = set()
    seen_values: set[int] = set()
    for line_number, entry in parsed:
        try:
            if len(entry.codeword or "") != width:
                raise CodebookFormatError(
                    f"codeword {entry.codeword} does not match width {width}", line_number
                )
            if entry.symbol in seen_symbols:
                raise CodebookFormatError(f"duplicate symbol {entry.symbol!r}", line_number)
            if entry.value in seen_values:
                raise CodebookFormatError(f"duplicate codeword {entry.codeword}", line_number)
        except CodebookFormatError as exc:
            _reject(exc, strict)
            skipped += 1
            continue
        seen_symbols.add(entry.symbol)
        seen_values.add(entry.value)
        entries.append(entry)

    book = Codebook(entries, width=width)
    book.skipped_lines = skipped
    return book


def load_codebook(path: Path, *, strict: bool = True) -> Codebook:
    """Read and parse the codebook at ``path``."""

    book = loads_codebook(read_file(path), strict=strict)
    _LOGGER.info("Loaded %d codebook entries (width %d) from %s", len(book), book.width, path)
    return book


__all__ = [
    "Codebook",
    "format_entry",
    "parse_entry",
    "dump_codebook",
    "write_codebook",
    "loads_codebook",
    "load_codebook",
]
