"""Symbol entries and the bounded frequency table built during encoding.

The table maps each distinct symbol unit to a ``SymbolEntry`` holding its
occurrence count and, once finalized, its empirical probability. Capacity is
bounded: once ``capacity`` distinct symbols are present, further new symbols
are dropped (counted in ``dropped`` but never inserted), which makes them
invisible to the packing pass.

Example
-------
>>> table = count_symbols(b"ab\\nab")
>>> sorted((e.symbol, e.count) for e in table)
[(b'\\\\n', 1), (b'a', 2), (b'b', 2)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional
import logging

from symcodec.config import Config
from symcodec.tokenizer import iter_symbols


_LOGGER = logging.getLogger(__name__)


@dataclass
class SymbolEntry:
    """One row of the symbol table.

    Parameters
    ----------
    symbol:
        Raw bytes of the symbol unit, or an escape token (``b"\\\\n"`` etc.).
    count:
        Number of occurrences observed.
    probability:
        ``count / total``; set by ``FrequencyTable.finalize`` or read back
        verbatim from a codebook.
    codeword:
        Fixed-width string of ``'0'``/``'1'``; ``None`` until assigned.
    """

    symbol: bytes
    count: int = 0
    probability: float = 0.0
    codeword: Optional[str] = None

    @property
    def value(self) -> int:
        """Integer value of the codeword."""

        if self.codeword is None:
            raise ValueError(f"Symbol {self.symbol!r} has no codeword assigned.")
        return int(self.codeword, 2)

    @property
    def display(self) -> str:
        return self.symbol.decode("utf-8", errors="replace")

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.display,
            "count": self.count,
            "probability": self.probability,
            "codeword": self.codeword,
        }


class FrequencyTable:
    """Occurrence counts per distinct symbol, bounded by ``capacity``.

    Parameters
    ----------
    capacity:
        Maximum number of distinct entries. Defaults to
        ``Config.MAX_SYMBOLS``.

    Notes
    -----
    - ``total`` counts every observed occurrence, including dropped ones, so
      probabilities of retained entries sum to less than one once the table
      has overflowed.
    - After ``finalize`` the table is frozen and ``observe`` raises.
    """

    def __init__(self, capacity: int = Config.MAX_SYMBOLS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self.capacity: int = capacity
        self.total: int = 0
        self.dropped: int = 0
        self._entries: dict[bytes, SymbolEntry] = {}
        self._finalized: bool = False

    # Counting -----------------------------------------------------------------
    def observe(self, symbol: bytes) -> bool:
        """Count one occurrence of ``symbol``.

        Returns ``False`` when the symbol was dropped because the table is
        full and does not already contain it.
        """

        if self._finalized:
            raise RuntimeError("FrequencyTable is finalized; no further observations allowed.")
        self.total += 1
        entry = self._entries.get(symbol)
        if entry is not None:
            entry.count += 1
            return True
        if len(self._entries) >= self.capacity:
            self.dropped += 1
            _LOGGER.debug("Symbol table full (%d); dropping %r", self.capacity, symbol)
            return False
        self._entries[symbol] = SymbolEntry(symbol=symbol, count=1)
        return True

    def finalize(self, total: Optional[int] = None) -> None:
        """Compute ``probability = count / total`` for every entry and freeze."""

        denom = self.total if total is None else int(total)
        if denom < 0:
            raise ValueError("total must be non-negative")
        for entry in self._entries.values():
            entry.probability = entry.count / denom if denom > 0 else 0.0
        if self.dropped:
            _LOGGER.warning(
                "Symbol table capacity %d exceeded: %d occurrence(s) dropped",
                self.capacity,
                self.dropped,
            )
        self._finalized = True

    @property
    def finalized(self) -> bool:
        return self._finalized

    # Container protocol -------------------------------------------------------
    def get(self, symbol: bytes) -> Optional[SymbolEntry]:
        return self._entries.get(symbol)

    def entries(self) -> list[SymbolEntry]:
        """Entries in first-seen order."""

        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._entries

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "capacity": self.capacity,
            "unique_symbols": len(self._entries),
            "total_symbols": self.total,
            "dropped_symbols": self.dropped,
        }


def count_symbols(data: bytes, capacity: int = Config.MAX_SYMBOLS) -> FrequencyTable:
    """Tokenize ``data``, count every symbol and return the finalized table."""

    table = FrequencyTable(capacity=capacity)
    for symbol in iter_symbols(data):
        table.observe(symbol)
    table.finalize()
    return table


__all__ = ["SymbolEntry", "FrequencyTable", "count_symbols"]
