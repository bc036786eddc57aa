"""Segmentation of a byte stream into symbol units.

A symbol unit is one logical character: a single ASCII byte or a multi-byte
UTF-8 sequence whose length is read from the leading byte. The three control
characters ``\\n``, ``\\t`` and ``\\r`` are replaced by visible two-byte
escapes so that neither the symbol table nor the codebook ever holds a raw
control byte.

The same tokenizer drives both the frequency-counting pass and the packing
pass, so the two passes always agree on symbol boundaries.

Examples
--------
>>> list(iter_symbols("añ\\n".encode("utf-8")))
[b'a', b'\\xc3\\xb1', b'\\\\n']
>>> expand_symbol(b"\\\\t")
b'\\t'
"""

from __future__ import annotations

from typing import Iterator, Optional

from symcodec.config import ESCAPE_TOKENS

_EXPANSIONS: dict[bytes, bytes] = {token: raw for raw, token in ESCAPE_TOKENS.items()}


def sequence_length(lead: int) -> int:
    """Return the UTF-8 sequence length announced by ``lead``.

    Bytes that cannot start a sequence (continuation bytes, ``11111xxx``)
    are treated as one-byte symbols.
    """

    if lead & 0x80 == 0:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 1


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def escape_symbol(raw: bytes) -> bytes:
    """Map a raw control character to its escape token; other bytes pass through."""

    return ESCAPE_TOKENS.get(raw, raw)


def expand_symbol(symbol: bytes) -> bytes:
    """Inverse of ``escape_symbol``."""

    return _EXPANSIONS.get(symbol, symbol)


def is_escape(symbol: bytes) -> bool:
    return symbol in _EXPANSIONS


def next_symbol(data: bytes, pos: int) -> Optional[tuple[bytes, int]]:
    """Consume the symbol starting at ``pos``.

    Returns ``(symbol, next_pos)``, or ``None`` once ``pos`` has reached the
    end of ``data``. A multi-byte sequence cut short by the end of the stream
    or by a byte that is not a continuation byte yields whatever bytes were
    gathered up to that point.
    """

    size = len(data)
    if pos >= size:
        return None
    limit = min(pos + sequence_length(data[pos]), size)
    end = pos + 1
    while end < limit and _is_continuation(data[end]):
        end += 1
    return escape_symbol(bytes(data[pos:end])), end


def iter_symbols(data: bytes) -> Iterator[bytes]:
    """Yield every symbol unit of ``data`` in stream order."""

    pos = 0
    while True:
        step = next_symbol(data, pos)
        if step is None:
            return
        symbol, pos = step
        yield symbol


__all__ = [
    "sequence_length",
    "escape_symbol",
    "expand_symbol",
    "is_escape",
    "next_symbol",
    "iter_symbols",
]
