"""MSB-first bit packing and fixed-width window extraction.

Packing concatenates codeword bits and zero-fills the last partial byte;
unpacking expands every byte to eight bits, most significant first. Neither
direction writes a header or length prefix, so the decoder cannot tell
trailing padding from a real all-zero codeword. ``window_values`` resolves
this the only way the format allows: all-zero windows that lie entirely
inside the final ``padding_span`` bits are treated as padding.

Example
-------
>>> pack_codewords(["0000001", "0000010"])
b'\\x02\\x08'
>>> window_values(unpack_bits(b"\\x02\\x08"), 7).tolist()
[1, 2]
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from symcodec.config import Config

_ZERO = ord("0")


def pack_codewords(codewords: Iterable[str]) -> bytes:
    """Concatenate ``codewords`` and pack them MSB-first into bytes."""

    bits = "".join(codewords)
    if not bits:
        return b""
    raw = np.frombuffer(bits.encode("ascii"), dtype=np.uint8)
    if np.any((raw != _ZERO) & (raw != _ZERO + 1)):
        raise ValueError("codewords must contain only '0' and '1'")
    # packbits zero-fills the final partial byte
    return np.packbits(raw - _ZERO).tobytes()


def unpack_bits(data: bytes) -> np.ndarray:
    """Expand ``data`` into a flat uint8 array of bits, MSB-first per byte."""

    return np.unpackbits(np.frombuffer(data, dtype=np.uint8))


def bits_to_string(bits: np.ndarray) -> str:
    """Render a bit array as a ``'0'``/``'1'`` string (diagnostics and tests)."""

    return (np.asarray(bits, dtype=np.uint8) + _ZERO).tobytes().decode("ascii")


def window_values(
    bits: np.ndarray,
    width: int = Config.CODEWORD_WIDTH,
    padding_span: int = Config.PADDING_SPAN,
) -> np.ndarray:
    """Split ``bits`` into non-overlapping ``width``-bit windows as integers.

    A trailing partial window is ignored. Trailing all-zero windows that start
    within the last ``padding_span`` bits are discarded as padding; for a
    7-bit width this drops at most the final window, and only when it ends
    exactly at the end of the stream.
    """

    if width <= 0:
        raise ValueError("window width must be > 0")
    bits = np.asarray(bits)
    count = bits.size // width
    if count == 0:
        return np.zeros(0, dtype=np.int64)

    windows = bits[: count * width].astype(np.int64).reshape(count, width)
    weights = np.left_shift(np.int64(1), np.arange(width - 1, -1, -1, dtype=np.int64))
    values = windows @ weights

    padding_start = bits.size - padding_span
    while count and values[count - 1] == 0 and (count - 1) * width >= padding_start:
        count -= 1
    return values[:count]


__all__ = ["pack_codewords", "unpack_bits", "bits_to_string", "window_values"]
