"""Decode path: unpack bits, resolve fixed-width windows, rebuild the text.

The codeword width comes from the loaded codebook. Windows with no matching
codeword are skipped. Escape tokens are expanded back to control characters,
with carriage returns handled on the resolved symbol stream according to the
``newlines`` mode:

- ``preserve``: every ``\\r`` becomes CR (exact round trip).
- ``crlf``: ``\\r`` directly followed by ``\\n`` collapses to one LF; a lone
  ``\\r`` stays CR.
- ``strip``: every ``\\r`` is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable
import logging

import numpy as np

from symcodec.bitstream import unpack_bits, window_values
from symcodec.codebook import Codebook, load_codebook
from symcodec.config import Config, NEWLINE_MODES
from symcodec.tokenizer import expand_symbol
from symcodec.utils import read_file, write_file


_LOGGER = logging.getLogger(__name__)

_CR_TOKEN = b"\\r"
_LF_TOKEN = b"\\n"


@dataclass
class DecodeResult:
    text: bytes
    windows: int
    resolved: int
    skipped_windows: int
    padding_windows: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "windows": self.windows,
            "resolved_symbols": self.resolved,
            "skipped_windows": self.skipped_windows,
            "padding_windows": self.padding_windows,
            "output_bytes": len(self.text),
        }


def resolve_symbols(values: Iterable[int] | np.ndarray, codebook: Codebook) -> tuple[list[bytes], int]:
    """Map window values to symbols; returns ``(symbols, skipped_count)``."""

    symbols: list[bytes] = []
    skipped = 0
    for value in values:
        entry = codebook.resolve(int(value))
        if entry is None:
            skipped += 1
            continue
        symbols.append(entry.symbol)
    if skipped:
        _LOGGER.warning("%d window(s) matched no codeword and were skipped", skipped)
    return symbols, skipped


def expand_symbols(symbols: Iterable[bytes], newlines: str = Config.DEFAULT_NEWLINES) -> bytes:
    """Concatenate ``symbols`` with escape tokens expanded."""

    if newlines not in NEWLINE_MODES:
        raise ValueError(f"Unknown newlines mode: {newlines!r}. Available: {', '.join(NEWLINE_MODES)}")

    out = bytearray()
    pending_cr = False
    for symbol in symbols:
        if pending_cr:
            pending_cr = False
            if symbol == _LF_TOKEN:
                out += b"\n"
                continue
            out += b"\r"
        if symbol == _CR_TOKEN and newlines != "preserve":
            if newlines == "crlf":
                pending_cr = True
            continue
        out += expand_symbol(symbol)
    if pending_cr:
        out += b"\r"
    return bytes(out)


def decode_bytes(
    payload: bytes,
    codebook: Codebook,
    *,
    newlines: str = Config.DEFAULT_NEWLINES,
) -> DecodeResult:
    """Decode ``payload`` with ``codebook``."""

    bits = unpack_bits(payload)
    values = window_values(bits, codebook.width)
    symbols, skipped = resolve_symbols(values, codebook)
    return DecodeResult(
        text=expand_symbols(symbols, newlines),
        windows=len(values),
        resolved=len(symbols),
        skipped_windows=skipped,
        padding_windows=bits.size // codebook.width - len(values),
    )


def decode_file(
    output_path: Path,
    codebook_path: Path,
    encoded_path: Path,
    *,
    newlines: str = Config.DEFAULT_NEWLINES,
    strict: bool = True,
) -> DecodeResult:
    """Decode ``encoded_path`` with the codebook at ``codebook_path``.

    The codebook is loaded first; failing to open it aborts before the
    encoded or output files are touched.
    """

    codebook = load_codebook(codebook_path, strict=strict)
    payload = read_file(encoded_path)
    result = decode_bytes(payload, codebook, newlines=newlines)
    write_file(output_path, result.text)
    _LOGGER.info("Decoded %d symbols into %s", result.resolved, output_path)
    return result


__all__ = [
    "DecodeResult",
    "resolve_symbols",
    "expand_symbols",
    "decode_bytes",
    "decode_file",
]
