"""Encode path: count, rank, assign, write the codebook and pack the input.

The input is read once and tokenized twice with the same tokenizer: first to
build the frequency table, then to emit codewords in stream order.

Example
-------
>>> result = encode_bytes(b"ab\\nab")
>>> [e.codeword for e in result.codebook]
['0000000', '0000001', '0000010']
>>> result.payload
b'\\x02\\x08\\x00\\x10@'
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import logging

from symcodec.bitstream import pack_codewords, unpack_bits, window_values
from symcodec.codebook import Codebook, write_codebook
from symcodec.codewords import assign_codewords
from symcodec.config import Config
from symcodec.ranking import rank_symbols
from symcodec.table import FrequencyTable, count_symbols
from symcodec.tokenizer import iter_symbols
from symcodec.utils import read_file, write_file


_LOGGER = logging.getLogger(__name__)


@dataclass
class PackResult:
    payload: bytes
    encoded_symbols: int
    skipped_symbols: int
    bit_length: int


@dataclass
class EncodeResult:
    """Everything produced by one encode run.

    ``lost_tail_symbols`` counts trailing all-zero codewords that the decoder
    will take for padding and therefore not reproduce.
    """

    table: FrequencyTable
    codebook: Codebook
    payload: bytes
    encoded_symbols: int
    skipped_symbols: int
    bit_length: int
    lost_tail_symbols: int

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.table.to_dict(),
            "codeword_width": self.codebook.width,
            "codebook_entries": len(self.codebook),
            "encoded_symbols": self.encoded_symbols,
            "skipped_symbols": self.skipped_symbols,
            "lost_tail_symbols": self.lost_tail_symbols,
            "encoded_bits": self.bit_length,
            "encoded_bytes": len(self.payload),
        }


def build_codebook(
    data: bytes,
    *,
    width: int = Config.CODEWORD_WIDTH,
    capacity: int = Config.MAX_SYMBOLS,
) -> tuple[FrequencyTable, Codebook]:
    """Count symbols in ``data`` and return the table and its ranked codebook."""

    table = count_symbols(data, capacity=capacity)
    entries = assign_codewords(rank_symbols(table), width=width)
    return table, Codebook(entries, width=width)


def pack_symbols(data: bytes, codebook: Codebook) -> PackResult:
    """Emit the codeword of every symbol of ``data`` in stream order.

    Symbols missing from ``codebook`` (dropped at capacity) are skipped.
    """

    codewords: list[str] = []
    skipped = 0
    for symbol in iter_symbols(data):
        codeword = codebook.lookup(symbol)
        if codeword is None:
            skipped += 1
            continue
        codewords.append(codeword)
    if skipped:
        _LOGGER.warning("%d symbol occurrence(s) not in the codebook were skipped", skipped)
    return PackResult(
        payload=pack_codewords(codewords),
        encoded_symbols=len(codewords),
        skipped_symbols=skipped,
        bit_length=len(codewords) * codebook.width,
    )


def encode_bytes(
    data: bytes,
    *,
    width: int = Config.CODEWORD_WIDTH,
    capacity: int = Config.MAX_SYMBOLS,
) -> EncodeResult:
    """Build the codebook for ``data`` and pack ``data`` with it."""

    table, codebook = build_codebook(data, width=width, capacity=capacity)
    packed = pack_symbols(data, codebook)

    decodable = len(window_values(unpack_bits(packed.payload), codebook.width))
    lost = packed.encoded_symbols - decodable
    if lost:
        _LOGGER.warning(
            "Encoded stream ends with %d all-zero codeword(s) that decode as padding",
            lost,
        )
    return EncodeResult(
        table=table,
        codebook=codebook,
        payload=packed.payload,
        encoded_symbols=packed.encoded_symbols,
        skipped_symbols=packed.skipped_symbols,
        bit_length=packed.bit_length,
        lost_tail_symbols=lost,
    )


def encode_file(
    input_path: Path,
    codebook_path: Path,
    encoded_path: Path,
    *,
    width: int = Config.CODEWORD_WIDTH,
    capacity: int = Config.MAX_SYMBOLS,
) -> EncodeResult:
    """Encode ``input_path`` into ``codebook_path`` and ``encoded_path``."""

    data = read_file(input_path)
    _LOGGER.info("Read %d bytes from %s", len(data), input_path)
    result = encode_bytes(data, width=width, capacity=capacity)
    write_codebook(result.codebook, codebook_path)
    write_file(encoded_path, result.payload)
    _LOGGER.info("Encoded %d symbols into %d bytes: %s", result.encoded_symbols, len(result.payload), encoded_path)
    return result


__all__ = [
    "PackResult",
    "EncodeResult",
    "build_codebook",
    "pack_symbols",
    "encode_bytes",
    "encode_file",
]
