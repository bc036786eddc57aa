"""
symcodec: fixed-width symbol codec for text files.

Counts symbol frequencies over a byte stream, ranks the symbols, assigns each
rank a fixed-width binary codeword, and packs the stream into bits. A textual
codebook carries the table from the encoder to the decoder.
"""

__all__ = [
    "Config",
    "get_config",
    "__version__",
    # Errors
    "SymcodecError",
    "FileOpenError",
    "CodebookFormatError",
    "CodewordSpaceError",
    # Symbol table (eager imports; lightweight)
    "SymbolEntry",
    "FrequencyTable",
    "count_symbols",
    "iter_symbols",
    "rank_symbols",
    "assign_codewords",
    "Codebook",
    "load_codebook",
    "write_codebook",
    # Pipelines (lazy-imported via __getattr__)
    "encode_bytes",
    "encode_file",
    "decode_bytes",
    "decode_file",
]

__version__ = "0.1.0"

from typing import Any

from symcodec.config import Config, get_config
from symcodec.errors import (
    SymcodecError,
    FileOpenError,
    CodebookFormatError,
    CodewordSpaceError,
)
from symcodec.tokenizer import iter_symbols
from symcodec.table import SymbolEntry, FrequencyTable, count_symbols
from symcodec.ranking import rank_symbols
from symcodec.codewords import assign_codewords
from symcodec.codebook import Codebook, load_codebook, write_codebook


def __getattr__(name: str) -> Any:  # lazy attribute access keeps numpy out of plain imports
    if name == "encode_bytes":
        from symcodec.encoder import encode_bytes as _eb

        return _eb
    if name == "encode_file":
        from symcodec.encoder import encode_file as _ef

        return _ef
    if name == "decode_bytes":
        from symcodec.decoder import decode_bytes as _db

        return _db
    if name == "decode_file":
        from symcodec.decoder import decode_file as _df

        return _df
    raise AttributeError(f"module 'symcodec' has no attribute {name!r}")
