"""Centralized configuration for the symbol codec.

Defines immutable defaults for codeword width, symbol table capacity, the
codebook number format, and the process exit codes used by the CLI so that
encoder and decoder agree without sharing any in-memory state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Codeword assignment
    CODEWORD_WIDTH: int = 7

    # Symbol table
    MAX_SYMBOLS: int = 1024

    # Codebook serialization
    PROBABILITY_DIGITS: int = 7

    # Decoding
    DEFAULT_NEWLINES: str = "preserve"
    # Zero padding never exceeds one byte minus one bit
    PADDING_SPAN: int = 7


# Process exit codes
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2  # click.UsageError
EXIT_OPEN_FAILURE: int = 3
EXIT_CODEBOOK_ERROR: int = 4
EXIT_CODEWORD_SPACE: int = 5

# Carriage-return handling applied when expanding decoded symbols.
NEWLINE_MODES: tuple[str, ...] = ("preserve", "crlf", "strip")

# Escape tokens substituted for raw control characters in the symbol table.
ESCAPE_TOKENS: dict[bytes, bytes] = {
    b"\n": b"\\n",
    b"\t": b"\\t",
    b"\r": b"\\r",
}


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
