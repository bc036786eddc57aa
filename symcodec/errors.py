"""Exception hierarchy shared by the codec pipeline and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from symcodec.config import (
    EXIT_CODEBOOK_ERROR,
    EXIT_CODEWORD_SPACE,
    EXIT_FAILURE,
    EXIT_OPEN_FAILURE,
)


class SymcodecError(Exception):
    """Base class for all errors raised by symcodec."""


class FileOpenError(SymcodecError):
    """An input, codebook, encoded or output file could not be opened."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not open {self.path}: {reason}")


class CodebookFormatError(SymcodecError):
    """A codebook line (or the codebook as a whole) is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class CodewordSpaceError(SymcodecError):
    """More symbols were ranked than the fixed codeword width can address."""


def exit_code_for(exc: BaseException) -> int:
    """Return the process exit code the CLI uses for ``exc``."""

    if isinstance(exc, FileOpenError):
        return EXIT_OPEN_FAILURE
    if isinstance(exc, CodebookFormatError):
        return EXIT_CODEBOOK_ERROR
    if isinstance(exc, CodewordSpaceError):
        return EXIT_CODEWORD_SPACE
    return EXIT_FAILURE


__all__ = [
    "SymcodecError",
    "FileOpenError",
    "CodebookFormatError",
    "CodewordSpaceError",
    "exit_code_for",
]
