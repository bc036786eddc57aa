"""Shared utilities for hashing and filesystem operations.

File access for the encode/decode pipeline goes through ``read_file`` and
``write_file`` so that every ``OSError`` surfaces as a ``FileOpenError``
naming the failing path.
"""

from __future__ import annotations

from hashlib import sha256 as _sha256
from pathlib import Path

from symcodec.errors import FileOpenError


def compute_sha256(path: Path, chunk_size: int = 1024 * 1024) -> str:
    """Return the SHA256 hex digest for the file at ``path``.

    Parameters
    ----------
    path:
        File to hash.
    chunk_size:
        Bytes read per iteration (default: 1 MiB).
    """

    h = _sha256()
    with path.open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def get_file_size(path: Path) -> int:
    """Return file size in bytes for ``path``."""

    return path.stat().st_size


def read_file(path: Path) -> bytes:
    """Read ``path`` fully, raising ``FileOpenError`` on any OS failure."""

    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc


def write_file(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path``, raising ``FileOpenError`` on any OS failure."""

    try:
        with path.open("wb") as f:
            f.write(data)
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc
