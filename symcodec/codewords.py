"""Fixed-width codeword assignment.

The entry at rank ``i`` (0-based) receives the binary representation of ``i``
left-padded with zeros to ``width`` bits. This is not a prefix code derived
from probabilities: every codeword has the same length, and the frequency
sort only decides which symbol gets which rank.

Example
-------
>>> codeword_for_rank(5)
'0000101'
>>> codeword_space(7)
128
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from symcodec.config import Config
from symcodec.errors import CodewordSpaceError
from symcodec.table import SymbolEntry


def codeword_space(width: int = Config.CODEWORD_WIDTH) -> int:
    """Number of distinct codewords addressable with ``width`` bits."""

    if width <= 0:
        raise ValueError("codeword width must be > 0")
    return 1 << width


def codeword_for_rank(rank: int, width: int = Config.CODEWORD_WIDTH) -> str:
    """Return the ``width``-bit codeword for ``rank``.

    Raises
    ------
    CodewordSpaceError
        If ``rank`` does not fit in ``width`` bits.
    """

    space = codeword_space(width)
    if not 0 <= rank < space:
        raise CodewordSpaceError(
            f"Rank {rank} does not fit in a {width}-bit codeword (space: {space})."
        )
    return format(rank, f"0{width}b")


def assign_codewords(
    ranked: Sequence[SymbolEntry], width: int = Config.CODEWORD_WIDTH
) -> list[SymbolEntry]:
    """Return copies of ``ranked`` with codewords set from their positions.

    The whole table is checked against the codeword space up front, so no
    entry is assigned unless every entry can be.
    """

    space = codeword_space(width)
    if len(ranked) > space:
        raise CodewordSpaceError(
            f"{len(ranked)} distinct symbols exceed the {width}-bit codeword space "
            f"({space}). Use a wider codeword."
        )
    return [
        replace(entry, codeword=codeword_for_rank(rank, width))
        for rank, entry in enumerate(ranked)
    ]


__all__ = ["codeword_space", "codeword_for_rank", "assign_codewords"]
