import pytest

from symcodec.codewords import assign_codewords, codeword_for_rank, codeword_space
from symcodec.errors import CodewordSpaceError
from symcodec.ranking import rank_symbols
from symcodec.table import SymbolEntry, count_symbols


def test_codeword_for_rank():
    assert codeword_for_rank(0) == "0000000"
    assert codeword_for_rank(2) == "0000010"
    assert codeword_for_rank(127) == "1111111"
    assert codeword_for_rank(3, width=4) == "0011"


@pytest.mark.parametrize("rank", [128, -1])
def test_codeword_for_rank_out_of_space(rank):
    with pytest.raises(CodewordSpaceError):
        codeword_for_rank(rank)


def test_codeword_space():
    assert codeword_space(7) == 128
    assert codeword_space(1) == 2
    with pytest.raises(ValueError):
        codeword_space(0)


def test_assign_scenario():
    entries = assign_codewords(rank_symbols(count_symbols(b"ab\nab")))
    assert [(e.symbol, e.codeword) for e in entries] == [
        (b"\\n", "0000000"),
        (b"a", "0000001"),
        (b"b", "0000010"),
    ]


def test_full_space_codewords_unique():
    ranked = [SymbolEntry(symbol=bytes([i]), count=1) for i in range(128)]
    entries = assign_codewords(ranked)
    codewords = [e.codeword for e in entries]
    assert len(set(codewords)) == 128
    assert all(len(c) == 7 for c in codewords)


def test_table_larger_than_space_rejected():
    ranked = [SymbolEntry(symbol=bytes([i]), count=1) for i in range(129)]
    with pytest.raises(CodewordSpaceError):
        assign_codewords(ranked)


def test_wider_codeword_accepts_larger_table():
    ranked = [SymbolEntry(symbol=i.to_bytes(2, "big"), count=1) for i in range(129)]
    entries = assign_codewords(ranked, width=8)
    assert entries[-1].codeword == "10000000"


def test_assign_returns_copies():
    ranked = [SymbolEntry(symbol=b"a", count=1)]
    entries = assign_codewords(ranked)
    assert entries[0].codeword == "0000000"
    assert ranked[0].codeword is None
