import numpy as np
import pytest

from symcodec.bitstream import bits_to_string, pack_codewords, unpack_bits, window_values


SCENARIO_CODEWORDS = ["0000001", "0000010", "0000000", "0000001", "0000010"]


def test_pack_scenario():
    """35 bits are packed MSB-first and zero-padded to 5 bytes."""

    assert pack_codewords(SCENARIO_CODEWORDS) == bytes([0x02, 0x08, 0x00, 0x10, 0x40])


def test_pack_empty():
    assert pack_codewords([]) == b""


def test_pack_rejects_non_binary():
    with pytest.raises(ValueError):
        pack_codewords(["0000002"])


def test_pack_whole_bytes_have_no_padding():
    assert pack_codewords(["1111111", "1"]) == b"\xff"


def test_unpack_msb_first():
    bits = unpack_bits(b"\x80\x01")
    assert bits_to_string(bits) == "1000000000000001"
    assert bits.dtype == np.uint8


def test_window_values_scenario():
    values = window_values(unpack_bits(bytes([0x02, 0x08, 0x00, 0x10, 0x40])), 7)
    assert values.tolist() == [1, 2, 0, 1, 2]


def test_full_padding_window_discarded():
    """7 codewords leave exactly 7 zero padding bits, which form a discarded window."""

    payload = pack_codewords(["0000001"] * 7)
    assert len(payload) == 7
    bits = unpack_bits(payload)
    assert bits.size // 7 == 8
    assert window_values(bits, 7).tolist() == [1] * 7


def test_zero_codeword_before_end_kept():
    payload = pack_codewords(["0000000", "0000001"])
    assert window_values(unpack_bits(payload), 7).tolist() == [0, 1]


def test_single_zero_codeword_kept():
    """A lone rank-0 symbol plus one padding bit does not end on a window boundary."""

    assert window_values(unpack_bits(b"\x00"), 7).tolist() == [0]


def test_trailing_zero_codeword_on_byte_boundary_is_lost():
    """Known limitation: a final rank-0 codeword ending on a byte boundary reads as padding."""

    payload = pack_codewords(["0000001"] * 7 + ["0000000"])
    assert len(payload) == 7
    assert window_values(unpack_bits(payload), 7).tolist() == [1] * 7


def test_wide_windows_never_padding():
    assert window_values(unpack_bits(b"\x00"), 8).tolist() == [0]


def test_partial_window_ignored():
    assert window_values(unpack_bits(b"\x02"), 7).tolist() == [1]


def test_window_values_empty():
    assert window_values(unpack_bits(b""), 7).tolist() == []
    with pytest.raises(ValueError):
        window_values(unpack_bits(b"\x00"), 0)
