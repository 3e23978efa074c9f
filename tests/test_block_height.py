import io
import struct

import cbor2
import pytest
from hypothesis import given, strategies as st

from zewif.block_height import H0, BlockHeight

U32_MAX = 0xFFFFFFFF
heights = st.integers(min_value=0, max_value=U32_MAX)


def test_difference_example():
    genesis = BlockHeight(0)
    millionth = BlockHeight(1_000_000)
    assert millionth - genesis == 1_000_000
    assert genesis - millionth == 0


def test_saturating_sub_example():
    height = BlockHeight(100)
    assert int(height.saturating_sub(50)) == 50
    assert int(height.saturating_sub(200)) == 0
    assert height.saturating_sub(200) == H0


def test_sub_int_saturates():
    assert BlockHeight(5) - 10 == H0


def test_add_saturates():
    top = BlockHeight(U32_MAX)
    assert top + 1 == top
    assert H0 + 7 == BlockHeight(7)


def test_invalid_values():
    with pytest.raises(ValueError):
        BlockHeight(-1)
    with pytest.raises(ValueError):
        BlockHeight(U32_MAX + 1)
    with pytest.raises(ValueError):
        BlockHeight(10) + -1
    with pytest.raises(ValueError):
        BlockHeight(10).saturating_sub(-1)


@given(heights, heights)
def test_add_then_sub_invariant(a, b):
    height = BlockHeight(a)
    result = height + b
    assert result >= height
    assert (result - height) <= b


@given(heights)
def test_parse_roundtrip(value):
    stream = io.BytesIO(struct.pack("<I", value))
    assert BlockHeight.parse(stream) == BlockHeight(value)


def test_parse_short_input():
    with pytest.raises(EOFError):
        BlockHeight.parse(io.BytesIO(b"\x01"))


@given(heights)
def test_cbor_roundtrip(value):
    height = BlockHeight(value)
    assert BlockHeight.from_cbor(height.to_cbor()) == height


def test_cbor_errors():
    with pytest.raises(ValueError):
        BlockHeight.from_cbor(cbor2.dumps(-1))
    with pytest.raises(ValueError):
        BlockHeight.from_cbor(cbor2.dumps(U32_MAX + 1))
    with pytest.raises(ValueError):
        BlockHeight.from_cbor(cbor2.dumps("text"))


def test_display_and_int():
    height = BlockHeight(1_046_400)
    assert str(height) == str(1_046_400)
    assert int(height) == 1_046_400


def test_ordering_and_hash():
    values = [BlockHeight(9), BlockHeight(1), BlockHeight(4)]
    assert sorted(values) == [BlockHeight(1), BlockHeight(4), BlockHeight(9)]
    assert len({BlockHeight(3), BlockHeight(3)}) == 1