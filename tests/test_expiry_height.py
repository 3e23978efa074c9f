import io

import cbor2
import pytest
from hypothesis import given, strategies as st

from zewif.expiry_height import ExpiryHeight

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)


def test_zero_means_no_expiry():
    assert ExpiryHeight(0).as_option() is None


def test_nonzero_as_option_is_self():
    expiry = ExpiryHeight(1_050_000)
    assert expiry.as_option() is expiry


@given(u32)
def test_int_round_trip(value):
    assert int(ExpiryHeight(value)) == value


@given(u32)
def test_parse_little_endian(value):
    stream = io.BytesIO(value.to_bytes(4, "little") + b"x")
    assert ExpiryHeight.parse(stream) == ExpiryHeight(value)
    assert stream.read() == b"x"


def test_parse_short_stream():
    with pytest.raises(EOFError):
        ExpiryHeight.parse(io.BytesIO(b"\x01"))


@given(u32)
def test_cbor_round_trip(value):
    expiry = ExpiryHeight(value)
    encoded = expiry.to_cbor()
    assert encoded == cbor2.dumps(value)
    assert ExpiryHeight.from_cbor(encoded) == expiry


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_out_of_range(value):
    with pytest.raises(ValueError):
        ExpiryHeight(value)


def test_from_cbor_out_of_range():
    with pytest.raises(ValueError):
        ExpiryHeight.from_cbor(cbor2.dumps(0x1_0000_0000))


def test_from_cbor_not_integer():
    with pytest.raises(ValueError):
        ExpiryHeight.from_cbor(cbor2.dumps(b"\x00"))


def test_equality_and_hash():
    assert len({ExpiryHeight(7), ExpiryHeight(7), ExpiryHeight(8)}) == 2