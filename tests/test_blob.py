import io

import cbor2
import pytest
from hypothesis import given, strategies as st

from zewif.blob import Blob, Blob20, Blob32, Blob64, HexParseError, blob_type

TxId = blob_type("TxId", 32)
Blob4 = blob_type("Blob4", 4)


def test_default_is_zero_filled():
    blob = Blob32()
    assert len(blob) == 32
    assert bytes(blob) == bytes(32)
    assert blob[0] == 0
    assert bool(blob)


def test_fixed_sizes():
    assert len(Blob20()) == 20
    assert len(Blob64()) == 64


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Blob32(b"\x01\x02\x03\x04")
    with pytest.raises(ValueError):
        blob_type("Five", 5)(b"\x01\x02\x03\x04")


def test_integer_data_rejected():
    with pytest.raises(TypeError):
        Blob32(32)


def test_from_hex_example():
    blob = Blob4.from_hex("01020304")
    assert bytes(blob) == b"\x01\x02\x03\x04"
    assert list(blob) == [1, 2, 3, 4]
    assert blob[1:3] == b"\x02\x03"


def test_from_hex_wrong_size():
    with pytest.raises(HexParseError) as info:
        Blob32.from_hex("01020304")
    assert info.value.expected == 64
    assert info.value.actual == 8


@pytest.mark.parametrize("text", ["01020Z", "abc", "01 02"])
def test_from_hex_invalid(text):
    with pytest.raises(HexParseError, match="Not a valid hex string"):
        Blob.from_hex(text)


def test_unsized_blob_accepts_any_length():
    assert len(Blob.from_hex("0102030405")) == 5
    with pytest.raises(TypeError):
        Blob()
    with pytest.raises(TypeError):
        Blob.parse(io.BytesIO(b"\x00"))


def test_display_and_debug():
    blob = Blob(b"\x01\x02\x03\x04")
    assert str(blob) == "01020304"
    assert repr(blob) == "Blob<4>(01020304)"
    txid = TxId()
    expected = "TxId(Blob<32>(" + "00" * 32 + "))"
    assert repr(txid) == expected
    assert str(txid) == expected


def test_parse_reads_exact_size():
    stream = io.BytesIO(bytes(range(40)))
    blob = Blob32.parse(stream)
    assert bytes(blob) == bytes(range(32))
    assert stream.read() == bytes(range(32, 40))


def test_parse_short_input():
    with pytest.raises(EOFError, match="Parsing TxId"):
        TxId.parse(io.BytesIO(bytes(10)))
    with pytest.raises(EOFError, match="Parsing Blob<32>"):
        Blob32.parse(io.BytesIO(bytes(10)))


def test_cbor_wire_format():
    assert Blob4.from_hex("01020304").to_cbor() == b"\x44\x01\x02\x03\x04"


def test_from_cbor_wrong_length():
    with pytest.raises(ValueError, match="Blob"):
        Blob32.from_cbor(cbor2.dumps(b"\x01\x02"))


def test_from_cbor_not_bytes():
    with pytest.raises(ValueError):
        Blob32.from_cbor(cbor2.dumps(42))


def test_equality_and_hashing():
    data = bytes(range(32))
    assert Blob32(data) == Blob(data)
    assert hash(Blob32(data)) == hash(Blob(data))
    assert TxId(data) == TxId(data)
    assert not (TxId(data) == Blob32(data))
    assert len({TxId(data), TxId(data), TxId(bytes(32))}) == 2


def test_immutable():
    blob = Blob32()
    with pytest.raises(AttributeError):
        blob._data = b"x"
    assert bytes(blob) == bytes(32)


def test_blob_type_negative_size():
    with pytest.raises(ValueError):
        blob_type("Bad", -1)


@given(st.binary(min_size=32, max_size=32))
def test_hex_roundtrip(data):
    blob = Blob32(data)
    assert Blob32.from_hex(blob.hex()) == blob


@given(st.binary(min_size=32, max_size=32))
def test_cbor_roundtrip(data):
    txid = TxId(data)
    assert TxId.from_cbor(txid.to_cbor()) == txid


@given(st.binary(min_size=20, max_size=20))
def test_parse_roundtrip(data):
    assert bytes(Blob20.parse(io.BytesIO(data))) == data