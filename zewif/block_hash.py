"""Block hashes."""

from __future__ import annotations

import binascii
import functools
from typing import BinaryIO

import cbor2

from .blob import HexParseError
from .compact_size import read_exact

__all__ = ["BlockHash"]

_SIZE = 32


@functools.total_ordering
class BlockHash:
    """A 32-byte block identifier.

    The bytes are stored in internal (little-endian) order and displayed
    byte-reversed, the form used by RPC methods and block explorers.
    """

    __slots__ = ("_data",)

    def __init__(self, data) -> None:
        if isinstance(data, (int, str)):
            raise TypeError("BlockHash data must be bytes-like")
        data = bytes(data)
        if len(data) != _SIZE:
            raise ValueError(f"Expected {_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name, value):
        raise AttributeError("BlockHash is immutable")

    @classmethod
    def from_hex(cls, text: str) -> "BlockHash":
        """Decode from the byte-reversed hexadecimal display form."""
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as exc:
            raise HexParseError(f"Not a valid hex string: {exc}") from exc
        if len(data) != _SIZE:
            expected = _SIZE * 2
            raise HexParseError(
                f"Expected {expected} bytes, got {len(text)}",
                expected=expected,
                actual=len(text),
            )
        return cls(data[::-1])

    @classmethod
    def read(cls, stream: BinaryIO) -> "BlockHash":
        """Read 32 raw bytes from ``stream``."""
        return cls(read_exact(stream, _SIZE))

    def write(self, stream: BinaryIO) -> None:
        """Write the 32 raw bytes to ``stream``."""
        stream.write(self._data)

    @classmethod
    def parse(cls, stream: BinaryIO) -> "BlockHash":
        """Read a block hash from a binary stream."""
        try:
            return cls.read(stream)
        except EOFError as exc:
            raise EOFError(f"BlockHash: {exc}") from exc

    def to_cbor(self) -> bytes:
        """Encode as a CBOR byte string in internal byte order."""
        return cbor2.dumps(self._data)

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "BlockHash":
        """Decode from a 32-byte CBOR byte string."""
        value = cbor2.loads(encoded)
        if not isinstance(value, bytes):
            raise ValueError("BlockHash: expected a CBOR byte string")
        if len(value) != _SIZE:
            raise ValueError(
                f"Invalid BlockHash length: expected {_SIZE} bytes, got {len(value)}"
            )
        return cls(value)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return _SIZE

    def __getitem__(self, key):
        return self._data[key]

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlockHash):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other) -> bool:
        if not isinstance(other, BlockHash):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(("BlockHash", self._data))

    def __str__(self) -> str:
        return self._data[::-1].hex()

    def __repr__(self) -> str:
        return f"BlockHash({self})"