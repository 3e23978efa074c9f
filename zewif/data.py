"""Variable-length binary values."""

from __future__ import annotations

import binascii
import functools
from typing import BinaryIO, ClassVar, Iterator

import cbor2

from .compact_size import CompactSize, read_exact

__all__ = ["Data", "data_type"]


@functools.total_ordering
class Data:
    """An immutable byte string of arbitrary length.

    ``data_type`` builds named subclasses for domain-specific values such as
    scripts or encrypted memos.
    """

    _named: ClassVar[bool] = False

    __slots__ = ("_data",)

    def __init__(self, data=b"") -> None:
        if isinstance(data, int):
            raise TypeError("Data must be bytes-like, not an integer")
        if isinstance(data, str):
            raise TypeError("Data must be bytes-like, not a string; use from_hex")
        object.__setattr__(self, "_data", bytes(data))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_hex(cls, text: str):
        """Decode from a hexadecimal string."""
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, ValueError, TypeError) as exc:
            raise ValueError(f"Not a valid hex string: {exc}") from exc
        return cls(data)

    @classmethod
    def concat(cls, *args):
        """Join several byte sequences into one value."""
        return cls(b"".join(bytes(part) for part in args))

    @classmethod
    def parse_len(cls, stream: BinaryIO, length: int):
        """Read exactly ``length`` bytes from ``stream``."""
        try:
            data = read_exact(stream, length)
        except EOFError as exc:
            raise EOFError(f"Parsing Data: {exc}") from exc
        return cls(data)

    @classmethod
    def parse(cls, stream: BinaryIO):
        """Read a compact-size length prefix followed by that many bytes."""
        try:
            length = CompactSize.parse(stream)
        except (EOFError, ValueError) as exc:
            raise type(exc)(f"Data length: {exc}") from exc
        return cls.parse_len(stream, length)

    def hex(self) -> str:
        """Return the bytes as a lower-case hex string."""
        return self._data.hex()

    def to_cbor(self) -> bytes:
        """Encode as a CBOR byte string."""
        return cbor2.dumps(self._data)

    @classmethod
    def from_cbor(cls, encoded: bytes):
        """Decode from a CBOR byte string."""
        value = cbor2.loads(encoded)
        if not isinstance(value, bytes):
            raise ValueError("Data: expected a CBOR byte string")
        return cls(value)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, key):
        return self._data[key]

    def _identity(self):
        return type(self) if self._named else Data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return self._identity() is other._identity() and self._data == other._data

    def __lt__(self, other) -> bool:
        if not isinstance(other, Data) or self._identity() is not other._identity():
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        inner = f"Data<{len(self._data)}>({self.hex()})"
        return f"{type(self).__name__}({inner})" if self._named else inner


def data_type(name: str) -> type[Data]:
    """Create a named ``Data`` subclass for variable-length values."""
    return type(
        name,
        (Data,),
        {
            "__slots__": (),
            "_named": True,
            "__doc__": "A variable-length binary value.",
            "__module__": Data.__module__,
        },
    )