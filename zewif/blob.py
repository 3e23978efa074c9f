"""Fixed-size binary values."""

from __future__ import annotations

import binascii
from typing import BinaryIO, ClassVar, Iterator

import cbor2

from .compact_size import read_exact

__all__ = ["HexParseError", "Blob", "blob_type", "Blob20", "Blob32", "Blob64"]


class HexParseError(ValueError):
    """Raised when a hex string cannot be decoded into a blob.

    For a size mismatch, ``expected`` and ``actual`` hold the expected and
    actual number of hex characters; for malformed hex they are ``None``.
    """

    def __init__(self, message: str, *, expected: int | None = None,
                 actual: int | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class Blob:
    """An immutable byte string, of fixed length when ``SIZE`` is set.

    Subclasses fix the length through ``SIZE``; ``blob_type`` builds named
    subclasses for domain-specific values such as transaction identifiers.
    """

    SIZE: ClassVar[int | None] = None
    _named: ClassVar[bool] = False

    __slots__ = ("_data",)

    def __init__(self, data=None) -> None:
        if data is None:
            if self.SIZE is None:
                raise TypeError("A Blob without a fixed size needs data")
            data = bytes(self.SIZE)
        elif isinstance(data, int):
            raise TypeError("Blob data must be bytes-like, not an integer")
        else:
            data = bytes(data)
        if self.SIZE is not None and len(data) != self.SIZE:
            raise ValueError(f"Expected {self.SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def _label(cls, size: int) -> str:
        return cls.__name__ if cls._named else f"Blob<{size}>"

    @classmethod
    def from_hex(cls, text: str):
        """Decode a blob from a hexadecimal string."""
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as exc:
            raise HexParseError(f"Not a valid hex string: {exc}") from exc
        if cls.SIZE is not None and len(data) != cls.SIZE:
            expected = cls.SIZE * 2
            raise HexParseError(
                f"Expected {expected} bytes, got {len(text)}",
                expected=expected,
                actual=len(text),
            )
        return cls(data)

    @classmethod
    def parse(cls, stream: BinaryIO):
        """Read exactly ``SIZE`` bytes from ``stream``."""
        if cls.SIZE is None:
            raise TypeError("Cannot parse a Blob without a fixed size")
        try:
            data = read_exact(stream, cls.SIZE)
        except EOFError as exc:
            raise EOFError(f"Parsing {cls._label(cls.SIZE)}: {exc}") from exc
        return cls(data)

    def hex(self) -> str:
        """Return the bytes as a lower-case hex string."""
        return self._data.hex()

    def to_cbor(self) -> bytes:
        """Encode as a CBOR byte string."""
        return cbor2.dumps(self._data)

    @classmethod
    def from_cbor(cls, encoded: bytes):
        """Decode from a CBOR byte string of the right length."""
        value = cbor2.loads(encoded)
        if not isinstance(value, bytes):
            raise ValueError("Blob: expected a CBOR byte string")
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Blob: {exc}") from exc

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, key):
        return self._data[key]

    def _identity(self):
        return type(self) if self._named else Blob

    def __eq__(self, other) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return self._identity() is other._identity() and self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        inner = f"Blob<{len(self._data)}>({self.hex()})"
        return f"{type(self).__name__}({inner})" if self._named else inner

    def __str__(self) -> str:
        return repr(self) if self._named else self.hex()


def blob_type(name: str, size: int) -> type[Blob]:
    """Create a named ``Blob`` subclass holding exactly ``size`` bytes."""
    if size < 0:
        raise ValueError(f"Blob size cannot be negative: {size}")
    return type(
        name,
        (Blob,),
        {
            "__slots__": (),
            "SIZE": size,
            "_named": True,
            "__doc__": f"A {size}-byte value.",
            "__module__": Blob.__module__,
        },
    )


class Blob20(Blob):
    """A 20-byte blob."""

    __slots__ = ()
    SIZE = 20


class Blob32(Blob):
    """A 32-byte blob."""

    __slots__ = ()
    SIZE = 32


class Blob64(Blob):
    """A 64-byte blob."""

    __slots__ = ()
    SIZE = 64