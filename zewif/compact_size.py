"""Bitcoin/Zcash-style variable-length integers ("compact size")."""

from __future__ import annotations

from typing import BinaryIO

__all__ = ["read_exact", "parse_compact_size", "CompactSize"]


def read_exact(stream: BinaryIO, length: int) -> bytes:
    """Read exactly ``length`` bytes from ``stream``.

    Raises ``EOFError`` if the stream ends before that many bytes are read.
    """
    if length < 0:
        raise ValueError(f"Cannot read a negative number of bytes: {length}")
    data = stream.read(length) if length else b""
    if data is None:
        data = b""
    if len(data) != length:
        raise EOFError(
            f"Buffer underflow: needed {length} bytes, {len(data)} available"
        )
    return bytes(data)


def _read_uint(stream: BinaryIO, width: int) -> int:
    try:
        raw = read_exact(stream, width)
    except EOFError as exc:
        raise EOFError(f"compact size: {exc}") from exc
    return int.from_bytes(raw, "little")


def parse_compact_size(stream: BinaryIO) -> int:
    """Parse a compact-size integer from ``stream``.

    Values below 253 take one byte; larger values are prefixed with 0xfd,
    0xfe or 0xff followed by 2, 4 or 8 little-endian bytes. A prefixed value
    that would fit in a shorter encoding is rejected with ``ValueError``.
    """
    prefix = _read_uint(stream, 1)
    if prefix == 0xFD:
        n = _read_uint(stream, 2)
        if n < 253:
            raise ValueError(f"Compact size with 0xfd prefix must be >= 253, got {n}")
        return n
    if prefix == 0xFE:
        n = _read_uint(stream, 4)
        if n < 0x10000:
            raise ValueError(
                f"Compact size with 0xfe prefix must be >= 0x10000, got {n}"
            )
        return n
    if prefix == 0xFF:
        n = _read_uint(stream, 8)
        if n < 0x100000000:
            raise ValueError(
                f"Compact size with 0xff prefix must be >= 0x100000000, got {n}"
            )
        return n
    return prefix


class CompactSize(int):
    """A non-negative integer that was read in compact-size encoding."""

    def __new__(cls, value: int = 0) -> "CompactSize":
        value = int(value)
        if value < 0:
            raise ValueError(f"CompactSize cannot be negative: {value}")
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, stream: BinaryIO) -> "CompactSize":
        """Read a compact-size value from ``stream``."""
        return cls(parse_compact_size(stream))

    def __repr__(self) -> str:
        return f"CompactSize({int(self)})"

    def __str__(self) -> str:
        return str(int(self))