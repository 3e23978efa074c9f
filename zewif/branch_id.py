"""Consensus branch identifiers."""

from __future__ import annotations

import enum
from typing import BinaryIO

import cbor2

from .compact_size import read_exact

__all__ = ["BranchId"]


class BranchId(enum.IntEnum):
    """The consensus rules of a network upgrade, by its 32-bit branch ID."""

    SPROUT = 0x00000000
    OVERWINTER = 0x5BA81B19
    SAPLING = 0x76B809BB
    BLOSSOM = 0x2BB40E60
    HEARTWOOD = 0xF5B9230B
    CANOPY = 0xE9FF75A6
    NU5 = 0xC2D6D0B4
    NU6 = 0xC8E71055

    @classmethod
    def parse(cls, stream: BinaryIO) -> "BranchId":
        """Read a 32-bit little-endian branch ID."""
        try:
            raw = read_exact(stream, 4)
        except EOFError as exc:
            raise EOFError(f"BranchId: {exc}") from exc
        value = int.from_bytes(raw, "little")
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown BranchId: {value}") from exc

    def to_cbor(self) -> bytes:
        """Encode as a CBOR unsigned integer."""
        return cbor2.dumps(int(self))

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "BranchId":
        """Decode from a CBOR unsigned integer."""
        value = cbor2.loads(encoded)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("BranchId: expected a CBOR integer")
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"BranchId: integer out of range: {value}")
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown BranchId: {value}") from exc

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)