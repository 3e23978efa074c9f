"""Block heights."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import BinaryIO

import cbor2

from .compact_size import read_exact

__all__ = ["BlockHeight", "H0"]

_U32_MAX = 0xFFFFFFFF


def _u32(value, what: str) -> int:
    value = operator.index(value)
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{what} out of range for a 32-bit unsigned value: {value}")
    return value


@dataclass(frozen=True, order=True, slots=True)
class BlockHeight:
    """A block's distance from the genesis block, as an unsigned 32-bit value.

    Adding or subtracting a block count saturates at the ends of the range.
    """

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _u32(self.value, "BlockHeight"))

    def saturating_sub(self, value: int) -> "BlockHeight":
        """Subtract ``value`` blocks, stopping at the genesis block."""
        value = _u32(value, "Block count")
        return BlockHeight(max(self.value - value, 0))

    @classmethod
    def parse(cls, stream: BinaryIO) -> "BlockHeight":
        """Read a 32-bit little-endian height."""
        try:
            raw = read_exact(stream, 4)
        except EOFError as exc:
            raise EOFError(f"BlockHeight: {exc}") from exc
        return cls(int.from_bytes(raw, "little"))

    def to_cbor(self) -> bytes:
        """Encode as a CBOR unsigned integer."""
        return cbor2.dumps(self.value)

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "BlockHeight":
        """Decode from a CBOR unsigned integer."""
        value = cbor2.loads(encoded)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("BlockHeight: expected a CBOR integer")
        return cls(value)

    def __add__(self, other):
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        other = _u32(other, "Block count")
        return BlockHeight(min(self.value + other, _U32_MAX))

    def __sub__(self, other):
        if isinstance(other, BlockHeight):
            return max(self.value - other.value, 0)
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.saturating_sub(other)

    def __int__(self) -> int:
        return self.value

    __index__ = __int__

    def __repr__(self) -> str:
        return f"BlockHeight({self.value})"

    def __str__(self) -> str:
        return str(self.value)


#: The height of the genesis block.
H0 = BlockHeight(0)