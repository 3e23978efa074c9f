"""Transaction expiry heights."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import BinaryIO

import cbor2

from .compact_size import read_exact

__all__ = ["ExpiryHeight"]

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class ExpiryHeight:
    """The block height after which an unmined transaction expires.

    A height of 0 means the transaction never expires.
    """

    value: int = 0

    def __post_init__(self) -> None:
        value = operator.index(self.value)
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"ExpiryHeight out of range: {value}")
        object.__setattr__(self, "value", value)

    def as_option(self) -> "ExpiryHeight | None":
        """Return ``None`` for "no expiry" (height 0), otherwise ``self``."""
        return None if self.value == 0 else self

    @classmethod
    def parse(cls, stream: BinaryIO) -> "ExpiryHeight":
        """Read a 32-bit little-endian expiry height."""
        try:
            raw = read_exact(stream, 4)
        except EOFError as exc:
            raise EOFError(f"expiry_height: {exc}") from exc
        return cls(int.from_bytes(raw, "little"))

    def to_cbor(self) -> bytes:
        """Encode as a CBOR unsigned integer."""
        return cbor2.dumps(self.value)

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "ExpiryHeight":
        """Decode from a CBOR unsigned integer."""
        value = cbor2.loads(encoded)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("ExpiryHeight: expected a CBOR integer")
        return cls(value)

    def __int__(self) -> int:
        return self.value

    __index__ = __int__

    def __repr__(self) -> str:
        return f"ExpiryHeight({self.value})"