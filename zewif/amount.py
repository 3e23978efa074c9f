"""Monetary amounts in zatoshis."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import BinaryIO, Iterable

import cbor2

from .compact_size import read_exact

__all__ = ["COIN", "MAX_MONEY", "MAX_BALANCE", "Amount"]

#: Number of zatoshis in one ZEC.
COIN = 100_000_000
#: Maximum possible ZEC supply in zatoshis (21 million ZEC).
MAX_MONEY = 21_000_000 * COIN
#: Maximum balance as a signed value.
MAX_BALANCE = MAX_MONEY

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _le_int(data, *, signed: bool) -> int:
    raw = bytes(data)
    if len(raw) != 8:
        raise ValueError(f"Expected 8 bytes, got {len(raw)}")
    return int.from_bytes(raw, "little", signed=signed)


@dataclass(frozen=True, order=True, slots=True)
class Amount:
    """A signed count of zatoshis within ``-MAX_BALANCE..=MAX_BALANCE``.

    Arithmetic is range-checked: a result outside the valid range raises
    ``ValueError``.
    """

    zats: int = 0

    def __post_init__(self) -> None:
        zats = operator.index(self.zats)
        if zats < -MAX_BALANCE:
            raise ValueError(f"Amount underflow: {zats}")
        if zats > MAX_BALANCE:
            raise ValueError(f"Amount overflow: {zats}")
        object.__setattr__(self, "zats", zats)

    @classmethod
    def zero(cls) -> "Amount":
        """Return a zero amount."""
        return cls(0)

    @classmethod
    def from_i64(cls, amount: int) -> "Amount":
        """Create an amount in ``-MAX_BALANCE..=MAX_BALANCE``."""
        return cls(amount)

    @classmethod
    def from_nonnegative_i64(cls, amount: int) -> "Amount":
        """Create an amount in ``0..=MAX_BALANCE``."""
        amount = operator.index(amount)
        if amount < 0:
            raise ValueError(f"Amount underflow: {amount}")
        return cls(amount)

    @classmethod
    def from_u64(cls, amount: int) -> "Amount":
        """Create an amount in ``0..=MAX_MONEY`` from an unsigned value."""
        amount = operator.index(amount)
        if amount < 0:
            raise ValueError(f"Not an unsigned value: {amount}")
        if amount > MAX_MONEY:
            raise ValueError(f"Amount overflow: {amount}")
        return cls(amount)

    @classmethod
    def from_i64_le_bytes(cls, data) -> "Amount":
        """Read a signed 64-bit little-endian amount."""
        return cls.from_i64(_le_int(data, signed=True))

    @classmethod
    def from_nonnegative_i64_le_bytes(cls, data) -> "Amount":
        """Read a non-negative signed 64-bit little-endian amount."""
        return cls.from_nonnegative_i64(_le_int(data, signed=True))

    @classmethod
    def from_u64_le_bytes(cls, data) -> "Amount":
        """Read an unsigned 64-bit little-endian amount."""
        return cls.from_u64(_le_int(data, signed=False))

    def to_i64_le_bytes(self) -> bytes:
        """Encode as a signed 64-bit little-endian integer."""
        return self.zats.to_bytes(8, "little", signed=True)

    def to_u64(self) -> int:
        """Return the zatoshi count, which must not be negative."""
        if self.zats < 0:
            raise ValueError(f"Amount underflow: {self.zats}")
        return self.zats

    def is_positive(self) -> bool:
        """True if the amount is greater than zero."""
        return self.zats > 0

    def is_negative(self) -> bool:
        """True if the amount is less than zero."""
        return self.zats < 0

    @classmethod
    def sum(cls, values: Iterable["Amount"]) -> "Amount | None":
        """Add up ``values``; return ``None`` if any partial sum leaves the range."""
        total = cls.zero()
        for value in values:
            try:
                total = total + value
            except ValueError:
                return None
        return total

    @classmethod
    def parse(cls, stream: BinaryIO) -> "Amount":
        """Read a signed 64-bit little-endian zatoshi balance."""
        try:
            raw = read_exact(stream, 8)
        except EOFError as exc:
            raise EOFError(f"Zat balance: {exc}") from exc
        value = int.from_bytes(raw, "little", signed=True)
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Invalid Zat balance: {value}") from exc

    def to_cbor(self) -> bytes:
        """Encode as a CBOR integer."""
        return cbor2.dumps(self.zats)

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "Amount":
        """Decode from a CBOR integer."""
        value = cbor2.loads(encoded)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Amount: expected a CBOR integer")
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"Amount: integer out of range: {value}")
        return cls(value)

    def __add__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(self.zats + other.zats)

    def __sub__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(self.zats - other.zats)

    def __neg__(self) -> "Amount":
        return Amount(-self.zats)

    def __mul__(self, factor):
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        if factor < 0:
            raise ValueError(f"Amount factor cannot be negative: {factor}")
        return Amount(self.zats * factor)

    __rmul__ = __mul__

    def __int__(self) -> int:
        return self.zats

    __index__ = __int__

    def __repr__(self) -> str:
        return f"Amount({self.zats})"