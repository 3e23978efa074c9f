"""Plain 32-bit integer identifiers."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import BinaryIO

from .compact_size import read_exact

__all__ = ["IntID"]

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class IntID:
    """A 32-bit unsigned identifier, shown as ``0x`` followed by eight hex digits."""

    value: int = 0

    def __post_init__(self) -> None:
        value = operator.index(self.value)
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"IntID out of range: {value}")
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, stream: BinaryIO) -> "IntID":
        """Read a 32-bit little-endian identifier."""
        try:
            raw = read_exact(stream, 4)
        except EOFError as exc:
            raise EOFError(f"IntID: {exc}") from exc
        return cls(int.from_bytes(raw, "little"))

    def __str__(self) -> str:
        return f"0x{self.value:08x}"

    def __repr__(self) -> str:
        return self.__str__()

    def __int__(self) -> int:
        return self.value

    __index__ = __int__