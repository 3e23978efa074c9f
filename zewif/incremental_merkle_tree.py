"""Incremental Merkle trees of note commitments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional, TypeVar

import cbor2

from .blob import Blob32
from .compact_size import parse_compact_size, read_exact

__all__ = ["Anchor", "IncrementalMerkleTree"]

#: The root of a note commitment tree.
Anchor = Blob32

_TYPE = "IncrementalMerkleTree"

T = TypeVar("T")


def _parse_optional(
    stream: BinaryIO, parse_item: Callable[[BinaryIO], T], what: str
) -> Optional[T]:
    """Read a one-byte presence flag (0 or 1) followed by the item if present."""
    try:
        flag = read_exact(stream, 1)[0]
    except EOFError as exc:
        raise EOFError(f"{what}: {exc}") from exc
    if flag == 0:
        return None
    if flag == 1:
        return parse_item(stream)
    raise ValueError(f"{what}: invalid optional flag {flag:#04x}")


def _parse_vector(
    stream: BinaryIO, parse_item: Callable[[BinaryIO], T], what: str
) -> list[T]:
    """Read a compact-size count followed by that many items."""
    try:
        count = parse_compact_size(stream)
    except (EOFError, ValueError) as exc:
        raise type(exc)(f"{what}: {exc}") from exc
    return [parse_item(stream) for _ in range(count)]


def _opt_hash(value) -> Optional[Blob32]:
    return None if value is None else Blob32(value)


def _parse_opt_hash(stream: BinaryIO) -> Optional[Blob32]:
    return _parse_optional(stream, Blob32.parse, "parent")


def _decode_hash(item, what: str) -> Optional[Blob32]:
    if item is None:
        return None
    if not isinstance(item, bytes) or len(item) != 32:
        raise ValueError(f"{_TYPE}: {what} must be a 32-byte string or null")
    return Blob32(item)


@dataclass
class IncrementalMerkleTree:
    """The frontier of a Merkle tree: the nodes needed to keep appending to it."""

    left: Optional[Blob32] = None
    right: Optional[Blob32] = None
    parents: list[Optional[Blob32]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.left = _opt_hash(self.left)
        self.right = _opt_hash(self.right)
        self.parents = [_opt_hash(parent) for parent in self.parents]

    def set_left(self, left) -> None:
        """Set the left child at the insertion point."""
        self.left = Blob32(left)

    def set_right(self, right) -> None:
        """Set the right child at the insertion point."""
        self.right = Blob32(right)

    def push_parent(self, parent) -> None:
        """Append a parent node (or ``None`` for an empty one) at the next level."""
        self.parents.append(_opt_hash(parent))

    @classmethod
    def parse(cls, stream: BinaryIO) -> "IncrementalMerkleTree":
        """Read optional left and right hashes, then a vector of optional parents."""
        left = _parse_optional(stream, Blob32.parse, "left")
        right = _parse_optional(stream, Blob32.parse, "right")
        parents = _parse_vector(stream, _parse_opt_hash, "parents")
        return cls(left, right, parents)

    def to_cbor(self) -> bytes:
        """Encode as a CBOR map; absent left or right nodes are omitted."""
        value: dict = {
            "type": _TYPE,
            "parents": [None if p is None else bytes(p) for p in self.parents],
        }
        if self.left is not None:
            value["left"] = bytes(self.left)
        if self.right is not None:
            value["right"] = bytes(self.right)
        return cbor2.dumps(value)

    @classmethod
    def from_cbor(cls, encoded: bytes) -> "IncrementalMerkleTree":
        """Decode a tree produced by ``to_cbor``."""
        value = cbor2.loads(encoded)
        if not isinstance(value, dict) or value.get("type") != _TYPE:
            raise ValueError(f"{_TYPE}: wrong or missing type")
        parents = value.get("parents")
        if not isinstance(parents, list):
            raise ValueError(f"{_TYPE}: parents must be an array")
        return cls(
            _decode_hash(value.get("left"), "left"),
            _decode_hash(value.get("right"), "right"),
            [_decode_hash(parent, "parents") for parent in parents],
        )