"""Witnesses proving a note commitment's place in a Merkle tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Optional

from .incremental_merkle_tree import (
    IncrementalMerkleTree,
    _parse_optional,
    _parse_vector,
)

__all__ = ["IncrementalWitness"]


@dataclass
class IncrementalWitness:
    """A tree state, the hashes filled in since, and an optional cursor.

    ``depth`` is the depth of the tree the witness belongs to (29 for Sprout,
    32 for Sapling and Orchard).
    """

    tree: IncrementalMerkleTree = field(default_factory=IncrementalMerkleTree)
    filled: list[Any] = field(default_factory=list)
    cursor: Optional[IncrementalMerkleTree] = None
    depth: int = 32

    @classmethod
    def parse(cls, stream: BinaryIO, depth: int, hash_type) -> "IncrementalWitness":
        """Read a tree, a vector of ``hash_type`` values, then an optional cursor tree."""
        tree = IncrementalMerkleTree.parse(stream)
        filled = _parse_vector(stream, hash_type.parse, "filled")
        cursor = _parse_optional(stream, IncrementalMerkleTree.parse, "cursor")
        return cls(tree, filled, cursor, depth)