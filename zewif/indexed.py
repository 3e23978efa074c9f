"""Items that carry their position within a containing list."""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar, runtime_checkable

__all__ = ["Indexed", "set_indexes", "sorted_by_index"]


@runtime_checkable
class Indexed(Protocol):
    """Anything with a mutable integer ``index`` giving its list position."""

    index: int


T = TypeVar("T", bound=Indexed)


def set_indexes(items: Iterable[T]) -> list[T]:
    """Number ``items`` from zero in order and return them as a list."""
    result = list(items)
    for position, item in enumerate(result):
        item.index = position
    return result


def sorted_by_index(items: Iterable[T]) -> list[T]:
    """Return ``items`` ordered by their ``index``; equal indexes keep their order."""
    return sorted(items, key=lambda item: item.index)