from dataclasses import dataclass

from zewif.indexed import set_indexes, sorted_by_index


@dataclass
class Item:
    name: str
    index: int = 0


def test_set_indexes_numbers_from_zero():
    items = [Item("a", 7), Item("b", 7), Item("c", 3)]
    result = set_indexes(items)
    assert [item.index for item in result] == list(range(len(items)))
    assert [item.name for item in result] == ["a", "b", "c"]


def test_set_indexes_updates_the_same_objects():
    first = Item("a", 5)
    second = Item("b", 9)
    result = set_indexes([first, second])
    assert result[0] is first
    assert result[1] is second
    assert second.index == 1


def test_set_indexes_accepts_generator():
    result = set_indexes(Item(name) for name in "xyz")
    assert [(item.name, item.index) for item in result] == [("x", 0), ("y", 1), ("z", 2)]


def test_set_indexes_empty():
    assert set_indexes([]) == []


def test_sorted_by_index_orders_items():
    items = [Item("c", 2), Item("a", 0), Item("b", 1)]
    assert [item.name for item in sorted_by_index(items)] == ["a", "b", "c"]


def test_sorted_by_index_is_stable():
    items = [Item("first", 1), Item("zero", 0), Item("second", 1)]
    assert [item.name for item in sorted_by_index(items)] == ["zero", "first", "second"]


def test_sorted_by_index_inverts_shuffle_after_set_indexes():
    numbered = set_indexes([Item(name) for name in "abcdef"])
    shuffled = [numbered[i] for i in (3, 0, 5, 1, 4, 2)]
    assert sorted_by_index(shuffled) == numbered