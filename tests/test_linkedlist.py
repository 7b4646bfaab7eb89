import pytest

from cubgrid.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_back_keeps_order():
    lst = LinkedList()
    for value in ["a", "b", "c"]:
        lst.add_back(value)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_reverses_order():
    lst = LinkedList()
    for value in [1, 2, 3]:
        lst.add_front(value)
    assert list(lst) == [3, 2, 1]


def test_mixed_adds():
    lst = LinkedList()
    lst.add_back(2)
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]


def test_last_returns_tail_node():
    lst = LinkedList()
    lst.add_back("x")
    tail = lst.add_back("y")
    assert lst.last() is tail
    assert lst.last().content == "y"
    assert lst.last().next is None


def test_add_returns_node_linked_to_head():
    lst = LinkedList()
    second = lst.add_front("second")
    first = lst.add_front("first")
    assert lst.head is first
    assert first.next is second


def test_node_defaults():
    node = Node("value")
    assert node.content == "value"
    assert node.next is None


def test_clear_calls_delete_for_each():
    lst = LinkedList()
    for value in [10, 20, 30]:
        lst.add_back(value)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == [10, 20, 30]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList()
    lst.add_back(1)
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_in_order():
    lst = LinkedList()
    for value in "abc":
        lst.add_back(value)
    seen = []
    lst.iterate(seen.append)
    assert seen == ["a", "b", "c"]


@pytest.mark.parametrize("count", [0, 1, 5, 20])
def test_length_matches_additions(count):
    lst = LinkedList()
    for value in range(count):
        lst.add_back(value)
    assert len(lst) == count
    assert list(lst) == list(range(count))