import pytest

from sigtalk.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    items = ["first", "second", "third"]
    assert list(LinkedList(items)) == items


def test_add_front_from_source_example():
    lst = LinkedList(["first"])
    lst.add_front("second")
    lst.add_front("third")
    assert len(lst) == 3
    assert list(lst) == ["third", "second", "first"]
    assert lst.last().content == "first"


def test_add_back_appends():
    lst = LinkedList()
    lst.add_back("first")
    lst.add_back("second")
    node = lst.add_back("third")
    assert isinstance(node, Node) and node.content == "third"
    assert lst.last() is node
    assert list(lst) == ["first", "second", "third"]


def test_add_front_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_front(7)
    assert lst.head is node
    assert lst.last() is node


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList("ab")
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_failure_deletes_partial_result():
    deleted = []
    lst = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        lst.map(lambda x: None if x == 3 else x + 1, deleted.append)
    assert deleted == [2, 3]


def test_len_matches_iteration():
    lst = LinkedList(range(5))
    lst.add_front(-1)
    assert len(lst) == len(list(lst))