import pytest

from treeshell.linkedlist import LinkedList


def test_push_back_keeps_insertion_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]


def test_last_returns_final_content():
    lst = LinkedList(["x", "y"])
    assert lst.last() == "y"
    lst.push_back("z")
    assert lst.last() == "z"


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_pop_front_calls_delete_and_returns_content():
    deleted = []
    lst = LinkedList([1, 2, 3])
    assert lst.pop_front(deleted.append) == 1
    assert deleted == [1]
    assert list(lst) == [2, 3]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front(lambda _: None)


def test_clear_deletes_every_content_in_order():
    deleted = []
    lst = LinkedList(["p", "q", "r"])
    lst.clear(deleted.append)
    assert deleted == ["p", "q", "r"]
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    seen = []
    LinkedList([4, 5, 6]).for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, lambda _: None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        return None if x == 3 else str(x)

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == ["1", "2"]


def test_equality_follows_contents():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert not LinkedList([1, 2]) == LinkedList([2, 1])