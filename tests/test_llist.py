import pytest

from solong.llist import LinkedList, Node


def test_items_keep_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert list(lst) == ["x"]


def test_push_back_and_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert lst.last().content == 2
    assert list(lst) == [1, 2]


def test_nodes_are_linked():
    lst = LinkedList(["p", "q"])
    assert isinstance(lst.head, Node)
    assert lst.head.next is lst.last()
    assert lst.last().next is None


def test_clear_calls_delete_on_each_content():
    lst = LinkedList([1, 2, 3])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_in_order():
    seen = []
    LinkedList(["x", "y"]).iterate(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst and len(mapped) == len(lst)


def test_map_failure_deletes_partial_results():
    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return str(value)

    deleted = []
    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == ["1", "2"]


def test_map_of_empty_list():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0