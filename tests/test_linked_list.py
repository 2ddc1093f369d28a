import pytest

from libft.linked_list import LinkedList, Node


def test_construct_from_items_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_back_appends_and_last():
    lst = LinkedList()
    first = lst.push_back("x")
    second = lst.push_back("y")
    assert lst.head is first
    assert lst.last() is second
    assert first.next is second
    assert list(lst) == ["x", "y"]


@pytest.mark.parametrize("items", [[], [1], list(range(10))])
def test_len_matches_items(items):
    assert len(LinkedList(items)) == len(items)


def test_remove_head():
    lst = LinkedList()
    head = lst.push_back(1)
    lst.push_back(2)
    assert lst.remove(head) is True
    assert list(lst) == [2]


def test_remove_middle_and_tail():
    lst = LinkedList()
    lst.push_back("a")
    middle = lst.push_back("b")
    tail = lst.push_back("c")
    assert lst.remove(middle) is True
    assert list(lst) == ["a", "c"]
    assert lst.remove(tail) is True
    assert list(lst) == ["a"]


def test_remove_missing_node_returns_false():
    lst = LinkedList([1, 2])
    assert lst.remove(Node(1)) is False
    assert lst.remove(None) is False
    assert list(lst) == [1, 2]


def test_remove_from_empty_returns_false():
    assert LinkedList().remove(Node("x")) is False


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_every_item():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_returns_new_list():
    source = LinkedList(["ab", "cd"])
    mapped = source.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(source) == ["ab", "cd"]
    assert mapped.head is not source.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_items():
    deleted = []

    def convert(value):
        if value == "bad":
            raise ValueError(value)
        return value * 2

    with pytest.raises(ValueError):
        LinkedList(["ok", "fine", "bad"]).map(convert, deleted.append)
    assert deleted == ["okok", "finefine"]