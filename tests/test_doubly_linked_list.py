import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def _links_consistent(dll):
    return list(reversed(dll)) == list(dll)[::-1]


def test_source_sequence_of_operations():
    dll = DoublyLinkedList()
    dll.insert_at_tail(10)
    dll.insert_at_head(40)
    dll.insert_at_head(50)
    dll.insert_at_tail(20)
    dll.insert_at_position(100, 1)
    dll.insert_at_position(200, 2)
    dll.insert_at_position(300, 10)
    assert dll.delete_at(7) == 300
    assert str(dll) == "100->200->50->40->10->20->"
    assert _links_consistent(dll)


def test_constructor_and_length():
    values = [1, 2, 3]
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert len(dll) == len(values)
    assert _links_consistent(dll)


def test_insert_middle_keeps_links():
    dll = DoublyLinkedList([1, 2, 4])
    dll.insert_at_position(3, 3)
    assert list(dll) == [1, 2, 3, 4]
    assert _links_consistent(dll)


def test_insert_into_empty_any_position():
    dll = DoublyLinkedList()
    dll.insert_at_position(5, 4)
    assert list(dll) == [5]
    assert dll.head is dll.tail


def test_insert_bad_position_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList([1]).insert_at_position(2, 0)


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_each_position(position):
    values = [10, 20, 30]
    dll = DoublyLinkedList(values)
    assert dll.delete_at(position) == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert list(dll) == expected
    assert _links_consistent(dll)


def test_delete_only_node():
    dll = DoublyLinkedList([9])
    assert dll.delete_at(1) == 9
    assert len(dll) == 0
    assert dll.head is None and dll.tail is None


def test_delete_errors():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_at(1)
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).delete_at(0)
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).delete_at(3)