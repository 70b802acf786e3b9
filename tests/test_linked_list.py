import pytest

from dsakit.linked_list import LinkedList


def test_append_keeps_order():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.append(value)
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


def test_push_front_builds_reverse_order():
    ll = LinkedList()
    for value in (6, 5, 4, 3, 2, 1):
        ll.push_front(value)
    assert list(ll) == [1, 2, 3, 4, 5, 6]


def test_constructor_accepts_values():
    ll = LinkedList([7, 8, 9])
    assert list(ll) == [7, 8, 9]


def test_remove_head_middle_and_tail():
    ll = LinkedList([1, 2, 3, 4])
    ll.remove(1)
    assert list(ll) == [2, 3, 4]
    ll.remove(3)
    assert list(ll) == [2, 4]
    ll.remove(4)
    assert list(ll) == [2]
    assert len(ll) == 1


def test_remove_only_first_occurrence():
    ll = LinkedList([5, 1, 5])
    ll.remove(5)
    assert list(ll) == [1, 5]


def test_remove_missing_raises():
    ll = LinkedList([1, 2])
    with pytest.raises(ValueError):
        ll.remove(9)
    assert list(ll) == [1, 2]


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_contains():
    ll = LinkedList([10, 20])
    assert 20 in ll
    assert 30 not in ll


def test_reverse():
    values = [1, 2, 3, 4, 5]
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]
    ll.reverse()
    assert list(ll) == values


def test_reverse_single():
    ll = LinkedList([42])
    ll.reverse()
    assert list(ll) == [42]


def test_reverse_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().reverse()


def test_rotate_last_k_example():
    ll = LinkedList([1, 2, 3, 4, 5, 6])
    ll.rotate_last_k(3)
    assert list(ll) == [4, 5, 6, 1, 2, 3]


def test_rotate_zero_is_identity():
    ll = LinkedList([1, 2, 3])
    ll.rotate_last_k(0)
    assert list(ll) == [1, 2, 3]


@pytest.mark.parametrize("k", [1, 2, 4])
def test_rotate_keeps_elements_and_length(k):
    values = [3, 1, 4, 1, 5]
    ll = LinkedList(values)
    ll.rotate_last_k(k)
    assert sorted(ll) == sorted(values)
    assert len(ll) == len(values)
    assert list(ll)[k:] == values[: len(values) - k]


@pytest.mark.parametrize("k", [-1, 3, 10])
def test_rotate_out_of_range_raises(k):
    ll = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        ll.rotate_last_k(k)


def test_odd_even_even_length():
    ll = LinkedList([1, 2, 3, 4, 5, 6])
    ll.odd_even_rearrange()
    assert list(ll) == [1, 3, 5, 2, 4, 6]


def test_odd_even_odd_length_terminates():
    ll = LinkedList([1, 2, 3, 4, 5, 6, 7])
    ll.odd_even_rearrange()
    assert list(ll) == [1, 3, 5, 7, 2, 4, 6]
    assert len(ll) == 7


@pytest.mark.parametrize("values", [[], [1], [1, 2]])
def test_odd_even_short_lists_unchanged(values):
    ll = LinkedList(values)
    ll.odd_even_rearrange()
    assert list(ll) == values