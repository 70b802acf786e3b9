import pytest

from dsakit.heap import HeapOverflowError, MinHeap


def test_worked_sequence():
    heap = MinHeap(11)
    heap.insert(3)
    heap.insert(2)
    heap.delete_key(1)
    for key in (15, 5, 4, 45):
        heap.insert(key)
    assert heap.extract_min() == 2
    assert heap.peek() == 4
    heap.decrease_key(2, 1)
    assert heap.peek() == 1


def test_extract_all_gives_sorted_order():
    keys = [9, 4, 7, 1, 8, 2, 2, 6, 3]
    heap = MinHeap(len(keys))
    for key in keys:
        heap.insert(key)
    assert [heap.extract_min() for _ in keys] == sorted(keys)
    assert len(heap) == 0


def test_overflow():
    heap = MinHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(HeapOverflowError):
        heap.insert(3)
    assert len(heap) == 2


def test_zero_capacity_always_overflows():
    with pytest.raises(HeapOverflowError):
        MinHeap(0).insert(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)


def test_empty_heap_errors():
    heap = MinHeap(3)
    with pytest.raises(IndexError):
        heap.extract_min()
    with pytest.raises(IndexError):
        heap.peek()


@pytest.mark.parametrize("index", range(6))
def test_delete_key_removes_exactly_that_key(index):
    keys = [10, 30, 20, 50, 40, 60]
    heap = MinHeap(10)
    for key in keys:
        heap.insert(key)
    removed = heap.delete_key(index)
    remaining = [heap.extract_min() for _ in range(len(heap))]
    assert removed in keys
    assert remaining == sorted(keys[:keys.index(removed)] + keys[keys.index(removed) + 1:])


def test_decrease_key_to_new_minimum():
    heap = MinHeap(5)
    for key in (5, 6, 7):
        heap.insert(key)
    heap.decrease_key(2, 0)
    assert heap.peek() == 0
    assert len(heap) == 3


def test_decrease_key_errors():
    heap = MinHeap(5)
    heap.insert(5)
    with pytest.raises(ValueError):
        heap.decrease_key(0, 9)
    with pytest.raises(IndexError):
        heap.decrease_key(1, 1)
    with pytest.raises(IndexError):
        heap.delete_key(-1)