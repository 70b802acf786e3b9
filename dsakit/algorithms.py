"""Small greedy, dynamic-programming and array algorithms."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

_FIB_MEMO: list = [0, 0, 1]


def max_activities(intervals: Iterable[Sequence[Any]]) -> int:
    """Most non-overlapping ``(start, end)`` activities one person can do.

    An activity may start at the moment the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    taken = 1
    end = ordered[0][1]
    for start, finish in ordered[1:]:
        if start >= end:
            taken += 1
            end = finish
    return taken


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_memo(n: int) -> int:
    """The n-th term of 0, 0, 1, 1, 2, 3, ... using a shared memo."""
    _check_index(n)
    while len(_FIB_MEMO) <= n:
        _FIB_MEMO.append(_FIB_MEMO[-1] + _FIB_MEMO[-2])
    return _FIB_MEMO[n]


def fibonacci_table(n: int) -> int:
    """The n-th term of 0, 0, 1, 1, 2, 3, ... built bottom-up."""
    _check_index(n)
    table = [0, 0, 1]
    for _ in range(3, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def majority_element(values: Iterable[Any]) -> Any:
    """Moore's voting candidate: the majority element when one exists.

    The candidate is not verified; with no element occurring more than
    half the time the result is arbitrary.
    """
    iterator = iter(values)
    try:
        candidate = next(iterator)
    except StopIteration:
        raise ValueError("majority of an empty sequence") from None
    count = 1
    for value in iterator:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def contains_value(values: Iterable[Any], target: Any) -> bool:
    """Linear search: True if ``target`` occurs in ``values``."""
    return any(value == target for value in values)