"""In-place sorting routines benchmarked against each other.

All routines accept any length (including 0) and an optional ``key`` so the
stability of ``merge_sort`` can be observed on records with equal keys. Only
``merge_sort`` is stable; the others may reorder equal keys.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, MutableSequence, Optional, Sequence

from algobench.exceptions import VerificationError

KeyFn = Optional[Callable[[Any], Any]]


def _identity(item: Any) -> Any:
    return item


def _swap(seq: MutableSequence[Any], i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


# --- QuickSort -------------------------------------------------------------


def _partition(seq: MutableSequence[Any], left: int, right: int, key: Callable) -> int:
    """Lomuto partition around ``seq[right]``; returns the pivot's final index."""
    pivot = key(seq[right])
    i = left - 1
    for j in range(left, right):
        if key(seq[j]) <= pivot:
            i += 1
            _swap(seq, i, j)
    _swap(seq, i + 1, right)
    return i + 1


def _quick_sort(seq: MutableSequence[Any], left: int, right: int, key: Callable) -> None:
    if left < right:
        p = _partition(seq, left, right, key)
        _quick_sort(seq, left, p - 1, key)
        _quick_sort(seq, p + 1, right, key)


def quick_sort(seq: MutableSequence[Any], key: KeyFn = None) -> None:
    """QuickSort with the last element as pivot.

    Sorted and reverse-sorted inputs hit the O(n^2) worst case and a recursion
    depth of ``len(seq)``. The pivot rule is kept as is: exposing that
    sensitivity is what the ``Sorted`` / ``ReverseSorted`` shapes measure.
    """
    _quick_sort(seq, 0, len(seq) - 1, key or _identity)


# --- MergeSort -------------------------------------------------------------


def _merge(seq: MutableSequence[Any], left: int, mid: int, right: int, key: Callable) -> None:
    buffer: list[Any] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        # ``<=`` takes the left run on ties (stability)
        if key(seq[i]) <= key(seq[j]):
            buffer.append(seq[i])
            i += 1
        else:
            buffer.append(seq[j])
            j += 1
    buffer.extend(seq[i : mid + 1])
    buffer.extend(seq[j : right + 1])
    seq[left : right + 1] = buffer


def _merge_sort(seq: MutableSequence[Any], left: int, right: int, key: Callable) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(seq, left, mid, key)
    _merge_sort(seq, mid + 1, right, key)
    _merge(seq, left, mid, right, key)


def merge_sort(seq: MutableSequence[Any], key: KeyFn = None) -> None:
    """Top-down stable merge sort with a scratch buffer per merged span."""
    _merge_sort(seq, 0, len(seq) - 1, key or _identity)


# --- HeapSort --------------------------------------------------------------


def _sift_down(seq: MutableSequence[Any], n: int, i: int, key: Callable) -> None:
    largest = i
    left, right = 2 * i + 1, 2 * i + 2
    if left < n and key(seq[left]) > key(seq[largest]):
        largest = left
    if right < n and key(seq[right]) > key(seq[largest]):
        largest = right
    if largest != i:
        _swap(seq, i, largest)
        _sift_down(seq, n, largest, key)


def heap_sort(seq: MutableSequence[Any], key: KeyFn = None) -> None:
    """Bottom-up max-heap build, then repeated root extraction to the end."""
    key = key or _identity
    n = len(seq)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(seq, n, i, key)
    for end in range(n - 1, 0, -1):
        _swap(seq, 0, end)
        _sift_down(seq, end, 0, key)


# --- GnomeSort -------------------------------------------------------------


def gnome_sort(seq: MutableSequence[Any], key: KeyFn = None) -> None:
    """Single cursor: step forward while ordered, swap back on an inversion.

    O(n^2) comparisons in the worst case; used as the naive baseline.
    """
    key = key or _identity
    pos = 0
    while pos < len(seq):
        if pos == 0 or key(seq[pos]) >= key(seq[pos - 1]):
            pos += 1
        else:
            _swap(seq, pos, pos - 1)
            pos -= 1


# --- Verification ----------------------------------------------------------


def _first_inversion(seq: Sequence[Any]) -> int | None:
    """Index ``i`` of the first ``seq[i - 1] > seq[i]``, or None when ordered."""
    for i in range(1, len(seq)):
        if seq[i - 1] > seq[i]:
            return i
    return None


def check_sorted_permutation(original: Sequence[Any], output: Sequence[Any]) -> bool:
    """Validate that ``output`` is ``original`` rearranged in non-decreasing order.

    Returns:
        True (so the check can be used inside assertions).

    Raises:
        VerificationError: If lengths differ, the multisets differ or the
            output has an inversion.
    """
    if len(original) != len(output):
        raise VerificationError(
            f"Length changed by sort: {len(original)} -> {len(output)}"
        )
    if Counter(original) != Counter(output):
        raise VerificationError("Sort output is not a permutation of its input")
    i = _first_inversion(output)
    if i is not None:
        raise VerificationError(f"Inversion at index {i}: {output[i - 1]} > {output[i]}")
    return True
