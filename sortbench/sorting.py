"""The six sorting algorithms that the benchmark times.

Every sort works in place on a mutable sequence and returns ``None``,
like :meth:`list.sort`.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from enum import Enum
from typing import Any, Callable


class Algorithm(Enum):
    """A benchmarked algorithm, in the order the report lists them."""

    SELECTION = ("s", "Selection Sort", "selection")
    BUBBLE = ("b", "Bubble Sort", "bubble")
    INSERTION = ("i", "Insertion Sort", "insertion")
    HEAP = ("h", "Heap Sort", "heap")
    MERGE = ("m", "Merge Sort", "merge")
    QUICK = ("q", "Quick Sort", "quick")

    def __init__(self, letter: str, label: str, slug: str) -> None:
        self.letter = letter
        self.label = label
        self.slug = slug

    def sort(self, values: MutableSequence[Any]) -> None:
        """Sort ``values`` in place with this algorithm."""
        _SORTERS[self](values)

    @classmethod
    def from_letter(cls, letter: str) -> "Algorithm":
        """Return the algorithm selected by its one-letter filter code."""
        for algorithm in cls:
            if algorithm.letter == letter:
                return algorithm
        raise ValueError(f"unknown sorting algorithm letter: {letter!r}")


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by repeatedly moving the smallest remaining item forward."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by inserting each item into the sorted prefix."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort in place with bubble sort, stopping early once a pass makes no swap."""
    end = len(values)
    swapped = True
    while swapped and end > 1:
        swapped = False
        for j in range(end - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        end -= 1


def _sift_down(values: MutableSequence[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort in place using a binary max-heap."""
    size = len(values)
    for root in reversed(range(size // 2)):
        _sift_down(values, root, size)
    for end in reversed(range(1, size)):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, 0, end)


def _merge_range(values: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _merge_range(values, lo, mid)
    _merge_range(values, mid, hi)
    left = list(values[lo:mid])
    right = list(values[mid:hi])
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        k += 1
    for item in left[i:]:
        values[k] = item
        k += 1
    for item in right[j:]:
        values[k] = item
        k += 1


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort in place with top-down merge sort."""
    _merge_range(values, 0, len(values))


def _partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort in place with quick sort, taking the last item of a range as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(values, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))


_SORTERS: dict[Algorithm, Callable[[MutableSequence[Any]], None]] = {
    Algorithm.SELECTION: selection_sort,
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.HEAP: heap_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
}