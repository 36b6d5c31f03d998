"""Comparison sorts; each returns a new sorted list and leaves its input untouched."""

from __future__ import annotations

from typing import Any, Iterable


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    split = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:split]), merge_sort(values[split:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as the pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = _partition(values, start, end)
        pending.append((pivot_index + 1, end))
        pending.append((start, pivot_index - 1))
    return values


def _partition(values: list[Any], start: int, end: int) -> int:
    pivot = values[end]
    boundary = start
    for j in range(start, end):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[end] = values[end], values[boundary]
    return boundary


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Repeatedly move the smallest remaining item to the front of the unsorted part."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]
    return values


def exchange_sort(items: Iterable[Any]) -> list[Any]:
    """Compare each position with every later one and swap when out of order."""
    values = list(items)
    count = len(values)
    for i in range(count):
        for j in range(i + 1, count):
            if values[j] < values[i]:
                values[i], values[j] = values[j], values[i]
    return values


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Build a max-heap, then repeatedly move its top to the end."""
    values = list(items)
    count = len(values)
    for root in range(count // 2 - 1, -1, -1):
        _sift_down(values, count, root)
    for end in range(count - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)
    return values


def _sift_down(values: list[Any], size: int, root: int) -> None:
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


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort with gaps halving from half the length."""
    values = list(items)
    gap = len(values) // 2
    while gap > 0:
        for i in range(gap, len(values)):
            current = values[i]
            j = i
            while j >= gap and values[j - gap] > current:
                values[j] = values[j - gap]
                j -= gap
            values[j] = current
        gap //= 2
    return values