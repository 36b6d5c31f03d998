"""Small array algorithms: arithmetic slices, three-way colour sort, sentinel search."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def count_arithmetic_slices(nums: Sequence[int]) -> int:
    """Count contiguous runs of three or more items with a constant difference."""
    total = 0
    run = 0
    for first, second, third in zip(nums, nums[1:], nums[2:]):
        if third - second == second - first:
            run += 1
            total += run
        else:
            run = 0
    return total


def dutch_flag_sort(colors: Iterable[int]) -> list[int]:
    """Sort a sequence of 0, 1 and 2 values in a single three-pointer pass."""
    values = list(colors)
    invalid = [value for value in values if value not in (0, 1, 2)]
    if invalid:
        raise ValueError(f"colours must be 0, 1 or 2, got {invalid[0]!r}")
    low = mid = 0
    high = len(values) - 1
    while mid <= high:
        if values[mid] == 0:
            values[mid], values[low] = values[low], values[mid]
            low += 1
            mid += 1
        elif values[mid] == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
    return values


def sentinel_search(items: Iterable[Any], item: Any) -> int:
    """Return the 1-based location of the first occurrence of ``item``.

    The item is appended as a sentinel so the scan always stops; reaching the
    sentinel means the item is absent, and ``ValueError`` is raised.
    """
    values = list(items)
    count = len(values)
    values.append(item)
    location = next(pos for pos, value in enumerate(values, start=1) if value == item)
    if location == count + 1:
        raise ValueError(f"{item!r} is not in the sequence")
    return location