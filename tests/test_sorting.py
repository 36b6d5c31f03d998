import functools
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    exchange_sort,
    heap_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

SOURCE_ARRAYS = [
    [11, 22, 34, 54, 12, 98, 10, 14, 21, 30, 34, 11],
    [64, 25, 12, 22, 11],
    [10, 2, 0, 43, 12],
    [1, 14, 3, 7, 0],
    [45, 23, 53, 43, 18],
]


@pytest.mark.parametrize("data", SOURCE_ARRAYS)
def test_source_examples(data):
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert exchange_sort(data) == expected
    assert heap_sort(data) == expected
    assert shell_sort(data) == expected


def test_selection_sort_source_output():
    assert selection_sort([64, 25, 12, 22, 11]) == [11, 12, 22, 25, 64]


def test_heap_sort_source_output():
    assert heap_sort([1, 14, 3, 7, 0]) == [0, 1, 3, 7, 14]


def test_shell_sort_source_output():
    assert shell_sort([45, 23, 53, 43, 18]) == [18, 23, 43, 45, 53]


def test_empty_and_single():
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert selection_sort([]) == []
    assert exchange_sort([]) == []
    assert heap_sort([]) == []
    assert shell_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([7]) == [7]
    assert selection_sort([7]) == [7]
    assert exchange_sort([7]) == [7]
    assert heap_sort([7]) == [7]
    assert shell_sort([7]) == [7]


def test_input_is_not_mutated():
    data = [3, 1, 2, 3, 0]
    snapshot = list(data)
    expected = sorted(snapshot)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert exchange_sort(data) == expected
    assert heap_sort(data) == expected
    assert shell_sort(data) == expected
    assert data == snapshot


def test_accepts_any_iterable():
    expected = [3, 4, 5]
    assert merge_sort(x for x in (5, 4, 3)) == expected
    assert quick_sort(x for x in (5, 4, 3)) == expected
    assert selection_sort(x for x in (5, 4, 3)) == expected
    assert exchange_sort(x for x in (5, 4, 3)) == expected
    assert heap_sort(x for x in (5, 4, 3)) == expected
    assert shell_sort(x for x in (5, 4, 3)) == expected
    letters = sorted("banana")
    assert merge_sort("banana") == letters
    assert quick_sort("banana") == letters
    assert selection_sort("banana") == letters
    assert exchange_sort("banana") == letters
    assert heap_sort("banana") == letters
    assert shell_sort("banana") == letters


@given(data=st.lists(st.integers(-1000, 1000), max_size=60))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert exchange_sort(data) == expected
    assert heap_sort(data) == expected
    assert shell_sort(data) == expected


@given(data=st.lists(st.text(max_size=3), max_size=30))
def test_sorts_strings(data):
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert exchange_sort(data) == expected
    assert heap_sort(data) == expected
    assert shell_sort(data) == expected


@functools.total_ordering
@dataclass(eq=False)
class Tagged:
    key: int
    tag: int

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


@given(keys=st.lists(st.integers(0, 4), max_size=40))
def test_merge_sort_is_stable(keys):
    data = [Tagged(key, tag) for tag, key in enumerate(keys)]
    result = merge_sort(data)
    assert [item.key for item in result] == sorted(keys)
    for key in set(keys):
        tags = [item.tag for item in result if item.key == key]
        assert tags == sorted(tags)