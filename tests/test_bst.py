import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import BinarySearchTree

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


def test_traversal_orders():
    tree = BinarySearchTree(SAMPLE)
    assert tree.in_order() == sorted(SAMPLE)
    assert tree.pre_order() == [50, 30, 20, 40, 70, 60, 80]
    assert tree.post_order() == [20, 40, 30, 60, 80, 70, 50]


def test_delete_root_with_two_children_uses_successor():
    tree = BinarySearchTree(SAMPLE)
    tree.delete(50)
    assert tree.pre_order() == [60, 30, 20, 40, 70, 80]
    assert 50 not in tree
    assert len(tree) == len(SAMPLE) - 1


def test_delete_leaf_and_single_child():
    tree = BinarySearchTree(SAMPLE)
    tree.delete(20)
    tree.delete(30)
    assert tree.in_order() == [40, 50, 60, 70, 80]
    assert tree.pre_order()[:2] == [50, 40]


def test_delete_missing_raises():
    tree = BinarySearchTree([1, 2])
    with pytest.raises(KeyError):
        tree.delete(3)
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_duplicates_are_ignored():
    tree = BinarySearchTree([5, 5, 3, 3])
    assert len(tree) == 2
    assert list(tree) == [3, 5]


def test_minimum():
    assert BinarySearchTree(SAMPLE).minimum() == min(SAMPLE)
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_contains():
    tree = BinarySearchTree(SAMPLE)
    assert all(value in tree for value in SAMPLE)
    assert 55 not in tree


def test_sorted_input_does_not_overflow_recursion():
    values = range(5000)
    tree = BinarySearchTree(values)
    assert tree.in_order() == list(values)
    assert tree.post_order()[-1] == 0


@given(values=st.lists(st.integers(-100, 100), max_size=60))
def test_in_order_is_sorted_unique(values):
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    assert sorted(tree.pre_order()) == sorted(set(values))
    assert sorted(tree.post_order()) == sorted(set(values))


@given(values=st.lists(st.integers(-100, 100), max_size=60, unique=True), data=st.data())
def test_deletions_keep_order(values, data):
    tree = BinarySearchTree(values)
    doomed = data.draw(st.lists(st.sampled_from(values), unique=True) if values else st.just([]))
    for value in doomed:
        tree.delete(value)
    remaining = sorted(set(values) - set(doomed))
    assert tree.in_order() == remaining
    assert len(tree) == len(remaining)