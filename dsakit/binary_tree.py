"""Binary tree built from a pre-order listing, with level-order traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

NULL_MARKER = -1


@dataclass
class TreeNode:
    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from pre-order values where ``-1`` marks a missing child.

    Values left over once the tree is complete are ignored; running out of
    values before it is complete raises ``ValueError``.
    """
    return _build(iter(values))


def _build(stream: Iterator[int]) -> Optional[TreeNode]:
    try:
        data = next(stream)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None
    if data == NULL_MARKER:
        return None
    node = TreeNode(data)
    node.left = _build(stream)
    node.right = _build(stream)
    return node


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Return node values breadth first, left to right."""
    return [data for row in level_order_rows(root) for data in row]


def level_order_rows(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by depth."""
    rows: list[list[int]] = []
    level = deque([root] if root is not None else [])
    while level:
        rows.append([node.data for node in level])
        level = deque(
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        )
    return rows