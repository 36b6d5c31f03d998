"""Backtracking searches: phone keypad words, non-attacking knights, combination sums, subsets."""

from __future__ import annotations

from itertools import product
from typing import Any, Iterable, Iterator, Sequence

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

EMPTY = "_"
KNIGHT = "K"
ATTACKED = "A"

_KNIGHT_MOVES = ((2, -1), (-2, -1), (2, 1), (-2, 1), (1, 2), (-1, 2), (1, -2), (-1, -2))

Board = tuple[str, ...]


def letter_combinations(digits: str) -> list[str]:
    """Return every word the digits can spell on a phone keypad.

    An empty string, or one holding a digit with no letters, yields no words.
    """
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(KEYPAD.get(d, "") for d in digits))]


def place_knights(rows: int, cols: int, knights: int) -> Iterator[Board]:
    """Yield every placement of ``knights`` mutually safe knights on a board.

    Each board is a tuple of row strings: ``K`` for a knight, ``A`` for a
    square one of them attacks and ``_`` for a free square.
    """
    if rows < 0 or cols < 0:
        raise ValueError("board dimensions must not be negative")
    if knights < 0:
        raise ValueError("number of knights must not be negative")
    board = [[EMPTY] * cols for _ in range(rows)]
    return _search(board, knights, 0, rows, cols)


def _search(
    board: list[list[str]], remaining: int, start: int, rows: int, cols: int
) -> Iterator[Board]:
    if remaining == 0:
        yield tuple("".join(row) for row in board)
        return
    for cell in range(start, rows * cols):
        row, col = divmod(cell, cols)
        if board[row][col] != EMPTY:
            continue
        placed = [line[:] for line in board]
        placed[row][col] = KNIGHT
        for d_row, d_col in _KNIGHT_MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < rows and 0 <= c < cols:
                placed[r][c] = ATTACKED
        yield from _search(placed, remaining - 1, cell, rows, cols)


def format_board(board: Iterable[str]) -> str:
    """Render a board with each square padded by spaces, followed by a blank line."""
    return "".join("".join(f" {square} " for square in row) + "\n" for row in board) + "\n"


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the combinations of candidates, each usable repeatedly, summing to ``target``.

    Combinations taking earlier candidates more often come first.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    chosen: list[int] = []

    def search(index: int, remaining: int) -> Iterator[list[int]]:
        if index == len(candidates):
            if remaining == 0:
                yield list(chosen)
            return
        value = candidates[index]
        if value <= remaining:
            chosen.append(value)
            yield from search(index, remaining - value)
            chosen.pop()
        yield from search(index + 1, remaining)

    return list(search(0, target))


def unique_subsets(items: Sequence[Any]) -> list[list[Any]]:
    """Return the subsets of ``items`` in backtracking order.

    Only adjacent equal items are treated as duplicates, so sort the input
    first to get every subset exactly once.
    """
    subsets: list[list[Any]] = []
    chosen: list[Any] = []

    def search(index: int) -> None:
        subsets.append(list(chosen))
        for position in range(index, len(items)):
            if position != index and items[position] == items[position - 1]:
                continue
            chosen.append(items[position])
            search(position + 1)
            chosen.pop()

    search(0)
    return subsets