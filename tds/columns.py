"""Spreadsheet column letters and cell references."""

from __future__ import annotations

import itertools
import string

LETTERS = string.ascii_uppercase

_COLUMN_NAMES: tuple[str, ...] = tuple(
    "".join(combo)
    for width in (1, 2, 3)
    for combo in itertools.product(LETTERS, repeat=width)
)


def column_name(col: int) -> str:
    """Letters for the zero-based column index, up to three letters."""
    if col < 0 or col >= len(_COLUMN_NAMES):
        raise IndexError(f"column index out of range: {col}")
    return _COLUMN_NAMES[col]


def get_axis(row: int, col: int) -> str:
    """Cell reference for zero-based row and column."""
    return f"{column_name(col)}{row + 1}"