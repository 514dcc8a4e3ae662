"""Row, column and diagonal statistics for a candidate magic square."""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from magicsquare.errors import InvalidInputError


def magic_constant(order: int) -> int:
    """Return the common line sum ``n(n^2 + 1)/2`` for an ``n x n`` square."""

    return order * (order * order + 1) // 2


def as_matrix(square: Iterable[Iterable[int]]) -> np.ndarray:
    """Convert ``square`` to a 2D array, rejecting ragged input.

    An empty square yields an array of shape ``(0, 0)``.
    """

    rows = [list(row) for row in square]
    order = len(rows)
    if any(len(row) != order for row in rows):
        raise InvalidInputError("Square must be an n x n matrix")
    if order == 0:
        return np.zeros((0, 0), dtype=np.int64)
    for row in rows:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidInputError(f"Square must contain integers, got {value!r}")
    # python ints keep line sums exact for any cell size
    return np.array([[int(value) for value in row] for row in rows], dtype=object)


@dataclass
class MagicSquareSummary:
    """Statistics gathered for a magic square."""

    order: int
    magic_constant: int
    row_sums: List[int]
    column_sums: List[int]
    diagonal_sums: List[int]
    is_normal: bool

    @property
    def is_magic(self) -> bool:
        """Return ``True`` when every line sums to the magic constant."""

        target = self.magic_constant
        return (
            all(total == target for total in self.row_sums)
            and all(total == target for total in self.column_sums)
            and all(total == target for total in self.diagonal_sums)
        )

    def to_dict(self) -> dict:
        return {
            "n": self.order,
            "magic_constant": self.magic_constant,
            "row_sums": self.row_sums,
            "column_sums": self.column_sums,
            "diagonal_sums": self.diagonal_sums,
            "is_magic": self.is_magic,
            "is_normal": self.is_normal,
        }

    def to_json(self) -> str:
        """Serialise the summary to JSON."""

        return json.dumps(self.to_dict(), indent=2)


def summarise(square: Iterable[Iterable[int]]) -> MagicSquareSummary:
    matrix = as_matrix(square)
    order = matrix.shape[0]
    if order == 0:
        raise InvalidInputError("Square must be a non-empty n x n matrix")

    # main diagonal runs top-left to bottom-right, the other bottom-left to top-right
    primary = matrix.trace()
    secondary = np.fliplr(matrix).trace()
    values = np.sort(matrix.ravel())
    expected = np.arange(1, order * order + 1)

    return MagicSquareSummary(
        order=order,
        magic_constant=magic_constant(order),
        row_sums=[int(total) for total in matrix.sum(axis=1)],
        column_sums=[int(total) for total in matrix.sum(axis=0)],
        diagonal_sums=[int(primary), int(secondary)],
        is_normal=bool(np.array_equal(values, expected)),
    )


__all__ = ["MagicSquareSummary", "as_matrix", "magic_constant", "summarise"]
