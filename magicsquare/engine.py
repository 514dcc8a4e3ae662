"""Magic square engine: sizing, generation and validation.

The engine holds an ordered, read-only registry of order families. Generation
dispatches to the first enabled family whose predicate accepts ``n``; width
queries take the smallest width any enabled family offers.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from magicsquare.errors import UnsupportedOrderError
from magicsquare.families import (
    DEFAULT_FAMILIES,
    FamilyName,
    Grid,
    OrderFamily,
    require_positive_int,
)
from magicsquare.summary import MagicSquareSummary, as_matrix, magic_constant, summarise

logger = logging.getLogger(__name__)


class MagicSquareEngine:
    """Generate and check magic squares.

    Instances carry no mutable state after construction and can be shared
    between threads.
    """

    def __init__(self, families: Optional[Iterable[OrderFamily]] = None) -> None:
        self._families: Tuple[OrderFamily, ...] = tuple(
            DEFAULT_FAMILIES if families is None else families
        )

    @property
    def families(self) -> Tuple[OrderFamily, ...]:
        return self._families

    def supported_families(self) -> List[FamilyName]:
        return [family.name for family in self._families if family.enabled]

    def compute_width(self, cell_count: int) -> int:
        """Compute the minimum width of a square able to hold ``cell_count`` cells.

        Every enabled family proposes a width and the smallest wins. Returns 0
        when no family is enabled.
        """

        cell_count = require_positive_int(cell_count, "cell_count")
        widths = [
            family.compute_width(cell_count) for family in self._families if family.enabled
        ]
        if not widths:
            logger.debug(f"No enabled order family to size {cell_count} cells")
            return 0
        width = min(widths)
        logger.debug(f"Minimum width for {cell_count} cells is {width}")
        return width

    def generate(self, n: int) -> Grid:
        """Create an ``n x n`` magic square containing ``1..n*n``.

        Raises :class:`~magicsquare.errors.UnsupportedOrderError` when no
        enabled family accepts ``n``.
        """

        n = require_positive_int(n, "n")
        for family in self._families:
            if family.matches(n):
                logger.debug(f"Generating {n} x {n} square with {family.name.value} family")
                return family.generator(n)
        raise UnsupportedOrderError(n)

    def compute_sum(self, n: int) -> int:
        """Return the sum each row, column and diagonal must reach."""

        return magic_constant(require_positive_int(n, "n"))

    def is_valid(self, grid: Sequence[Sequence[int]]) -> bool:
        """Check every row, column and both diagonals against the magic constant.

        An empty grid is not a magic square and yields ``False``; a ragged grid
        raises :class:`~magicsquare.errors.InvalidInputError`.
        """

        matrix = as_matrix(grid)
        n = matrix.shape[0]
        if n == 0:
            return False

        expected = self.compute_sum(n)
        if any(int(total) != expected for total in matrix.sum(axis=1)):
            return False
        if any(int(total) != expected for total in matrix.sum(axis=0)):
            return False
        primary = sum(matrix[i][i] for i in range(n))
        secondary = sum(matrix[n - 1 - i][i] for i in range(n))
        return int(primary) == expected and int(secondary) == expected

    def summarise(self, grid: Sequence[Sequence[int]]) -> MagicSquareSummary:
        return summarise(grid)


_default_engine = MagicSquareEngine()


def default_engine() -> MagicSquareEngine:
    return _default_engine


def compute_width(cell_count: int) -> int:
    return _default_engine.compute_width(cell_count)


def generate(n: int) -> Grid:
    return _default_engine.generate(n)


def compute_sum(n: int) -> int:
    return _default_engine.compute_sum(n)


def is_valid(grid: Sequence[Sequence[int]]) -> bool:
    return _default_engine.is_valid(grid)


__all__ = [
    "MagicSquareEngine",
    "compute_sum",
    "compute_width",
    "default_engine",
    "generate",
    "is_valid",
]
