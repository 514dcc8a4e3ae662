"""Order families known to the magic square engine.

Each family pairs a predicate over the order ``n`` with a width function and a
generator. Only the doubly-even family (``n = 4p``) is enabled by default; the
odd and singly-even families are declared so that enabling them fails loudly
instead of producing an invalid square.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Tuple

from magicsquare.errors import FamilyNotImplementedError, InvalidInputError

Grid = List[List[int]]

DURER_TEMPLATE: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 1, 0),
    (1, 0, 0, 1),
    (1, 0, 0, 1),
    (0, 1, 1, 0),
)


class FamilyName(Enum):
    """Supported construction families, in registration order."""
    DOUBLY_EVEN = "doubly-even"
    ODD = "odd"
    SINGLY_EVEN = "singly-even"


@dataclass(frozen=True)
class OrderFamily:
    """A registry entry describing how to size and build one family of squares."""

    name: FamilyName
    test: Callable[[int], bool]
    compute_width: Callable[[int], int]
    generator: Callable[[int], Grid]
    enabled: bool = True

    def matches(self, n: int) -> bool:
        return self.enabled and self.test(n)

    def with_enabled(self, enabled: bool) -> "OrderFamily":
        return replace(self, enabled=enabled)


def require_positive_int(value: object, name: str = "value") -> int:
    """Return ``value`` as ``int`` or raise :class:`InvalidInputError`."""

    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidInputError(f"{name}={value!r} is not a positive integer")
    return int(value)


def _min_side(cell_count: int) -> int:
    # ceil(sqrt(cell_count)) without float rounding
    return math.isqrt(cell_count - 1) + 1


def doubly_even_width(cell_count: int) -> int:
    """Smallest multiple of 4 whose square holds ``cell_count`` cells."""

    side = _min_side(cell_count)
    return -(-side // 4) * 4


def odd_width(cell_count: int) -> int:
    side = _min_side(cell_count)
    return side + (1 if side % 2 == 0 else 0)


def singly_even_width(cell_count: int) -> int:
    side = max(_min_side(cell_count), 6)
    while side % 4 != 2:
        side += 1
    return side


def generate_doubly_even(n: int) -> Grid:
    """Build an ``n x n`` magic square for ``n = 4p`` using Dürer's pattern.

    The 4x4 template is tiled across the grid. Counting from the first cell in
    row-major order, cells marked ``1`` receive the running count; counting
    again from the last cell backwards, cells marked ``0`` receive the second
    running count. The two passes cover complementary cells, so every value in
    ``1..n*n`` is placed exactly once.
    """

    n = require_positive_int(n, "n")
    if n % 4 != 0:
        raise InvalidInputError(f"{n} is not a multiple of 4")

    pattern = [[DURER_TEMPLATE[row % 4][col % 4] for col in range(n)] for row in range(n)]
    square = [[0 for _ in range(n)] for _ in range(n)]

    counter = 0
    for row in range(n):
        for col in range(n):
            counter += 1  # every cell advances the count, filled or not
            if pattern[row][col] == 1:
                square[row][col] = counter

    counter = 0
    for row in range(n - 1, -1, -1):
        for col in range(n - 1, -1, -1):
            counter += 1
            if pattern[row][col] == 0:
                square[row][col] = counter

    return square


def generate_odd(n: int) -> Grid:
    # TODO: Siamese method
    raise FamilyNotImplementedError(FamilyName.ODD.value, n)


def generate_singly_even(n: int) -> Grid:
    # TODO: Conway's LUX method
    raise FamilyNotImplementedError(FamilyName.SINGLY_EVEN.value, n)


DOUBLY_EVEN = OrderFamily(
    name=FamilyName.DOUBLY_EVEN,
    test=lambda n: n % 4 == 0,
    compute_width=doubly_even_width,
    generator=generate_doubly_even,
)

ODD = OrderFamily(
    name=FamilyName.ODD,
    test=lambda n: n % 2 == 1,
    compute_width=odd_width,
    generator=generate_odd,
    enabled=False,
)

SINGLY_EVEN = OrderFamily(
    name=FamilyName.SINGLY_EVEN,
    test=lambda n: n % 4 == 2 and n > 2,
    compute_width=singly_even_width,
    generator=generate_singly_even,
    enabled=False,
)

DEFAULT_FAMILIES: Tuple[OrderFamily, ...] = (DOUBLY_EVEN, ODD, SINGLY_EVEN)


__all__ = [
    "DEFAULT_FAMILIES",
    "DOUBLY_EVEN",
    "DURER_TEMPLATE",
    "FamilyName",
    "Grid",
    "ODD",
    "OrderFamily",
    "SINGLY_EVEN",
    "doubly_even_width",
    "generate_doubly_even",
    "generate_odd",
    "generate_singly_even",
    "odd_width",
    "require_positive_int",
    "singly_even_width",
]
