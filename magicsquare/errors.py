"""Exceptions raised by the magic square engine."""

from __future__ import annotations


class MagicSquareError(Exception):
    """Base exception for magic square operations."""
    pass


class InvalidInputError(MagicSquareError, ValueError):
    """Raised when an argument is not a positive integer or a grid is malformed."""
    pass


class UnsupportedOrderError(MagicSquareError):
    """Raised when no enabled order family can build a square of the given order."""

    def __init__(self, order: int) -> None:
        super().__init__(f"Unable to generate {order} x {order} magic square")
        self.order = order


class FamilyNotImplementedError(MagicSquareError, NotImplementedError):
    """Raised when dispatch reaches an order family whose generator is a stub."""

    def __init__(self, family: str, order: int) -> None:
        super().__init__(
            f"{family} magic squares are not implemented yet (requested order {order})"
        )
        self.family = family
        self.order = order


__all__ = [
    "FamilyNotImplementedError",
    "InvalidInputError",
    "MagicSquareError",
    "UnsupportedOrderError",
]
