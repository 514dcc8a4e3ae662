"""Generate, validate and render magic squares."""

from magicsquare.engine import (
    MagicSquareEngine,
    compute_sum,
    compute_width,
    default_engine,
    generate,
    is_valid,
)
from magicsquare.errors import (
    FamilyNotImplementedError,
    InvalidInputError,
    MagicSquareError,
    UnsupportedOrderError,
)
from magicsquare.families import FamilyName, OrderFamily
from magicsquare.render import render_html, render_text
from magicsquare.summary import MagicSquareSummary, summarise

__version__ = "0.1.0"

__all__ = [
    "FamilyName",
    "FamilyNotImplementedError",
    "InvalidInputError",
    "MagicSquareEngine",
    "MagicSquareError",
    "MagicSquareSummary",
    "OrderFamily",
    "UnsupportedOrderError",
    "compute_sum",
    "compute_width",
    "default_engine",
    "generate",
    "is_valid",
    "render_html",
    "render_text",
    "summarise",
]
