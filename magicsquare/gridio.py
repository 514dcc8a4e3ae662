"""Reading and writing squares as CSV or JSON files."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List, Sequence

from magicsquare.errors import InvalidInputError
from magicsquare.families import Grid


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _read_csv(path: Path) -> Grid:
    rows: Grid = []
    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        for idx, row in enumerate(reader):
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue
            try:
                rows.append([int(cell, 10) for cell in cells])
            except ValueError as exc:
                raise InvalidInputError(f"Non-integer or empty cell on line {idx + 1} of {path}") from exc
    return rows


def _read_json(path: Path) -> Grid:
    with path.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(payload, list) or not all(isinstance(row, list) for row in payload):
        raise InvalidInputError(f"{path} must contain a list of rows")
    for row in payload:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"Non-integer value {value!r} in {path}")
    return payload


def read_grid(path: Path) -> Grid:
    """Load a square from a ``.csv`` or ``.json`` file."""

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            return _read_csv(path)
        if suffix == ".json":
            return _read_json(path)
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"{path} is not UTF-8 text") from exc
    raise InvalidInputError(f"Unsupported grid file type: {path.suffix or path.name}")


def write_csv(square: Sequence[Sequence[int]], path: Path) -> None:
    _ensure_parent(path)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        for row in square:
            writer.writerow(list(row))


def write_json(square: Sequence[Sequence[int]], path: Path) -> None:
    _ensure_parent(path)
    rows: List[List[int]] = [list(row) for row in square]
    with path.open("w", encoding="utf-8") as handle:
        json.dump(rows, handle)


__all__ = ["read_grid", "write_csv", "write_json"]
