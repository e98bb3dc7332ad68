"""Reshape a flat sequence into rows."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Optional

_ROWS, _COLS = 3, 4


def to_grid(values: Iterable[int], rows: int, cols: int) -> list[list[int]]:
    """Split ``values`` row by row into a ``rows`` x ``cols`` grid.

    Raises ValueError if the count of values does not fill the grid exactly.
    """
    flat = list(values)
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    if len(flat) != rows * cols:
        raise ValueError(
            f"{len(flat)} values cannot fill a {rows}x{cols} grid"
        )
    return [flat[row * cols:(row + 1) * cols] for row in range(rows)]


def main(argv: Optional[list[str]] = None) -> int:
    """Read twelve integers from standard input and print them as 3 rows of 4."""
    parser = argparse.ArgumentParser(
        description="Read 12 integers and print them as a 3x4 grid."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()[: _ROWS * _COLS]
    try:
        grid = to_grid((int(token) for token in tokens), _ROWS, _COLS)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for row in grid:
        print("".join(str(value) for value in row))
    return 0