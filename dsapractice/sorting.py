"""Selection sort and bubble sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Optional


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by selection sort."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by bubble sort, stopping early once sorted."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Read a count and that many integers; print them sorted by both methods."""
    parser = argparse.ArgumentParser(
        description="Read N followed by N integers and print them sorted."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("missing element count")
        count = int(tokens[0])
        if count < 0:
            raise ValueError("element count must not be negative")
        values = [int(token) for token in tokens[1:count + 1]]
        if len(values) < count:
            raise ValueError(f"expected {count} values, got {len(values)}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    ordered = selection_sort(values)
    print(_line(ordered))
    print(_line(bubble_sort(ordered)), end="")
    return 0