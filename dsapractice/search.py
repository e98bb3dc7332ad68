"""Binary search over a sorted sequence."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

_SAMPLE = (1, 3, 5, 7, 9, 11)


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def main(argv: Optional[list[str]] = None) -> int:
    """Print where a target sits in the built-in sorted sample."""
    parser = argparse.ArgumentParser(description="Binary search a sorted sample.")
    parser.add_argument("target", nargs="?", type=int, default=9)
    args = parser.parse_args(argv)
    print(binary_search(_SAMPLE, args.target), end="")
    return 0