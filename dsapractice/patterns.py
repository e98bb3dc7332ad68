"""Star patterns: pyramids and diamonds."""

from __future__ import annotations

import argparse
from typing import Optional


def right_half_pyramid(n: int) -> list[str]:
    """Rows of 1 to ``n`` stars, aligned left."""
    return ["*" * i for i in range(1, n + 1)]


def inverted_right_half_pyramid(n: int) -> list[str]:
    """Rows of ``n`` down to 1 stars, aligned left."""
    return ["*" * i for i in range(n, 0, -1)]


def left_half_pyramid(n: int) -> list[str]:
    """Rows of 1 to ``n`` stars, aligned right."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]


def inverted_left_half_pyramid(n: int) -> list[str]:
    """Rows of ``n`` down to 1 stars, aligned right."""
    return [" " * (n - i) + "*" * i for i in range(n, 0, -1)]


def full_pyramid(n: int) -> list[str]:
    """A centred pyramid with 1, 3, 5, ... stars per row."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def inverted_full_pyramid(n: int) -> list[str]:
    """A centred pyramid standing on its tip."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(n, 0, -1)]


def half_diamond(n: int) -> list[str]:
    """Rows growing from 1 to ``n`` stars and shrinking back to 1."""
    return right_half_pyramid(n) + inverted_right_half_pyramid(n - 1)


def diamond(n: int) -> list[str]:
    """A diamond of spaced stars; the widest row appears twice."""
    upper = [" " * (n - i) + "* " * i for i in range(1, n + 1)]
    return upper + upper[::-1]


_ALL = (
    right_half_pyramid,
    inverted_right_half_pyramid,
    left_half_pyramid,
    inverted_left_half_pyramid,
    full_pyramid,
    inverted_full_pyramid,
    half_diamond,
    diamond,
)


def main(argv: Optional[list[str]] = None) -> int:
    """Print every pattern, one after another."""
    parser = argparse.ArgumentParser(description="Print star patterns.")
    parser.add_argument("size", nargs="?", type=int, default=5)
    args = parser.parse_args(argv)
    for pattern in _ALL:
        for line in pattern(args.size):
            print(line)
    return 0