"""Array problems solved with hashing, two pointers and in-place partitioning."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby
from typing import Optional


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return indices ``(i, j)``, ``i < j``, of two values adding up to ``target``.

    The pair found first while scanning left to right is returned; None if
    there is no such pair.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale.

    Raises ValueError when there are no prices.
    """
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    best = 0
    for price in it:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of values that sums to ``target``.

    Each quadruplet is in ascending order and the quadruplets come in
    ascending order too. The input is left untouched.
    """
    a = sorted(nums)
    n = len(a)
    found: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and a[i] == a[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and a[j] == a[j - 1]:
                continue
            need = target - a[i] - a[j]
            left, right = j + 1, n - 1
            while left < right:
                pair = a[left] + a[right]
                if pair == need:
                    found.append([a[i], a[j], a[left], a[right]])
                    left += 1
                    right -= 1
                    while left < right and a[left] == a[left - 1]:
                        left += 1
                    while left < right and a[right] == a[right + 1]:
                        right -= 1
                elif pair < need:
                    left += 1
                else:
                    right -= 1
    return found


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its first ``k`` items are the distinct values.

    Returns ``k``; items past it are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: list[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front, keeping order.

    Returns how many such items there are; items past them are left as
    they were.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the rest."""
    nonzero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = nonzero + zeros


def intersection(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs."""
    wanted = set(a)
    return list(dict.fromkeys(value for value in b if value in wanted))


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place.

    Zeros come first, then ones, then every other value.
    """
    zeros = [value for value in nums if value == 0]
    ones = [value for value in nums if value == 1]
    rest = [value for value in nums if value not in (0, 1)]
    nums[:] = zeros + ones + rest