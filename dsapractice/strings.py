"""String problems: palindromes, substring search and subsequences."""

from __future__ import annotations


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways over its ASCII letters and digits.

    Letters are compared without regard to case; everything else is skipped.
    """
    cleaned = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return cleaned == cleaned[::-1]


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)