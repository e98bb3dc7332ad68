"""Singly linked list nodes and classic two-pointer algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list.

        Iterating a cyclic list never ends.
        """
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for val in reversed(list(values)):
        head = ListNode(val, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def _length(head: Optional[ListNode]) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a slow and a fast runner meet, or None."""
    if head is None or head.next is None:
        return None
    slow: Optional[ListNode] = head.next
    fast: Optional[ListNode] = head.next.next
    while slow is not None and fast is not None and slow is not fast:
        slow = slow.next
        fast = fast.next
        fast = fast.next if fast is not None else None
    if slow is None or fast is None:
        return None
    return fast


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list starting at ``head`` loops back on itself."""
    return _meeting_point(head) is not None


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def get_intersection_node(
    a: Optional[ListNode], b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None."""
    len_a, len_b = _length(a), _length(b)
    longer, shorter = (a, b) if len_a >= len_b else (b, a)
    for _ in range(abs(len_a - len_b)):
        longer = longer.next
    while longer is not None and shorter is not None and longer is not shorter:
        longer = longer.next
        shorter = shorter.next
    if longer is None or shorter is None:
        return None
    return longer


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the new head.

    Raises IndexError unless ``1 <= n <= len(list)``.
    """
    if n < 1:
        raise IndexError(f"position {n} from the end is out of range")
    lead = head
    for _ in range(n):
        if lead is None:
            raise IndexError(f"position {n} from the end is out of range")
        lead = lead.next
    if lead is None:
        return head.next
    trail = head
    while lead.next is not None:
        trail = trail.next
        lead = lead.next
    trail.next = trail.next.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the values of the list read the same both ways.

    The second half is reversed for the comparison and restored afterwards.
    """
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    tail = reverse_list(slow)
    try:
        left, right = head, tail
        while right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        reverse_list(tail)


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    if head is None or head.next is None:
        return head
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head