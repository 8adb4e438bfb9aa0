"""Singly linked list nodes, a small list class and classic list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` and return its head."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def add_one(head: Optional[ListNode]) -> ListNode:
    """Add one to a number stored most significant digit first, in place.

    Returns the head, which is a new node when the number grows a digit.
    """
    if head is None:
        return ListNode(1)
    last_not_nine = None
    for node in _nodes(head):
        if node.val != 9:
            last_not_nine = node
    if last_not_nine is None:
        for node in _nodes(head):
            node.val = 0
        return ListNode(1, head)
    last_not_nine.val += 1
    for node in _nodes(last_not_nine.next):
        node.val = 0
    return head


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored least significant digit first; return a new list."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def is_circular(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` leads back to ``head``."""
    if head is None:
        return False
    visited: set[ListNode] = set()
    node = head.next
    while node is not None and node is not head:
        if node in visited:
            return False
        visited.add(node)
        node = node.next
    return node is head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Detect any cycle with the tortoise-and-hare walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def find_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the first of the two middles for even lengths."""
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = to_values(head)
    return values == values[::-1]


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        for value in values:
            self.insert_at_end(value)

    def insert_at_start(self, value: Any) -> None:
        """Put ``value`` before every other element."""
        self._head = ListNode(value, self._head)

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` after every other element."""
        node = ListNode(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_at_position(self, value: Any, pos: int) -> None:
        """Insert ``value`` so that it ends up at index ``pos``.

        Positions below zero or past the end of the list are ignored.
        """
        if pos == 0:
            self.insert_at_start(value)
            return
        if pos < 0:
            return
        node = self._head
        for _ in range(pos - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            return
        node.next = ListNode(value, node.next)

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _nodes(self._head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self._head))

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"