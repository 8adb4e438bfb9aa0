"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList:
    """A list that can be walked and edited from both ends.

    Positional operations with a position outside the list do nothing,
    except insertion past the end, which appends.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def insert_at_beginning(self, data: Any) -> None:
        """Put ``data`` before every other element."""
        node = _Node(data)
        if self._head is None:
            self._head = self._tail = node
            return
        node.next = self._head
        self._head.prev = node
        self._head = node

    def insert_at_end(self, data: Any) -> None:
        """Put ``data`` after every other element."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
            return
        node.prev = self._tail
        self._tail.next = node
        self._tail = node

    def insert_at_position(self, data: Any, position: int) -> None:
        """Insert ``data`` at index ``position``; past the end it is appended."""
        if position < 0:
            return
        if position == 0:
            self.insert_at_beginning(data)
            return
        current = self._head
        for _ in range(position - 1):
            if current is None:
                break
            current = current.next
        if current is None:
            self.insert_at_end(data)
            return
        node = _Node(data)
        node.prev = current
        node.next = current.next
        if current.next is not None:
            current.next.prev = node
        else:
            self._tail = node
        current.next = node

    def delete_from_beginning(self) -> None:
        """Remove the first element, if any."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None

    def delete_from_end(self) -> None:
        """Remove the last element, if any."""
        if self._tail is None:
            return
        self._tail = self._tail.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None

    def delete_from_position(self, position: int) -> None:
        """Remove the element at index ``position``, if there is one."""
        if self._head is None or position < 0:
            return
        if position == 0:
            self.delete_from_beginning()
            return
        current = self._head
        for _ in range(position):
            current = current.next
            if current is None:
                return
        if current is self._tail:
            self.delete_from_end()
            return
        current.prev.next = current.next
        current.next.prev = current.prev

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __contains__(self, value: Any) -> bool:
        return any(node.data == value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "NULL"

    def format_reversed(self) -> str:
        """Render the elements from last to first."""
        return "".join(f"{value} <-> " for value in reversed(self)) + "NULL"