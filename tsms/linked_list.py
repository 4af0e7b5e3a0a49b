"""Singly linked list with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list that keeps a cursor on one of its nodes.

    ``first`` places the cursor on the head and ``next`` moves it forward;
    both return the data under the cursor, or ``None`` once it runs off the end.
    ``push_current`` and ``pop_current`` act at the cursor.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._current: Optional[_Node] = None
        self._size = 0

    def first(self) -> Any:
        """Move the cursor to the head and return its data, or None if empty."""
        self._current = self._head
        return None if self._current is None else self._current.data

    def next(self) -> Any:
        """Advance the cursor and return its data, or None past the end."""
        if self._current is None:
            return None
        self._current = self._current.next
        return None if self._current is None else self._current.data

    def push_front(self, data: Any) -> None:
        """Insert data before the head."""
        self._head = _Node(data, self._head)
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append data after the last node."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def push_current(self, data: Any) -> None:
        """Insert data right after the cursor; does nothing without a cursor."""
        if self._current is None:
            return
        self._current.next = _Node(data, self._current.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the head and return its data.

        Raises IndexError when the list is empty.
        """
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._current is node:
            self._current = node.next
        self._size -= 1
        return node.data

    def pop_current(self) -> Any:
        """Remove the node under the cursor and return its data.

        The cursor moves to the node that followed. Raises IndexError when
        there is no cursor.
        """
        target = self._current
        if target is None:
            raise IndexError("no current element")
        prev: Optional[_Node] = None
        node = self._head
        while node is not None and node is not target:
            prev, node = node, node.next
        if node is None:
            raise IndexError("current element is not in the list")
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._current = node.next
        self._size -= 1
        return node.data

    def clean(self) -> None:
        """Remove every element."""
        self._head = None
        self._current = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size