"""A doubly linked list with a cursor for editing in the middle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: _Node[T] | None = None
        self.next: _Node[T] | None = None


def _link(a: _Node[T] | None, b: _Node[T] | None) -> None:
    if a is not None:
        a.next = b
    if b is not None:
        b.prev = a


class LinkedList(Generic[T]):
    """A sequence supporting constant-time insertion and removal at both ends."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._len = 0
        for element in iterable:
            self.push_back(element)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, element: T) -> None:
        """Append ``element`` at the back."""
        self.cursor_back().insert_after(element)

    def push_front(self, element: T) -> None:
        """Prepend ``element`` at the front."""
        self.cursor_front().insert_before(element)

    def pop_back(self) -> T | None:
        """Remove and return the last element, or None if the list is empty."""
        return self.cursor_back().take()

    def pop_front(self) -> T | None:
        """Remove and return the first element, or None if the list is empty."""
        return self.cursor_front().take()

    def cursor_front(self) -> Cursor[T]:
        """Return a cursor positioned on the first element."""
        return Cursor(self, self._head)

    def cursor_back(self) -> Cursor[T]:
        """Return a cursor positioned on the last element."""
        return Cursor(self, self._tail)


class Cursor(Generic[T]):
    """A position within a LinkedList that can move, read, insert and remove."""

    def __init__(self, owner: LinkedList[T], node: _Node[T] | None) -> None:
        self._list = owner
        self._current = node

    def peek(self) -> T | None:
        """Return the element under the cursor, or None if it is off the list."""
        return None if self._current is None else self._current.value

    def replace(self, value: T) -> None:
        """Replace the element under the cursor."""
        if self._current is None:
            raise IndexError("cursor is out of bounds")
        self._current.value = value

    def _step(self, forward: bool) -> bool:
        if self._current is None:
            return False
        self._current = self._current.next if forward else self._current.prev
        return self._current is not None

    def next(self) -> T | None:
        """Move one step towards the back and return the element there."""
        self._step(True)
        return self.peek()

    def prev(self) -> T | None:
        """Move one step towards the front and return the element there."""
        self._step(False)
        return self.peek()

    def take(self) -> T | None:
        """Remove and return the element under the cursor.

        The cursor then moves to the following element, or to the preceding
        one if there is none.
        """
        node = self._current
        if node is None:
            return None
        owner = self._list
        _link(node.prev, node.next)
        if owner._head is node:
            owner._head = node.next
        if owner._tail is node:
            owner._tail = node.prev
        self._current = node.next if node.next is not None else node.prev
        owner._len -= 1
        node.prev = node.next = None
        return node.value

    def _insert_into_empty(self, node: _Node[T]) -> bool:
        owner = self._list
        if owner._head is None:
            owner._head = owner._tail = node
            self._current = node
            owner._len += 1
            return True
        if self._current is None:
            raise IndexError("cursor is out of bounds")
        return False

    def insert_after(self, element: T) -> None:
        """Insert ``element`` right after the cursor, which stays where it is."""
        node = _Node(element)
        if self._insert_into_empty(node):
            return
        current = self._current
        following = current.next
        _link(current, node)
        _link(node, following)
        if following is None:
            self._list._tail = node
        self._list._len += 1

    def insert_before(self, element: T) -> None:
        """Insert ``element`` right before the cursor, which stays where it is."""
        node = _Node(element)
        if self._insert_into_empty(node):
            return
        current = self._current
        preceding = current.prev
        _link(preceding, node)
        _link(node, current)
        if preceding is None:
            self._list._head = node
        self._list._len += 1

    def seek_forward(self, n: int) -> bool:
        """Move ``n`` steps towards the back; False if the end was passed."""
        return all(self._step(True) for _ in range(n))

    def seek_backward(self, n: int) -> bool:
        """Move ``n`` steps towards the front; False if the start was passed."""
        return all(self._step(False) for _ in range(n))