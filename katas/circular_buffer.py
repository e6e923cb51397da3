"""A fixed-capacity first-in first-out buffer."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class BufferError(Exception):
    """Base class for circular buffer errors."""


class BufferEmptyError(BufferError):
    """Raised when reading from an empty buffer."""


class BufferFullError(BufferError):
    """Raised when writing to a full buffer."""


class CircularBuffer(Generic[T]):
    """A buffer holding at most ``capacity`` elements, read in write order."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: deque[T] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularBuffer({list(self._items)!r}, capacity={self._items.maxlen})"

    def write(self, element: T) -> None:
        """Append ``element``; raise BufferFullError if there is no room."""
        if len(self._items) == self._items.maxlen:
            raise BufferFullError("buffer is full")
        self._items.append(element)

    def read(self) -> T:
        """Remove and return the oldest element; raise BufferEmptyError if none."""
        try:
            return self._items.popleft()
        except IndexError:
            raise BufferEmptyError("buffer is empty") from None

    def clear(self) -> None:
        """Drop every element."""
        self._items.clear()

    def overwrite(self, element: T) -> None:
        """Append ``element``, dropping the oldest one if the buffer is full."""
        self._items.append(element)