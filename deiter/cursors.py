"""
Cursor implementations for common data structures.

Cursors turn data structures into lazy iterators that the adapters can
draw from, from the front and, where the data allows it, from the back.
"""

from collections.abc import Collection, Iterable, Iterator, Sequence
from operator import length_hint
from typing import TypeVar

from .core import DoubleEndedIterator, LazyIterator
from .protocols import DoubleEndedCursor

T = TypeVar("T")


class SequenceCursor(DoubleEndedIterator[T]):
    """
    Double-ended cursor over a slice of a sequence.

    Works with lists, tuples, ranges, strings and any other Sequence. The
    cursor keeps a reference to the data rather than a copy, so the data
    must not be mutated while the cursor is in use.
    """

    def __init__(
        self, data: Sequence[T], start: int = 0, end: int | None = None
    ):
        """
        Create a sequence cursor.

        Args:
            data: The sequence to iterate over
            start: Starting index (inclusive)
            end: Ending index (exclusive), or None for end of sequence
        """
        self.data = data
        self.start = start
        self.end = end if end is not None else len(data)

        if self.start < 0 or self.start > len(data):
            raise ValueError(f"Invalid start index: {self.start}")
        if self.end < 0 or self.end > len(data):
            raise ValueError(f"Invalid end index: {self.end}")
        if self.start > self.end:
            raise ValueError(f"Start index {self.start} > end index {self.end}")

    def __len__(self) -> int:
        """Return the number of elements not yet drawn from either end."""
        return self.end - self.start

    def __next__(self) -> T:
        if self.start >= self.end:
            raise StopIteration
        item = self.data[self.start]
        self.start += 1
        return item

    def next_back(self) -> T:
        if self.start >= self.end:
            raise StopIteration
        item = self.data[self.end - 1]
        self.end -= 1
        return item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, {self.start}, {self.end})"


class IterCursor(LazyIterator[T]):
    """
    Front-only cursor over an arbitrary iterable.

    This is used for generators, sets and anything else that cannot be
    walked from the back.
    """

    def __init__(self, data: Iterable[T]):
        """
        Create an iterable cursor.

        Args:
            data: The iterable to draw from
        """
        self._iterator: Iterator[T] = iter(data)

    def __next__(self) -> T:
        return next(self._iterator)

    def __length_hint__(self) -> int:
        """Forward the wrapped iterator's length estimate."""
        return length_hint(self._iterator)


class ReversibleCursor(DoubleEndedIterator[T]):
    """
    Double-ended cursor over a sized collection that supports reversed().

    Used for dicts, dict views, deques and other collections that can be
    walked from either end but are not cheaply indexable. One iterator
    runs from each end; a shared count of remaining elements stops them
    when they meet.
    """

    def __init__(self, data: Collection[T]):
        """
        Create a reversible cursor.

        Args:
            data: A sized collection with a __reversed__ method
        """
        self._remaining = len(data)
        self._front: Iterator[T] = iter(data)
        self._back: Iterator[T] = reversed(data)

    def __len__(self) -> int:
        """Return the number of elements not yet drawn from either end."""
        return self._remaining

    def __next__(self) -> T:
        if self._remaining <= 0:
            raise StopIteration
        item = next(self._front)
        self._remaining -= 1
        return item

    def next_back(self) -> T:
        if self._remaining <= 0:
            raise StopIteration
        item = next(self._back)
        self._remaining -= 1
        return item


class CursorAdapter(DoubleEndedIterator[T]):
    """
    Lazy iterator over a third-party double-ended cursor.

    Any object with __next__ and next_back() qualifies; both ends are
    forwarded unchanged, so the wrapped cursor keeps its own state.
    """

    def __init__(self, cursor: DoubleEndedCursor[T]):
        self.cursor = cursor

    def __next__(self) -> T:
        return next(self.cursor)

    def next_back(self) -> T:
        return self.cursor.next_back()

    def __length_hint__(self) -> int:
        return length_hint(self.cursor)
