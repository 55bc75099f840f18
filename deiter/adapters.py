"""
Adapters for converting standard Python objects into lazy iterators.

This module provides the ergonomic interface for creating cursors from
common Python data structures.
"""

from collections import deque
from collections.abc import Iterable, Reversible, Sequence, Sized
from typing import TypeVar, overload

from .core import DoubleEndedIterator, LazyIterator
from .cursors import (
    CursorAdapter,
    IterCursor,
    ReversibleCursor,
    SequenceCursor,
)
from .protocols import DoubleEndedCursor

T = TypeVar("T")


def de_range(start: int, stop: int, step: int = 1) -> SequenceCursor[int]:
    """
    Create a double-ended cursor over a range of integers.

    This is the double-ended equivalent of Python's range() function.

    Args:
        start: Starting value (inclusive)
        stop: Ending value (exclusive)
        step: Step size (default 1)

    Returns:
        A SequenceCursor over the range

    Raises:
        ValueError: If step is zero

    Example:
        >>> from deiter import de_range
        >>> de_range(0, 5).rev().collect()
        [4, 3, 2, 1, 0]
    """
    if step == 0:
        raise ValueError("Range step cannot be zero")
    return SequenceCursor(range(start, stop, step))


@overload
def into_iter(data: DoubleEndedIterator[T]) -> DoubleEndedIterator[T]: ...


@overload
def into_iter(data: Sequence[T]) -> SequenceCursor[T]: ...


@overload
def into_iter(data: Iterable[T]) -> LazyIterator[T]: ...


def into_iter(data: Iterable[T]) -> LazyIterator[T]:
    """
    Convert an iterable into a lazy iterator.

    Existing lazy iterators are returned unchanged and other objects with
    next_back() are adapted as they are. Indexable sequences (lists,
    tuples, ranges, strings, ...) and sized reversible collections (dicts,
    deques, ...) become double-ended cursors, and any other iterable
    becomes a front-only cursor. Nothing is consumed.

    Args:
        data: Any iterable

    Returns:
        A lazy iterator over the data

    Raises:
        TypeError: If the data is not iterable

    Example:
        >>> from deiter import into_iter
        >>> into_iter([1, 2, 3]).map(lambda x: x * 2).collect()
        [2, 4, 6]
    """
    if isinstance(data, LazyIterator):
        return data
    elif isinstance(data, DoubleEndedCursor):
        return CursorAdapter(data)
    elif isinstance(data, Sequence) and not isinstance(data, deque):
        return SequenceCursor(data)
    elif isinstance(data, Reversible) and isinstance(data, Sized):
        return ReversibleCursor(data)
    else:
        return IterCursor(data)
