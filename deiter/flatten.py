"""
Flattening adapters.

A flatten adapter turns an iterator of iterables into a single lazy
iterator over the inner elements. The double-ended variant can be drawn
from both ends, interchangeably:

    >>> from deiter import flatten
    >>> it = flatten([[1, 2, 3], [4, 5, 6]])
    >>> next(it), it.next_back(), next(it)
    (1, 6, 2)

Each end keeps its own cursor over the inner iterable it is currently
draining. When the outer iterator runs dry, an end falls back to draining
the cursor held by the opposite end, from its own side. Since both ends of
that last cursor draw from the same remaining elements, the two ends meet
without skipping or repeating anything.
"""

import threading
import warnings
from collections.abc import Iterable
from operator import length_hint
from typing import Any, TypeVar

from .adapters import into_iter
from .config import TraversalConfig
from .core import DoubleEndedIterator, LazyIterator

T = TypeVar("T")

_EXHAUSTED: Any = object()
# Marks an empty pending slot
_VACANT: Any = object()


def _next_back_of(cursor: LazyIterator) -> Any:
    """Draw from the back of a cursor that may only support the front."""
    if not isinstance(cursor, DoubleEndedIterator):
        raise TypeError(
            f"{type(cursor).__name__} does not support back traversal"
        )
    return cursor.next_back()


class Flatten(LazyIterator[T]):
    """
    Iterator over the elements of each iterable produced by an outer one.

    Empty inner iterables are skipped. Exceptions raised by the outer
    iterator or an inner one propagate unchanged, and the cursor that
    raised stays in place, so drawing again retries the same position.
    An inner value that cannot be turned into a cursor is held in a
    pending slot for its end and retried on the next draw that reaches it.
    """

    def __init__(self, outer: Iterable[Iterable[T]]):
        """
        Create a flatten adapter. No elements are consumed.

        Args:
            outer: An iterable whose elements are iterables
        """
        self.outer: LazyIterator[Iterable[T]] = into_iter(outer)
        self.front_cursor: LazyIterator[T] | None = None
        self.back_cursor: LazyIterator[T] | None = None
        # Inner values drawn from the outer but not yet opened as cursors
        self._front_pending: Any = _VACANT
        self._back_pending: Any = _VACANT
        # Set once the outer iterator reports exhaustion at either end
        self._outer_done = False
        self._owner: int | None = None
        if TraversalConfig.global_config().thread_check:
            self._owner = threading.get_ident()

    def __next__(self) -> T:
        if self._owner is not None:
            self._check_owner()

        while True:
            if self.front_cursor is not None:
                try:
                    return next(self.front_cursor)
                except StopIteration:
                    self.front_cursor = None

            inner = self._draw_outer_front()
            if inner is _EXHAUSTED:
                break
            self._open_front(inner)

        # Outer is drained: finish the cursor opened by the back end
        if self.back_cursor is None:
            if self._back_pending is _VACANT:
                raise StopIteration
            self._open_back(self._back_pending)
        try:
            return next(self.back_cursor)
        except StopIteration:
            self.back_cursor = None
            raise

    def __length_hint__(self) -> int:
        """
        Estimate the remaining elements from the open cursors.

        Inner iterables still held by the outer iterator are not counted,
        so this is a lower bound.
        """
        hint = 0
        for cursor in (self.front_cursor, self.back_cursor):
            if cursor is not None:
                hint += length_hint(cursor)
        return hint

    def _open_front(self, inner: Any) -> None:
        self._front_pending = inner
        self.front_cursor = into_iter(inner)
        self._front_pending = _VACANT

    def _open_back(self, inner: Any) -> None:
        self._back_pending = inner
        self.back_cursor = into_iter(inner)
        self._back_pending = _VACANT

    def _draw_outer_front(self) -> Any:
        if self._front_pending is not _VACANT:
            return self._front_pending
        if self._outer_done:
            return _EXHAUSTED
        try:
            return next(self.outer)
        except StopIteration:
            self._outer_done = True
            return _EXHAUSTED

    def _check_owner(self) -> None:
        if self._owner != threading.get_ident():
            # Warn once per adapter
            self._owner = None
            warnings.warn(
                f"{type(self).__name__} is being traversed from a thread "
                "other than the one that created it. Traversal mutates "
                "cursor state and is not thread-safe.",
                RuntimeWarning,
                stacklevel=3,
            )


class DoubleEndedFlatten(Flatten[T], DoubleEndedIterator[T]):
    """
    Flatten adapter that can also be drawn from the back.

    Back traversal needs the outer iterator and the inner iterables it
    reaches to support next_back(). This is checked when the back end of
    one of them is actually needed: a TypeError is raised then, and the
    offending cursor is kept so its elements remain reachable from the
    front.
    """

    outer: DoubleEndedIterator[Iterable[T]]

    def next_back(self) -> T:
        if self._owner is not None:
            self._check_owner()

        while True:
            if self.back_cursor is not None:
                try:
                    return _next_back_of(self.back_cursor)
                except StopIteration:
                    self.back_cursor = None

            inner = self._draw_outer_back()
            if inner is _EXHAUSTED:
                break
            self._open_back(inner)

        # Outer is drained: finish the cursor opened by the front end
        if self.front_cursor is None:
            if self._front_pending is _VACANT:
                raise StopIteration
            self._open_front(self._front_pending)
        try:
            return _next_back_of(self.front_cursor)
        except StopIteration:
            self.front_cursor = None
            raise

    def _draw_outer_back(self) -> Any:
        if self._back_pending is not _VACANT:
            return self._back_pending
        if self._outer_done:
            return _EXHAUSTED
        try:
            return _next_back_of(self.outer)
        except StopIteration:
            self._outer_done = True
            return _EXHAUSTED


def flatten(outer: Iterable[Iterable[T]]) -> Flatten[T]:
    """
    Flatten an iterable of iterables lazily.

    Args:
        outer: An iterable whose elements are iterables

    Returns:
        A DoubleEndedFlatten if the outer iterable can be traversed from
        the back (sequences, sized reversible collections and double-ended
        cursors), otherwise a front-only Flatten

    Example:
        >>> from deiter import flatten
        >>> list(reversed(flatten([[1, 2], [], [3]])))
        [3, 2, 1]
    """
    outer_iter = into_iter(outer)
    if isinstance(outer_iter, DoubleEndedIterator):
        return DoubleEndedFlatten(outer_iter)
    return Flatten(outer_iter)
