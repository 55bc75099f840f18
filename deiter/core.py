"""
Core iterator implementations.

This module contains the LazyIterator and DoubleEndedIterator base classes
and the adapters that transform them element by element.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from operator import length_hint
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class LazyIterator(ABC, Generic[T]):
    """
    Base class for lazy iterators.

    A lazy iterator yields its elements one at a time from the front and
    does no work until an element is requested. It is a regular Python
    iterator, so it can be used with for loops, list() and itertools.
    """

    @abstractmethod
    def __next__(self) -> T:
        """
        Produce the next element from the front.

        Returns:
            The next element

        Raises:
            StopIteration: If no elements remain
        """
        ...

    def __iter__(self) -> LazyIterator[T]:
        return self

    def map(self, func: Callable[[T], U]) -> LazyIterator[U]:
        """
        Lazily apply a function to each element.

        Args:
            func: Function to apply to each element

        Returns:
            A new iterator of transformed elements
        """
        return Map(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> LazyIterator[T]:
        """
        Lazily keep only the elements matching a predicate.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new iterator of filtered elements
        """
        return Filter(self, predicate)

    def flatten(self) -> LazyIterator:
        """
        Flatten an iterator of iterables into an iterator of their elements.

        Returns:
            A Flatten adapter over this iterator
        """
        from .flatten import Flatten

        return Flatten(self)

    def fold(self, init: R, fold_op: Callable[[R, T], R]) -> R:
        """
        Fold the remaining elements from the front.

        Args:
            init: The initial accumulator value
            fold_op: Function to fold an element into the accumulator

        Returns:
            The final accumulator
        """
        accumulator = init
        for item in self:
            accumulator = fold_op(accumulator, item)
        return accumulator

    def collect(self) -> list[T]:
        """
        Collect the remaining elements into a list.

        Returns:
            A list containing all remaining elements in front order
        """
        return list(self)

    def count(self) -> int:
        """
        Count the remaining elements, consuming them.

        Returns:
            The number of elements drawn
        """
        return self.fold(0, lambda total, _: total + 1)

    def sum(self, start=0):
        """
        Sum the remaining elements, consuming them.

        Args:
            start: Value to start the sum from (default 0)

        Returns:
            The sum of all remaining elements
        """
        return self.fold(start, lambda total, item: total + item)


class DoubleEndedIterator(LazyIterator[T], ABC):
    """
    A lazy iterator that can also be drawn from the back.

    The front and the back share the same remaining elements, so calls to
    next() and next_back() may be interleaved freely. Once they meet, both
    ends report exhaustion.
    """

    @abstractmethod
    def next_back(self) -> T:
        """
        Produce the next element from the back.

        Returns:
            The last remaining element

        Raises:
            StopIteration: If no elements remain
        """
        ...

    def __reversed__(self) -> DoubleEndedIterator[T]:
        return self.rev()

    def rev(self) -> DoubleEndedIterator[T]:
        """
        Swap the ends of this iterator.

        The returned view shares state with this iterator: drawing from
        the front of one draws from the back of the other.

        Returns:
            A reversed view of this iterator
        """
        return Rev(self)

    def map(self, func: Callable[[T], U]) -> DoubleEndedIterator[U]:
        """
        Lazily apply a function to each element, from either end.

        Args:
            func: Function to apply to each element

        Returns:
            A new double-ended iterator of transformed elements
        """
        return DoubleEndedMap(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> DoubleEndedIterator[T]:
        """
        Lazily keep only the elements matching a predicate, from either end.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new double-ended iterator of filtered elements
        """
        return DoubleEndedFilter(self, predicate)

    def flatten(self) -> DoubleEndedIterator:
        """
        Flatten an iterator of iterables, traversable from both ends.

        Back traversal requires every inner iterable to support it as well;
        this is checked lazily, when the back end of an inner is needed.

        Returns:
            A DoubleEndedFlatten adapter over this iterator
        """
        from .flatten import DoubleEndedFlatten

        return DoubleEndedFlatten(self)

    def rfold(self, init: R, fold_op: Callable[[R, T], R]) -> R:
        """
        Fold the remaining elements from the back.

        Args:
            init: The initial accumulator value
            fold_op: Function to fold an element into the accumulator

        Returns:
            The final accumulator
        """
        accumulator = init
        while True:
            try:
                item = self.next_back()
            except StopIteration:
                return accumulator
            accumulator = fold_op(accumulator, item)


# Concrete iterator adapters


class Map(LazyIterator[U], Generic[T, U]):
    """Iterator that maps a function over elements."""

    def __init__(self, base: LazyIterator[T], func: Callable[[T], U]):
        self.base = base
        self.func = func

    def __next__(self) -> U:
        return self.func(next(self.base))

    def __length_hint__(self) -> int:
        return length_hint(self.base)


class DoubleEndedMap(Map[T, U], DoubleEndedIterator[U]):
    """Map adapter over a double-ended base."""

    base: DoubleEndedIterator[T]

    def next_back(self) -> U:
        return self.func(self.base.next_back())


class Filter(LazyIterator[T]):
    """Iterator that filters elements by a predicate."""

    def __init__(self, base: LazyIterator[T], predicate: Callable[[T], bool]):
        self.base = base
        self.predicate = predicate

    def __next__(self) -> T:
        while True:
            item = next(self.base)
            if self.predicate(item):
                return item


class DoubleEndedFilter(Filter[T], DoubleEndedIterator[T]):
    """Filter adapter over a double-ended base."""

    base: DoubleEndedIterator[T]

    def next_back(self) -> T:
        while True:
            item = self.base.next_back()
            if self.predicate(item):
                return item


class Rev(DoubleEndedIterator[T]):
    """Double-ended iterator with its ends swapped."""

    def __init__(self, base: DoubleEndedIterator[T]):
        self.base = base

    def __next__(self) -> T:
        return self.base.next_back()

    def next_back(self) -> T:
        return next(self.base)

    def rev(self) -> DoubleEndedIterator[T]:
        return self.base

    def __length_hint__(self) -> int:
        return length_hint(self.base)
