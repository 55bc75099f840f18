"""
Core protocol definitions for sequential cursors.

These protocols describe the capabilities the adapters draw on, following
the split between Rust's Iterator and DoubleEndedIterator traits.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)  # Covariant (output only)


class Cursor(Protocol[T_co]):
    """
    A cursor produces elements from its front.

    This is Python's iterator protocol: exhaustion is signalled by raising
    StopIteration, and once exhausted a cursor stays exhausted.
    """

    @abstractmethod
    def __next__(self) -> T_co:
        """
        Produce the next element from the front.

        Returns:
            The next element

        Raises:
            StopIteration: If no elements remain
        """
        ...

    def __iter__(self) -> Cursor[T_co]: ...


@runtime_checkable
class DoubleEndedCursor(Cursor[T_co], Protocol[T_co]):
    """
    A cursor that can also produce elements from its back.

    Both ends draw from the same remaining elements: once the front and
    back positions meet, both ends report exhaustion.
    """

    @abstractmethod
    def next_back(self) -> T_co:
        """
        Produce the next element from the back.

        Returns:
            The last remaining element

        Raises:
            StopIteration: If no elements remain
        """
        ...
