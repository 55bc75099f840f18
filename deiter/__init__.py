"""
deiter - Double-Ended Lazy Iterators for Python

A small library of lazy iterator adapters modelled on Rust's Iterator and
DoubleEndedIterator traits, centred on a flatten adapter that can be drawn
from both ends interchangeably.
"""

from .adapters import de_range, into_iter
from .config import TraversalConfig, get_thread_check, set_thread_check
from .core import DoubleEndedIterator, LazyIterator
from .cursors import (
    CursorAdapter,
    IterCursor,
    ReversibleCursor,
    SequenceCursor,
)
from .flatten import DoubleEndedFlatten, Flatten, flatten
from .protocols import Cursor, DoubleEndedCursor

__version__ = "0.1.0"

__all__ = [
    "LazyIterator",
    "DoubleEndedIterator",
    "Flatten",
    "DoubleEndedFlatten",
    "flatten",
    "into_iter",
    "de_range",
    "SequenceCursor",
    "IterCursor",
    "ReversibleCursor",
    "CursorAdapter",
    "Cursor",
    "DoubleEndedCursor",
    "TraversalConfig",
    "set_thread_check",
    "get_thread_check",
]
