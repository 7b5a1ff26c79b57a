"""Exception hierarchy for the linked list.

Each error also derives from the matching builtin so callers can catch
either the package error or the standard one.
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base exception for all linked list errors."""
    pass


class NodeIndexError(LinkedListError, IndexError):
    """Raised when a node is requested at a position outside the list."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        if index < 0:
            reason = "Index must be a non-negative integer"
        else:
            reason = "Index exceeds the bounds of the list"
        super().__init__(f"Index {index} out of range for list of length {length}. {reason}.")


class UnorderableElementError(LinkedListError, TypeError):
    """Raised when sort() meets an element whose type defines no ordering."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Cannot sort list: elements of type {type(value).__name__!r} do not support ordering"
        )
