"""Common type definitions for the linked list."""

from __future__ import annotations

import operator
from typing import Any, Callable, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T")
C = TypeVar("C", bound=Comparable)

# "a strictly precedes b"
Predicate = Callable[[C, C], bool]


def is_orderable(value: object) -> bool:
    """True if `value < value` can be evaluated.

    Goes through the `<` operator so reflected comparisons (a type that only
    defines __gt__) count. A runtime Protocol check would accept anything,
    since every class inherits object.__lt__.
    """
    try:
        operator.lt(value, value)
    except TypeError:
        return False
    return True
