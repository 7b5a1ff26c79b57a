"""
A singly linked list with head and tail tracking.

Time Complexity:
Push/Append: O(1), since the tail is tracked
Count/Lookup/Conversion: O(n)
Sort: O(n^2) in the worst case, O(n) when the chain is already
in reverse-sorted order
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
import operator
from typing import Generic, Iterable, Optional

from .core.config import RenderConfig
from .core.errors import NodeIndexError, UnorderableElementError
from .core.types import Predicate, T, is_orderable

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the next node it is linked to.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[Node[T]] = next

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"


class LinkedList(Generic[T]):
    """
    LinkedList owns a chain of nodes starting at `head`.

    `tail` is a cursor to the last node of that chain; it holds no node
    that `head` does not already reach.

    Invariants:
        - head is None if and only if tail is None
        - tail, when set, is the only node whose next is None
        - the chain from head is acyclic and finite
    """

    def __init__(
        self,
        data: Optional[Iterable[Optional[T]]] = None,
        *,
        config: Optional[RenderConfig] = None,
    ) -> None:
        self.head: Optional[Node[T]] = None
        self.tail: Optional[Node[T]] = None
        self.config = config if config is not None else RenderConfig()

        if data is None:
            return

        appended = skipped = 0
        for item in data:
            if item is None:
                skipped += 1
                continue
            self.append(item)
            appended += 1
        logger.debug(f"Built list from sequence: {appended} appended, {skipped} skipped")

    def __del__(self) -> None:
        self._release()

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"LinkedList({self.to_array()!r})"

    @property
    def description(self) -> str:
        """Renders the list as "v1 -> v2 -> ... -> vn", or "Empty list"."""
        if self.head is None:
            return self.config.empty_text

        parts: list[str] = []
        current = self.head
        while current is not None:
            parts.append(str(current))
            current = current.next
        return self.config.separator.join(parts)

    def is_empty(self) -> bool:
        return self.head is None

    def push(self, value: T) -> None:
        """
        Inserts a new element at the head of the linked list.
        O(1) since no scanning is involved.
        """
        self.head = Node(value, next=self.head)
        if self.tail is None:
            self.tail = self.head

    def append(self, value: T) -> None:
        """
        Inserts a new element after the tail of the linked list.
        An empty list delegates to push().
        """
        if self.is_empty():
            self.push(value)
            return

        assert self.tail is not None
        self.tail.next = Node(value)
        self.tail = self.tail.next

    def count(self) -> int:
        """Returns the number of nodes, by walking the whole chain"""
        counter = 0
        current = self.head
        while current is not None:
            counter += 1
            current = current.next
        return counter

    def get_node(self, index: int) -> Node[T]:
        """
        Returns the node at the zero-based index specified.
        Raises NodeIndexError when the index is negative or
        not smaller than count(); there is no silent None.
        """
        index = operator.index(index)

        if index >= 0:
            current = self.head
            position = 0
            while current is not None:
                if position == index:
                    return current
                current = current.next
                position += 1

        length = self.count()
        logger.warning(f"Node index {index} out of range (length {length})")
        raise NodeIndexError(index, length)

    def penult(self) -> Optional[Node[T]]:
        """Returns the second-to-last node, or None with fewer than two nodes"""
        length = self.count()
        if length > 1:
            return self.get_node(length - 2)
        return None

    def to_array(self) -> list[T]:
        array: list[T] = []
        current = self.head
        while current is not None:
            array.append(current.value)
            current = current.next
        return array

    def to_dictionary(self) -> dict[int, T]:
        """Maps each node's zero-based index to its value"""
        mapping: dict[int, T] = {}
        current = self.head
        index = 0
        while current is not None:
            mapping[index] = current.value
            current = current.next
            index += 1
        return mapping

    def sort(self, by: Predicate = operator.lt) -> None:
        """Insertion sort by relinking the existing nodes.

        `by(a, b)` must return True when a strictly precedes b. Each node is
        detached from the original chain and spliced into a sorted chain,
        after any nodes it does not strictly precede, so equal elements keep
        their original relative order.

        Raises UnorderableElementError, leaving the list unchanged, if any
        element does not support `<` against itself. If `by` raises anything,
        including KeyboardInterrupt, the original order is restored before
        it propagates.

        Time Complexity: O(n^2) in the worst case, O(n) in best case
        Space Complexity: O(1) extra nodes; only links are rewritten
        """
        if self.head is None:
            return

        original: list[Node[T]] = []
        current = self.head
        while current is not None:
            if not is_orderable(current.value):
                raise UnorderableElementError(current.value)
            original.append(current)
            current = current.next

        try:
            self.head = self._splice_sorted(self.head, by)
        except BaseException:
            for node, successor in zip(original, original[1:] + [None]):
                node.next = successor
            self.head = original[0]
            raise
        finally:
            self.tail = self.head
            while self.tail is not None and self.tail.next is not None:
                self.tail = self.tail.next

        logger.debug(f"Sorted {len(original)} nodes")

    @staticmethod
    def _splice_sorted(head: Node[T], by: Predicate) -> Node[T]:
        sorted_head: Optional[Node[T]] = None
        current: Optional[Node[T]] = head

        while current is not None:
            next = current.next  # remember before detaching

            if sorted_head is None or by(current.value, sorted_head.value):
                current.next = sorted_head
                sorted_head = current
            else:
                cursor = sorted_head
                while cursor.next is not None and not by(current.value, cursor.next.value):
                    cursor = cursor.next
                current.next = cursor.next
                cursor.next = current

            current = next

        assert sorted_head is not None
        return sorted_head

    def clear(self) -> None:
        """Removes every node from the list"""
        released = self._release()
        if released:
            logger.debug(f"Released {released} nodes")

    def _release(self) -> int:
        """
        Unlinks the chain one node at a time, so that dropping a long
        chain never recurses through nested node deallocation.
        """
        released = 0
        current = getattr(self, "head", None)
        while current is not None:
            current.next, current = None, current.next
            released += 1
        self.head = None
        self.tail = None
        return released
