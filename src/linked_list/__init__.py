"""Linked List - a singly linked list container in Python."""

from .core.config import RenderConfig
from .core.errors import LinkedListError, NodeIndexError, UnorderableElementError
from .linkedlist import LinkedList, Node

__all__ = [
    "LinkedList",
    "Node",
    "RenderConfig",
    "LinkedListError",
    "NodeIndexError",
    "UnorderableElementError",
]
