"""Core definitions shared by the linked list package."""

from .config import RenderConfig
from .errors import LinkedListError, NodeIndexError, UnorderableElementError

__all__ = [
    "RenderConfig",
    "LinkedListError",
    "NodeIndexError",
    "UnorderableElementError",
]
