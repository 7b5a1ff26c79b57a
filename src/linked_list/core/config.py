"""Configuration for the linked list.

Only the textual rendering is tunable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Parameters controlling how a list renders as text.

    Attributes:
        separator: Text placed between consecutive node values
        empty_text: Text rendered for a list with no nodes
    """

    separator: str = " -> "
    empty_text: str = "Empty list"
