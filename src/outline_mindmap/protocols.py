"""Protocols for pluggable mind map layouts."""

from typing import Protocol, runtime_checkable

from outline_mindmap.models.node import Position


@runtime_checkable
class LayoutPolicy(Protocol):
    """Protocol for policies that assign node coordinates."""

    def root_position(self) -> Position:
        """Return where the root node is placed."""
        ...

    def place(
        self,
        parent: Position,
        *,
        depth: int,
        sibling_index: int,
    ) -> Position:
        """Return the position of a child given its parent's position."""
        ...
