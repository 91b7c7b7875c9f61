"""Domain models for outline mind maps."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ParsedEntry:
    """A single heading line of an outline."""

    level: int
    label: str
    color: str
    edge_label: str | None = None
    line_number: int = 0


@dataclass(frozen=True)
class Position:
    """Canvas coordinates of a node."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class MindMapNode:
    """A positioned node in a mind map tree.

    Comparison and serialization walk the tree with an explicit stack, so
    outlines deeper than the interpreter's recursion limit still work.
    """

    id: str
    label: str
    color: str
    position: Position
    edge_label: str | None = None
    depth: int = 0
    children: tuple["MindMapNode", ...] = field(default=(), repr=False)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def _own_fields(self) -> tuple[Any, ...]:
        return (self.id, self.label, self.color, self.position, self.edge_label, self.depth)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MindMapNode):
            return NotImplemented
        todo: list[tuple[MindMapNode, MindMapNode]] = [(self, other)]
        while todo:
            a, b = todo.pop()
            if a._own_fields() != b._own_fields() or len(a.children) != len(b.children):
                return False
            todo.extend(zip(a.children, b.children))
        return True

    def to_dict(self) -> dict[str, Any]:
        """Serialize the subtree rooted at this node.

        ``edgeLabel`` is only emitted when the node has one.
        """
        result: list[dict[str, Any]] = []
        # Pre-order: each node is appended to its parent's list in source order.
        todo: list[tuple[MindMapNode, list[dict[str, Any]]]] = [(self, result)]
        while todo:
            node, siblings = todo.pop()
            data: dict[str, Any] = {
                "id": node.id,
                "label": node.label,
                "color": node.color,
                "position": node.position.to_dict(),
            }
            if node.edge_label is not None:
                data["edgeLabel"] = node.edge_label
            data["children"] = []
            siblings.append(data)
            todo.extend((child, data["children"]) for child in reversed(node.children))
        return result[0]


@dataclass(frozen=True)
class Breadcrumb:
    """A single ancestor in a breadcrumb trail."""

    node_id: str
    label: str
    depth: int


@dataclass(frozen=True)
class Edge:
    """A parent-child connection, labelled and colored after the child."""

    id: str
    source: str
    target: str
    label: str | None = None
    color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "source": self.source, "target": self.target}
        if self.label is not None:
            data["label"] = self.label
        if self.color is not None:
            data["color"] = self.color
        return data


@dataclass(frozen=True)
class MindMapGraph:
    """A mind map flattened into nodes and edges."""

    nodes: tuple[MindMapNode, ...]
    edges: tuple[Edge, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [
                {
                    "id": n.id,
                    "label": n.label,
                    "color": n.color,
                    "depth": n.depth,
                    "position": n.position.to_dict(),
                }
                for n in self.nodes
            ],
            "edges": [e.to_dict() for e in self.edges],
        }
