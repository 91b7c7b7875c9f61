"""Tree navigation: lookup, breadcrumbs, flattening into nodes and edges."""

from collections.abc import Iterator

from outline_mindmap.models.node import Breadcrumb, Edge, MindMapGraph, MindMapNode


def iter_nodes(root: MindMapNode) -> Iterator[MindMapNode]:
    """Yield every node depth-first, parents before children, in source order."""
    todo = [root]
    while todo:
        node = todo.pop()
        yield node
        todo.extend(reversed(node.children))


def find_node(root: MindMapNode, node_id: str) -> MindMapNode | None:
    """Return the node with ``node_id``, or None."""
    return next((n for n in iter_nodes(root) if n.id == node_id), None)


def get_breadcrumbs(root: MindMapNode, node_id: str) -> tuple[Breadcrumb, ...]:
    """Get ancestor breadcrumbs for a node.

    Returns breadcrumbs in order from root to immediate parent (excludes the node
    itself). An unknown id yields an empty tuple.
    """
    todo: list[tuple[MindMapNode, tuple[Breadcrumb, ...]]] = [(root, ())]
    while todo:
        node, trail = todo.pop()
        if node.id == node_id:
            return trail
        crumb = Breadcrumb(node_id=node.id, label=node.label, depth=node.depth)
        todo.extend((child, (*trail, crumb)) for child in reversed(node.children))
    return ()


def to_graph(root: MindMapNode) -> MindMapGraph:
    """Flatten a tree into nodes plus one edge per parent-child pair."""
    nodes: list[MindMapNode] = []
    edges: list[Edge] = []
    for node in iter_nodes(root):
        nodes.append(node)
        edges.extend(
            Edge(
                id=f"{node.id}-{child.id}",
                source=node.id,
                target=child.id,
                label=child.edge_label,
                color=child.color,
            )
            for child in node.children
        )
    return MindMapGraph(nodes=tuple(nodes), edges=tuple(edges))
