"""Render mind map trees back to outline text."""

import io

from outline_mindmap.core.tree.navigation import iter_nodes
from outline_mindmap.models.node import MindMapNode


def render_tree_as_outline(
    root: MindMapNode,
    *,
    max_depth: int | None = None,
    include_colors: bool = True,
    include_edge_labels: bool = True,
) -> str:
    """Render a node and its descendants as heading outline text.

    Args:
        root: The node to start rendering from.
        max_depth: Max levels below the start node to include (None = unlimited).
        include_colors: Whether to write ``[#RRGGBB]`` tags.
        include_edge_labels: Whether to write trailing ``(edge label)`` annotations.

    Returns:
        Outline text that parses back into the same structure.
    """
    out = io.StringIO()
    for node in iter_nodes(root):
        relative_depth = node.depth - root.depth
        if max_depth is not None and relative_depth > max_depth:
            continue

        parts = ["#" * (relative_depth + 1)]
        if node.label:
            parts.append(node.label)
        if include_colors:
            parts.append(f"[{node.color}]")
        if include_edge_labels and node.edge_label is not None:
            parts.append(f"({node.edge_label})")
        out.write(" ".join(parts) + "\n")

        # Truncation indicator when children are cut off by max_depth
        if max_depth is not None and relative_depth == max_depth and node.child_count > 0:
            noun = "child" if node.child_count == 1 else "children"
            out.write(f"- ... ({node.child_count} more {noun}, id={node.id})\n")

    return out.getvalue()
