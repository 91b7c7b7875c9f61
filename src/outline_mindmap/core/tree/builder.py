"""Fold heading entries into a positioned mind map tree."""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from outline_mindmap.config import LayoutSettings
from outline_mindmap.core.parser.outline import parse_outline
from outline_mindmap.core.tree.layout import get_layout_policy
from outline_mindmap.models.node import MindMapNode, ParsedEntry, Position

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(eq=False)
class OutlineBranch:
    """A heading entry with the entries nested under it (build-time only)."""

    entry: ParsedEntry
    children: list["OutlineBranch"] = field(default_factory=list)


def fold_entries(entries: Sequence[ParsedEntry]) -> list[OutlineBranch]:
    """Rebuild the hierarchy implied by heading levels.

    Keeps a stack of open ancestors on top of a virtual level-0 root. Each
    entry closes every open ancestor whose level is >= its own, then becomes
    the last child of whatever is left on top.

    Returns:
        The top-level branches, in source order.
    """
    top = OutlineBranch(ParsedEntry(level=0, label="", color=""))
    stack = [top]
    for entry in entries:
        while len(stack) > 1 and stack[-1].entry.level >= entry.level:
            stack.pop()
        branch = OutlineBranch(entry)
        stack[-1].children.append(branch)
        stack.append(branch)
    return top.children


def slugify(label: str) -> str:
    """Lowercase a label and hyphenate its whitespace."""
    return _WHITESPACE_RE.sub("-", label.strip().lower()) or "node"


class _IdAllocator:
    """Hand out ids, appending -N when a slug was already used."""

    def __init__(self) -> None:
        self._used: set[str] = set()

    def make(self, base: str) -> str:
        name = base
        count = 0
        while name in self._used:
            count += 1
            name = f"{base}-{count}"
        self._used.add(name)
        return name


def fallback_root(settings: LayoutSettings | None = None) -> MindMapNode:
    """Return the node used when an outline has no headings."""
    settings = settings or LayoutSettings()
    policy = get_layout_policy(settings)
    return MindMapNode(
        id=settings.fallback_id,
        label=settings.fallback_label,
        color=settings.default_color,
        position=policy.root_position(),
    )


def build_mind_map(
    entries: Sequence[ParsedEntry],
    *,
    settings: LayoutSettings | None = None,
) -> MindMapNode:
    """Build the positioned mind map for a sequence of heading entries.

    A single top-level heading becomes the root. Several top-level headings
    are gathered under a synthetic root carrying the fallback id and label.
    No entries at all yields the fallback root.
    """
    settings = settings or LayoutSettings()
    policy = get_layout_policy(settings)

    branches = fold_entries(entries)
    if not branches:
        logger.debug("No headings found, returning fallback root")
        return fallback_root(settings)

    ids = _IdAllocator()
    if len(branches) == 1:
        root = branches[0]
        root_id = ids.make(slugify(root.entry.label))
    else:
        logger.debug("{} top-level headings, adding a synthetic root", len(branches))
        root = OutlineBranch(
            ParsedEntry(level=0, label=settings.fallback_label, color=settings.default_color),
            children=branches,
        )
        root_id = ids.make(settings.fallback_id)

    # First pass (pre-order): ids, depths and positions. Child counts are
    # already final since the fold is complete.
    placed: list[tuple[OutlineBranch, str, int, Position]] = []
    todo: list[tuple[OutlineBranch, int, Position]] = [(root, 0, policy.root_position())]
    while todo:
        branch, depth, position = todo.pop()
        node_id = root_id if branch is root else ids.make(slugify(branch.entry.label))
        placed.append((branch, node_id, depth, position))

        for i in reversed(range(len(branch.children))):
            child_position = policy.place(position, depth=depth + 1, sibling_index=i)
            todo.append((branch.children[i], depth + 1, child_position))

    # Second pass (reverse pre-order): children are built before their parent.
    built: dict[OutlineBranch, MindMapNode] = {}
    for branch, node_id, depth, position in reversed(placed):
        built[branch] = MindMapNode(
            id=node_id,
            label=branch.entry.label,
            color=branch.entry.color,
            position=position,
            edge_label=branch.entry.edge_label,
            depth=depth,
            children=tuple(built.pop(child) for child in branch.children),
        )

    logger.debug("Built mind map with {} nodes", len(placed))
    return built[root]


def parse_mind_map(text: str | None, *, settings: LayoutSettings | None = None) -> MindMapNode:
    """Parse outline text and lay it out as a mind map.

    Never raises for any text: malformed tags fall back to defaults and a
    document without headings produces the fallback root.
    """
    settings = settings or LayoutSettings()
    entries = parse_outline(text, default_color=settings.default_color)
    return build_mind_map(entries, settings=settings)
