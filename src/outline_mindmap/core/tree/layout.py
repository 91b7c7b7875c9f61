"""Vertical layout policies for mind map nodes.

Both policies share the horizontal rule: ``x = depth * horizontal_spacing``,
where depth counts tree edges from the root rather than raw heading levels.
"""

from dataclasses import dataclass

from outline_mindmap.config import LayoutSettings
from outline_mindmap.models.node import Position
from outline_mindmap.protocols import LayoutPolicy


@dataclass(frozen=True)
class IndexLayout:
    """Place each node at ``sibling_index * vertical_spacing``.

    Siblings never collide. Children are not centred under their parent and
    unrelated subtrees at the same depth may overlap.
    """

    horizontal_spacing: float
    vertical_spacing: float

    def root_position(self) -> Position:
        return Position(x=0, y=0)

    def place(
        self,
        parent: Position,
        *,
        depth: int,
        sibling_index: int,
    ) -> Position:
        return Position(x=depth * self.horizontal_spacing, y=sibling_index * self.vertical_spacing)


@dataclass(frozen=True)
class AnchoredLayout:
    """Place children relative to their parent's row.

    The root sits two rows down the canvas. A first child goes one row above
    its parent; the following ones go ``sibling_index`` rows below it.
    """

    horizontal_spacing: float
    vertical_spacing: float

    def root_position(self) -> Position:
        return Position(x=0, y=self.vertical_spacing * 2)

    def place(
        self,
        parent: Position,
        *,
        depth: int,
        sibling_index: int,
    ) -> Position:
        x = depth * self.horizontal_spacing
        if sibling_index == 0:
            return Position(x=x, y=parent.y - self.vertical_spacing)
        return Position(x=x, y=parent.y + sibling_index * self.vertical_spacing)


def get_layout_policy(settings: LayoutSettings) -> LayoutPolicy:
    """Resolve the policy named in ``settings``."""
    if settings.policy == "anchored":
        return AnchoredLayout(settings.horizontal_spacing, settings.vertical_spacing)
    if settings.policy == "index":
        return IndexLayout(settings.horizontal_spacing, settings.vertical_spacing)
    msg = f"Unknown layout policy {settings.policy!r}"
    raise ValueError(msg)
