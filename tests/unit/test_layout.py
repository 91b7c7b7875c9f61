"""Tests for the vertical layout policies."""

from outline_mindmap.config import LayoutSettings
from outline_mindmap.core.tree.layout import AnchoredLayout, IndexLayout, get_layout_policy
from outline_mindmap.models.node import Position
from outline_mindmap.protocols import LayoutPolicy


def test_policies_satisfy_protocol() -> None:
    assert isinstance(IndexLayout(200, 100), LayoutPolicy)
    assert isinstance(AnchoredLayout(200, 100), LayoutPolicy)


def test_get_layout_policy_resolves_by_name() -> None:
    assert isinstance(get_layout_policy(LayoutSettings()), IndexLayout)
    policy = get_layout_policy(LayoutSettings(policy="anchored", vertical_spacing=80))
    assert policy == AnchoredLayout(200, 80)


def test_index_layout_ignores_parent_row() -> None:
    layout = IndexLayout(200, 100)
    parent = Position(x=200, y=700)
    placed = [layout.place(parent, depth=2, sibling_index=i) for i in range(3)]
    assert placed == [Position(400, 0), Position(400, 100), Position(400, 200)]


def test_anchored_layout_first_child_above_parent() -> None:
    layout = AnchoredLayout(250, 80)
    parent = layout.root_position()
    assert parent == Position(0, 160)
    placed = [layout.place(parent, depth=1, sibling_index=i) for i in range(3)]
    assert placed == [Position(250, 80), Position(250, 240), Position(250, 320)]


def test_anchored_layout_single_child() -> None:
    layout = AnchoredLayout(250, 80)
    child = layout.place(Position(250, 80), depth=2, sibling_index=0)
    assert child == Position(500, 0)
