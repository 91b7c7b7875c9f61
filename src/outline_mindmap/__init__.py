"""Heading outlines to positioned mind map trees."""

from outline_mindmap.config import LayoutSettings
from outline_mindmap.core.parser.outline import parse_line, parse_outline
from outline_mindmap.core.tree.builder import build_mind_map, parse_mind_map
from outline_mindmap.models.node import MindMapNode, ParsedEntry, Position

__all__ = [
    "LayoutSettings",
    "MindMapNode",
    "ParsedEntry",
    "Position",
    "build_mind_map",
    "parse_line",
    "parse_mind_map",
    "parse_outline",
]
