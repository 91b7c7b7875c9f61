"""Shared test fixtures."""

from pathlib import Path

import pytest

from outline_mindmap.core.tree.builder import parse_mind_map
from outline_mindmap.models.node import MindMapNode

NYC_OUTLINE = """
# nyc [#4169e1]
## traditional compute [#808080] (just another cloud)
## data & ai [#4169e1] (differentiator)
### GenAI - MyCity [#4cd038] (went well)
#### Microsoft [#212529] (head-to-head)
#### CE Engagement [#FF0000] (went well)
#### Showcasing Platform [#212529] (Demo)
### Vision AI [#212529] (Computer Vision)
### New Node [#212529] (Innovation)
"""


@pytest.fixture
def nyc_outline() -> str:
    return NYC_OUTLINE


@pytest.fixture
def nyc_tree() -> MindMapNode:
    """Return the parsed NYC outline with default settings."""
    return parse_mind_map(NYC_OUTLINE)


@pytest.fixture
def outline_file(tmp_path: Path) -> Path:
    path = tmp_path / "nyc.md"
    path.write_text(NYC_OUTLINE, encoding="utf-8")
    return path
