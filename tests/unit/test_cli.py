"""Tests for the outline-mindmap CLI."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from outline_mindmap.cli import app
from outline_mindmap.logging_config import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Detach loguru from the runner's captured stderr after each test."""
    yield
    configure_logging()


def test_parse_prints_tree_json(outline_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(outline_file)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["id"] == "nyc"
    assert [c["label"] for c in data["children"]] == ["traditional compute", "data & ai"]
    assert data["children"][0]["edgeLabel"] == "just another cloud"


def test_parse_reads_stdin() -> None:
    result = runner.invoke(app, ["parse", "-", "--indent", "0"], input="# A\n## B\n## C\n")
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [c["position"] for c in data["children"]] == [
        {"x": 200.0, "y": 0.0},
        {"x": 200.0, "y": 100.0},
    ]


def test_parse_with_anchored_policy_and_spacing(outline_file: Path) -> None:
    result = runner.invoke(
        app,
        ["parse", str(outline_file), "--policy", "anchored", "--x-spacing", "250", "--y-spacing", "80"],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["position"] == {"x": 0, "y": 160.0}
    assert data["children"][0]["position"] == {"x": 250.0, "y": 80.0}


def test_parse_policy_from_environment(outline_file: Path) -> None:
    result = runner.invoke(
        app, ["parse", str(outline_file)], env={"OUTLINE_MINDMAP_POLICY": "anchored"}
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["position"]["y"] == 200.0


def test_parse_graph_output(outline_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(outline_file), "--graph"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data["nodes"]) == 9
    assert len(data["edges"]) == 8


def test_parse_empty_input_gives_fallback_root() -> None:
    result = runner.invoke(app, ["parse", "-"], input="no headings here\n")
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {
        "id": "root",
        "label": "Root",
        "color": "#212529",
        "position": {"x": 0, "y": 0},
        "children": [],
    }


def test_parse_unknown_policy_fails(outline_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(outline_file), "--policy", "radial"])
    assert result.exit_code == 1


def test_parse_missing_file_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", str(tmp_path / "missing.md")])
    assert result.exit_code == 1


def test_outline_with_max_depth(outline_file: Path) -> None:
    result = runner.invoke(app, ["outline", str(outline_file), "--max-depth", "1", "--no-colors"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "# nyc",
        "## traditional compute (just another cloud)",
        "## data & ai (differentiator)",
        "- ... (3 more children, id=data-&-ai)",
    ]


def test_show_node_with_breadcrumbs(outline_file: Path) -> None:
    result = runner.invoke(app, ["show", "vision-ai", str(outline_file)])
    assert result.exit_code == 0
    assert "nyc > data & ai" in result.stdout
    assert "Vision AI  [#212529]  id=vision-ai" in result.stdout
    assert "position=(400, 100)  depth=2" in result.stdout
    assert "edge: Computer Vision" in result.stdout


def test_show_unknown_node(outline_file: Path) -> None:
    result = runner.invoke(app, ["show", "nope", str(outline_file)])
    assert result.exit_code == 1
    assert "Node 'nope' not found." in result.stdout


def test_verbose_flag_accepted(outline_file: Path) -> None:
    result = runner.invoke(app, ["-v", "parse", str(outline_file)])
    assert result.exit_code == 0


def test_parse_deep_outline() -> None:
    text = "\n".join("#" * level + f" L{level}" for level in range(1, 2001))
    result = runner.invoke(app, ["parse", "-", "--indent", "0"], input=text)
    assert result.exit_code == 0
    assert result.stdout.count('"children": ') == 2000
