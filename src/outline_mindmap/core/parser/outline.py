"""Tokenize outline text into leveled heading entries."""

import re

from loguru import logger

from outline_mindmap.config import DEFAULT_COLOR
from outline_mindmap.models.node import ParsedEntry

_HEADING_RE = re.compile(r"^#+")
_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
_COLOR_RE = re.compile(r"\[(#[0-9a-f]{6})\]", re.IGNORECASE)
_COLOR_TAG_RE = re.compile(r"\s*\[#[0-9a-f]{6}\]", re.IGNORECASE)


def split_trailing_annotation(text: str) -> tuple[str, str | None]:
    """Split ``text`` into (rest, annotation) at a trailing parenthesized group.

    The group is the one whose ``(`` balances the final ``)``, so nested
    parentheses stay inside the annotation: ``A (see f(x))`` gives
    ``("A", "see f(x)")``. Without a balanced trailing group the annotation
    is None and ``text`` is returned unchanged.
    """
    if not text.endswith(")"):
        return text, None
    depth = 0
    for i in range(len(text) - 1, -1, -1):
        if text[i] == ")":
            depth += 1
        elif text[i] == "(":
            depth -= 1
            if depth == 0:
                return text[:i].rstrip(), text[i + 1 : -1]
    return text, None


def parse_line(
    line: str,
    *,
    default_color: str = DEFAULT_COLOR,
    line_number: int = 0,
) -> ParsedEntry | None:
    """Parse one outline line.

    Returns None for blank lines and lines that do not start with ``#``.
    A color tag or edge annotation that does not match simply falls back to
    the default color / no edge label.

    Color tags are removed before the trailing annotation is looked up, so
    ``## X (rel) [#ff0000]`` still has the edge label ``rel`` even though the
    raw line ends with the tag.
    """
    text = line.strip()
    heading = _HEADING_RE.match(text)
    if heading is None:
        return None

    color_match = _COLOR_RE.search(text)
    color = color_match.group(1) if color_match else default_color

    text = _COLOR_TAG_RE.sub("", text).rstrip()
    text, edge_label = split_trailing_annotation(text)
    label = _HEADING_PREFIX_RE.sub("", text).strip()

    return ParsedEntry(
        level=len(heading.group(0)),
        label=label,
        color=color,
        edge_label=edge_label,
        line_number=line_number,
    )


def parse_outline(text: str | None, *, default_color: str = DEFAULT_COLOR) -> list[ParsedEntry]:
    """Parse outline text into heading entries, in source order.

    Args:
        text: Outline text, possibly multi-line with blank lines.
        default_color: Color for headings without a ``[#RRGGBB]`` tag.

    Returns:
        One ParsedEntry per heading line. Non-heading lines are skipped.
    """
    if not text:
        return []

    entries: list[ParsedEntry] = []
    skipped = 0
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        entry = parse_line(line, default_color=default_color, line_number=line_number)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    logger.debug("Parsed {} heading entries, skipped {} non-heading lines", len(entries), skipped)
    return entries
