"""JSON output for mind map trees of any depth."""

import json
from collections.abc import Iterator
from typing import Any

_END = object()


def dumps_json(value: Any, *, indent: int | None = None) -> str:
    """Encode nested dicts and lists like ``json.dumps(value, indent=indent)``.

    ``json.dumps`` recurses once per nesting level and fails on very deep
    outlines; this walks containers with an explicit stack instead. Scalars
    are still encoded by ``json.dumps``, so the output is byte-identical.
    """
    item_sep = "," if indent is not None else ", "
    parts: list[str] = []
    # Frames: [items iterator, closing bracket, depth of the items, items written]
    stack: list[list[Any]] = []

    def newline(depth: int) -> str:
        return "" if indent is None else "\n" + " " * (indent * depth)

    def open_value(item: Any, depth: int) -> None:
        if isinstance(item, dict) and item:
            parts.append("{")
            items: Iterator[Any] = iter(item.items())
            stack.append([items, "}", depth + 1, 0])
        elif isinstance(item, (list, tuple)) and item:
            parts.append("[")
            stack.append([iter(item), "]", depth + 1, 0])
        else:
            parts.append(json.dumps(item))

    open_value(value, 0)
    while stack:
        frame = stack[-1]
        items, closing, depth, written = frame
        item = next(items, _END)
        if item is _END:
            stack.pop()
            parts.append(newline(depth - 1) + closing)
            continue
        if written:
            parts.append(item_sep)
        frame[3] = written + 1
        parts.append(newline(depth))
        if closing == "}":
            key, item = item
            parts.append(json.dumps(key) + ": ")
        open_value(item, depth)
    return "".join(parts)
