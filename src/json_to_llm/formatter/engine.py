"""Recursive rendering of normalized values into indented LLM text."""

from __future__ import annotations

from typing import Any

from json_to_llm.formatter.classifier import classify_array
from json_to_llm.formatter.primitives import format_primitive, is_primitive
from json_to_llm.models import FormatConfig

INDENT_UNIT = " " * 4

EMPTY_ARRAY = "EmptyArray"
EMPTY_OBJECT = "EmptyObject"
MAX_DEPTH_MARKER = "[Max depth reached]"
CIRCULAR_MARKER = "[Circular reference]"


def _reindent(text: str, prefix: str) -> str:
    """Prefix the first line of text and every line after a newline."""
    return prefix + text.replace("\n", "\n" + prefix)


class LLMFormatter:
    """Render a normalized value tree as brace-free, indented text.

    Each call to ``format`` starts with an empty traversal path. The path
    holds the ids of the containers on the current branch only, so shared
    but acyclic references are rendered in full wherever they appear.
    """

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config or FormatConfig()
        self._path: set[int] = set()

    def format(self, value: Any) -> str:
        """Render a value at the root depth."""
        self._path = set()
        return self._format_value(value, 0)

    def _format_value(self, value: Any, depth: int) -> str:
        if depth > self.config.max_depth:
            return MAX_DEPTH_MARKER

        if isinstance(value, (list, dict)):
            key = id(value)
            if key in self._path:
                return CIRCULAR_MARKER
            self._path.add(key)
            try:
                if isinstance(value, list):
                    return self._format_array(value, depth)
                return self._format_object(value, depth)
            finally:
                self._path.discard(key)

        if is_primitive(value):
            return format_primitive(value)
        return str(value)

    def _format_array(self, items: list[Any], depth: int) -> str:
        if not items:
            return EMPTY_ARRAY

        ignore_falsy = self.config.ignore_falsy
        kind = classify_array(items, ignore_falsy)
        if kind.is_typed:
            inline = [
                format_primitive(item)
                for item in items
                if is_primitive(item) and not (item is None and ignore_falsy)
            ]
            if inline:
                return f"{kind.value}: {', '.join(inline)}"

        indent = INDENT_UNIT * depth
        item_indent = indent + INDENT_UNIT
        parts = ["Array:"]
        for item in items:
            if isinstance(item, list):
                rendered = self._format_value(item, depth + 1)
                parts.append(f"{item_indent}array:")
                parts.append(_reindent(rendered, item_indent + INDENT_UNIT))
            elif isinstance(item, dict):
                rendered = self._format_value(item, depth + 1)
                parts.append(f"{item_indent}object:")
                parts.append(_reindent(rendered, item_indent))
            elif item is None and ignore_falsy:
                continue
            else:
                parts.append(f"{item_indent}{format_primitive(item)}")

        if len(parts) == 1:
            return EMPTY_ARRAY
        return "\n".join(parts)

    def _format_object(self, obj: dict[str, Any], depth: int) -> str:
        keys = [
            key
            for key, val in obj.items()
            if not (self.config.ignore_falsy and val is None)
        ]
        if not keys:
            return EMPTY_OBJECT

        if self.config.sort_keys == "asc":
            keys.sort()

        indent = INDENT_UNIT * depth
        lines: list[str] = []
        for key in keys:
            rendered = self._format_value(obj[key], depth + 1)
            if "\n" in rendered:
                lines.append(f"{indent}{key}:")
                lines.append(_reindent(rendered, indent + INDENT_UNIT))
            else:
                lines.append(f"{indent}{key}: {rendered}")
        return "\n".join(lines)
