"""Conversion of arbitrary data into LLM-friendly text.

The output is a compact, brace-free rendering of the data's structure:
a fixed header line, 4-space indentation per level, one-line typed
arrays for homogeneous primitives and explicit sentinels for empty or
truncated shapes. Keys are unquoted and JSON punctuation is dropped.

This module provides:
- The never-raising ``json_to_llm_string`` entry point
- JSON fallback helpers and size comparison for choosing a format
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from json_to_llm.formatter.engine import LLMFormatter
from json_to_llm.formatter.governor import apply_char_budget
from json_to_llm.formatter.normalizer import NormalizationError, normalize
from json_to_llm.models import FormatConfig

logger = logging.getLogger(__name__)

HEADER = "#content converted from json\n"

LLM_CONTENT_TYPE = "text/plain"
JSON_CONTENT_TYPE = "application/json"


def _one_line(error: Exception) -> str:
    """Collapse an error message onto a single line."""
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
            for detail in error.errors(include_url=False)
        )
    return " ".join(str(error).split())


def json_to_llm_string(
    data: Any,
    options: FormatConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Convert data to indented, brace-free text for an LLM.

    Never raises: normalization failures and unexpected errors are
    reported as a bracketed line after the header.

    Args:
        data: Any Python value.
        options: A FormatConfig or a mapping of option names (snake_case
            or camelCase). Unknown names are ignored.
        **overrides: Individual options applied on top of ``options``.

    Returns:
        Text starting with ``#content converted from json``.

    Examples:
        >>> json_to_llm_string([1, 2, 3])
        '#content converted from json\\nNumberArray: 1, 2, 3'
        >>> json_to_llm_string({"name": "John", "email": None})
        '#content converted from json\\nname: "John"'
    """
    try:
        config = FormatConfig.resolve(options, **overrides)

        try:
            normalized = normalize(data)
        except NormalizationError as e:
            logger.debug("Normalization failed: %s", e)
            return HEADER + e.diagnostic()

        body = LLMFormatter(config).format(normalized)
        return apply_char_budget(HEADER + body, config.max_chars)
    except Exception as e:
        logger.warning("LLM text conversion failed: %s", e)
        return f"{HEADER}[Fatal Error: {_one_line(e)}]"


def to_json(data: Any, indent: int | None = None) -> str:
    """Convert data to JSON format.

    Args:
        data: Data to serialize
        indent: Optional indentation for pretty printing

    Returns:
        JSON-formatted string
    """
    return json.dumps(data, indent=indent, default=str)


def _try_json(data: Any) -> str | None:
    try:
        return to_json(data)
    except (TypeError, ValueError) as e:
        logger.debug("JSON encoding failed: %s", e)
        return None


def transform_result(
    data: Any,
    prefer_llm_text: bool = True,
    options: FormatConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> tuple[str, str]:
    """Transform data to the requested format.

    JSON is used only when explicitly requested and the data can be
    encoded; otherwise the LLM text rendering is returned.

    Args:
        data: The data to transform
        prefer_llm_text: Whether the client wants the LLM text rendering
        options: Formatting options passed to json_to_llm_string
        **overrides: Individual option overrides

    Returns:
        Tuple of (formatted_string, content_type)
        Content type is "text/plain" or "application/json"

    Examples:
        >>> transform_result({"a": 1})
        ('#content converted from json\\na: 1', 'text/plain')
        >>> transform_result({"a": 1}, prefer_llm_text=False)
        ('{"a": 1}', 'application/json')
    """
    if not prefer_llm_text:
        json_result = _try_json(data)
        if json_result is not None:
            return json_result, JSON_CONTENT_TYPE
        # Fall through when the data cannot be encoded as JSON (e.g. cycles)

    return json_to_llm_string(data, options, **overrides), LLM_CONTENT_TYPE


def get_size_comparison(
    data: Any,
    options: FormatConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Get size comparison between JSON and LLM text for given data.

    Useful for debugging and metrics.

    Args:
        data: Data to compare
        options: Formatting options passed to json_to_llm_string
        **overrides: Individual option overrides

    Returns:
        Dict with json_size, llm_size, savings_bytes, savings_percent
        and recommendation
    """
    llm_size = len(json_to_llm_string(data, options, **overrides))
    json_str = _try_json(data)

    result: dict[str, Any] = {
        "json_size": None,
        "llm_size": llm_size,
        "savings_percent": 0.0,
        "savings_bytes": 0,
        "recommendation": "llm",
    }

    if json_str is not None:
        json_size = len(json_str)
        result["json_size"] = json_size
        result["savings_bytes"] = json_size - llm_size
        if json_size > 0:
            result["savings_percent"] = round((1 - llm_size / json_size) * 100, 1)
        if json_size <= llm_size:
            result["recommendation"] = "json"

    return result
