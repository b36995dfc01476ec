"""LLM-oriented text rendering of arbitrary data.

This package normalizes Python values to JSON-shaped data and renders
them as compact, indentation-structured text for language models.
"""

from json_to_llm.formatter.classifier import ArrayKind, classify_array
from json_to_llm.formatter.converter import (
    HEADER,
    get_size_comparison,
    json_to_llm_string,
    to_json,
    transform_result,
)
from json_to_llm.formatter.engine import LLMFormatter
from json_to_llm.formatter.governor import apply_char_budget
from json_to_llm.formatter.normalizer import (
    CircularStructureError,
    GenericSerializationError,
    NormalizationError,
    NormalizedValue,
    UnsupportedTypeError,
    normalize,
)
from json_to_llm.formatter.primitives import escape_string, format_primitive

__all__ = [
    "HEADER",
    "ArrayKind",
    "CircularStructureError",
    "GenericSerializationError",
    "LLMFormatter",
    "NormalizationError",
    "NormalizedValue",
    "UnsupportedTypeError",
    "apply_char_budget",
    "classify_array",
    "escape_string",
    "format_primitive",
    "get_size_comparison",
    "json_to_llm_string",
    "normalize",
    "to_json",
    "transform_result",
]
