"""Pydantic models for json-to-llm."""

from json_to_llm.models.config import DEFAULT_CONFIG, FormatConfig, SortKeysOption

__all__ = [
    "DEFAULT_CONFIG",
    "FormatConfig",
    "SortKeysOption",
]
