"""json-to-llm: render arbitrary data as compact text for language models."""

from json_to_llm.formatter import (
    HEADER,
    get_size_comparison,
    json_to_llm_string,
    to_json,
    transform_result,
)
from json_to_llm.models import DEFAULT_CONFIG, FormatConfig

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "HEADER",
    "FormatConfig",
    "__version__",
    "get_size_comparison",
    "json_to_llm_string",
    "to_json",
    "transform_result",
]
