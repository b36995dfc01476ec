"""Shared test fixtures for json-to-llm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from json_to_llm.formatter import LLMFormatter
    from json_to_llm.models import FormatConfig


@pytest.fixture
def default_config() -> FormatConfig:
    """Create a config with every option at its default."""
    from json_to_llm.models import FormatConfig

    return FormatConfig()


@pytest.fixture
def formatter(default_config: FormatConfig) -> LLMFormatter:
    """Create a formatter with default options."""
    from json_to_llm.formatter import LLMFormatter

    return LLMFormatter(default_config)


@pytest.fixture
def cyclic_dict() -> dict[str, Any]:
    """A dict that contains itself."""
    data: dict[str, Any] = {"name": "test"}
    data["self"] = data
    return data


@pytest.fixture
def shared_dag() -> dict[str, Any]:
    """Two branches referencing the same acyclic dict."""
    shared = {"shared": "value"}
    return {
        "branch1": {"ref": shared},
        "branch2": {"ref": shared},
    }
