"""Pydantic model for formatter configuration."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

SortKeysOption = Literal["none", "asc"]


def _without_none(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class FormatConfig(BaseModel):
    """Options controlling how a value is rendered for an LLM.

    Accepts both snake_case field names and their camelCase aliases
    (``ignoreFalsy``, ``maxDepth``, ``sortKeys``, ``maxChars``). Unknown
    keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    ignore_falsy: bool = True  # Omit null properties, skip null array items
    max_depth: int = 10
    sort_keys: SortKeysOption = "none"
    max_chars: int | None = None  # None means no global budget

    # Accepted for compatibility with older callers; they never truncate anything.
    max_length: Any = None
    max_array_items: Any = None
    sort_entries: Any = None
    max_binary_chars: Any = None
    max_error_chars: Any = None

    @field_validator("max_chars", mode="before")
    @classmethod
    def _unbounded_chars(cls, value: Any) -> Any:
        """Treat infinite budgets as no budget."""
        if isinstance(value, float):
            if math.isinf(value) and value > 0:
                return None
            if math.isfinite(value):
                return math.floor(value)
        return value

    @classmethod
    def resolve(
        cls,
        options: FormatConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> FormatConfig:
        """Build a config from defaults, caller options and keyword overrides.

        Args:
            options: An existing config, a mapping of option names, or None.
            **overrides: Individual options applied on top of ``options``.

        Returns:
            A validated FormatConfig. Options given as None keep their
            default (or, for overrides, the value from ``options``).
        """
        if isinstance(options, FormatConfig):
            base = options
        else:
            base = cls.model_validate(_without_none(options or {}))

        overrides = _without_none(overrides)

        if not overrides:
            return base

        aliases = {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias is not None
        }
        values = base.model_dump()
        for key, value in overrides.items():
            values[aliases.get(key, key)] = value
        return cls.model_validate(values)


DEFAULT_CONFIG = FormatConfig()
