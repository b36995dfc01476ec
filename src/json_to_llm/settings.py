"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from json_to_llm.models import FormatConfig


class Settings(BaseSettings):
    """Command line defaults loaded from environment variables.

    All settings can be overridden via environment variables with the
    JSON_TO_LLM_ prefix or a local .env file. The library function
    ``json_to_llm_string`` does not read these; only the CLI does.
    """

    model_config = SettingsConfigDict(
        env_prefix="JSON_TO_LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Default formatting options for `json-to-llm convert`
    ignore_falsy: bool = True
    max_depth: int = 10
    sort_keys: Literal["none", "asc"] = "none"
    max_chars: int | None = None  # Unset means no output budget

    def format_config(self) -> FormatConfig:
        """Build the default FormatConfig from these settings."""
        return FormatConfig(
            ignore_falsy=self.ignore_falsy,
            max_depth=self.max_depth,
            sort_keys=self.sort_keys,
            max_chars=self.max_chars,
        )


# Global settings instance
settings = Settings()
