from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from codebox.domain.catalog.languages import find_language
from codebox.domain.catalog.themes import DEFAULT_THEME, has_theme


class EditorConfig(BaseSettings):
    """
    Editor configuration based on Pydantic Settings.

    - Reads ``CODEBOX_*`` environment variables and `.env`.
    - Validates language/theme names against the static catalogues.
    """

    DEFAULT_LANGUAGE: str = Field(
        default="JavaScript", description="Language preselected for a new snippet"
    )
    DEFAULT_THEME: str = Field(
        default=DEFAULT_THEME, description="Palette used when a snippet names none"
    )
    STORAGE_PATH: str = Field(
        default="~/.codebox/snippets.json", description="JSON file holding saved snippets"
    )
    RECENT_LIMIT: int = Field(
        default=5, ge=0, le=1_000, description="How many snippets the recent list shows"
    )
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: str = Field(default="json", description="json or console")

    model_config = SettingsConfigDict(
        env_prefix="CODEBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def _validate_language(cls, v: str) -> str:
        spec = find_language(v)
        if spec is None:
            raise ValueError(f"unsupported DEFAULT_LANGUAGE: {v!r}")
        return spec.name

    @field_validator("DEFAULT_THEME")
    @classmethod
    def _validate_theme(cls, v: str) -> str:
        if not has_theme(v):
            raise ValueError(f"unknown DEFAULT_THEME: {v!r}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid LOG_LEVEL: {v!r}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        fmt = (v or "json").strip().lower()
        if fmt not in {"json", "console"}:
            raise ValueError(f"invalid LOG_FORMAT: {v!r}")
        return fmt


def load_config() -> EditorConfig:
    """Build the configuration; validation errors surface as ``ValueError``."""
    try:
        return EditorConfig()
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
