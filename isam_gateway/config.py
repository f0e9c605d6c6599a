"""Application configuration using Pydantic Settings."""

from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings(BaseSettings):
    """Startup settings for the gateway process.

    Maintenance keys are intentionally absent: they are re-read from the
    environment on every request (see ``isam_gateway.core.maintenance``).
    """

    app_name: str = Field(default="isam-gateway", alias="APP_NAME")
    app_env: str = Field(default="production", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="", alias="LOG_FILE")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT", ge=1, le=65535)
    doc_root: str | None = Field(default=None, alias="PLESK_DOC_ROOT")
    app_root: Path = Field(default_factory=Path.cwd, alias="APP_ROOT")

    site_url: str = Field(
        default="https://isam-tech.com",
        validation_alias=AliasChoices("SITE_URL", "VITE_SITE_URL"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        """Drop trailing slashes so paths can be appended verbatim."""
        return v.rstrip("/")

    def doc_root_candidates(self) -> list[Path]:
        """Ordered document root candidates, explicit override first."""
        candidates: list[Path] = []
        if self.doc_root and self.doc_root.strip():
            candidates.append(Path(self.doc_root.strip()))
        candidates.append(self.app_root / "frontend" / "dist")
        return candidates


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def normalize_env_value(value: str) -> str:
    """Trim a raw value and strip one pair of matching surrounding quotes."""
    trimmed = str(value).strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in "\"'":
        return trimmed[1:-1].strip()
    return trimmed


def parse_bool(value: str) -> bool:
    """Parse ``1/true/yes/on`` (any case, optionally quoted) as True."""
    return normalize_env_value(value).lower() in TRUTHY_VALUES


def read_first_env_value(
    env: Mapping[str, str], keys: Sequence[str], fallback: str = ""
) -> str:
    """Return the first non-blank value among ``keys``, trimmed.

    Args:
        env: Environment mapping (usually ``os.environ``)
        keys: Candidate keys, in priority order
        fallback: Returned when every key is missing or blank

    Returns:
        Trimmed value or fallback
    """
    for key in keys:
        value = env.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return fallback


def read_first_env_source(
    env: Mapping[str, str], keys: Sequence[str]
) -> tuple[str | None, str]:
    """Return ``(key, raw_value)`` for the first non-blank key, else ``(None, "")``."""
    for key in keys:
        value = env.get(key)
        if isinstance(value, str) and value.strip():
            return key, value
    return None, ""
