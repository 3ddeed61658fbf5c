"""
jstringify.tier0_core.config
─────────────────────────────
Typed defaults for the serializer. Reads from .env → environment
variables. Values here are only defaults: arguments passed explicitly to
stringify() always win.

Minimal stack: pydantic-settings
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StringifyConfig(BaseSettings):
    """
    Typed jstringify configuration.
    All env vars are prefixed with JSTRINGIFY_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="WARNING", alias="JSTRINGIFY_LOG_LEVEL")
    log_format: str = Field(default="console", alias="JSTRINGIFY_LOG_FORMAT")

    # ── Encoding ──────────────────────────────────────────────────────────────
    check_circular: bool = Field(default=True, alias="JSTRINGIFY_CHECK_CIRCULAR")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got {v!r}")
        return v.upper()


@lru_cache(maxsize=1)
def get_config() -> StringifyConfig:
    """
    Return the singleton config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    Raises ConfigurationError (not Pydantic's ValidationError) on bad values.
    """
    try:
        return StringifyConfig()
    except PydanticValidationError as exc:
        from jstringify.tier0_core.errors import ConfigurationError

        fields = {
            ".".join(str(loc) for loc in err["loc"]): err["msg"]
            for err in exc.errors()
        }
        raise ConfigurationError(
            user_message="Invalid jstringify configuration.",
            fields=fields,
        ) from exc


def _reset_config() -> None:
    """For tests: clear the config cache."""
    get_config.cache_clear()


__sdk_export__ = {
    "exports": ["get_config", "StringifyConfig"],
    "description": "Environment-backed defaults (logging, cycle checking)",
    "tier": "tier0_core",
    "module": "config",
}
