"""
jstringify.tier0_core.errors
─────────────────────────────
Error taxonomy for the serializer. Unrepresentable values are NOT errors
(they encode as null or are dropped); only genuine faults live here.
Constructing a StringifyError reports it through the structured logger.

Caller-supplied hooks and replacers are never wrapped: whatever they raise
reaches the caller unchanged.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class StringifyError(Exception):
    """
    Base class for all jstringify errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: short human-readable summary
    - detail: internal context, defaults to user_message
    - metadata: extra structured fields (also logged)
    """

    code: str = "stringify_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "Serialization failed.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)
        _capture(self)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class CyclicStructureError(StringifyError, ValueError):
    """A container (directly or transitively) contains itself."""
    code = "cyclic_structure"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "Converting circular structure to text.",
        key: str | None = None,
        **metadata: Any,
    ) -> None:
        self.key = key
        super().__init__(code, user_message, key=key, **metadata)

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.key is not None:
            d["error"]["key"] = self.key
        return d


class ConfigurationError(StringifyError):
    """Invalid settings detected while loading configuration."""
    code = "configuration_error"


# ── Error reporting ───────────────────────────────────────────────────────────

def _capture(error: StringifyError) -> None:
    """Log the error. Called automatically by StringifyError.__init__."""
    from jstringify.tier0_core.logging import get_logger

    get_logger(__name__).debug(
        "error.raised",
        code=error.code,
        error_type=type(error).__name__,
        **error.metadata,
    )


__sdk_export__ = {
    "exports": ["StringifyError", "CyclicStructureError", "ConfigurationError"],
    "description": "Error taxonomy: cyclic structures and configuration faults",
    "tier": "tier0_core",
    "module": "errors",
}
