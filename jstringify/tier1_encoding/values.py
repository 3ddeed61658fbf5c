"""
jstringify.tier1_encoding.values
─────────────────────────────────
The absent value. None already means the literal null, so "no value at
all" needs its own sentinel: UNDEFINED.
"""
from __future__ import annotations

from typing import Any


class _Undefined:
    """Singleton standing for a value with no textual representation."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()

# Values the custom-serialization step never looks at.
PRIMITIVE_TYPES = (str, bool, int, float, type(None), _Undefined)


__sdk_export__ = {
    "exports": ["UNDEFINED"],
    "description": "Sentinel for values that encode to nothing",
    "tier": "tier1_encoding",
    "module": "values",
}
