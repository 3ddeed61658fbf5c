"""
jstringify.tier1_encoding.options
──────────────────────────────────
Per-call encoding options. A fresh, frozen EncodeOptions is built for every
top-level stringify() call and handed explicitly down the recursion, so
nested or concurrent calls never observe each other's settings.

The replacer is a tagged variant with three cases:
    NoReplacer:       encode everything
    ReplacerFunction: fn(key, value, container) returns the substitute value
    KeyAllowList:     only these object member names, in this order
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Union

# ── Replacer variants ─────────────────────────────────────────────────────────

ReplacerFn = Callable[[str, Any, Any], Any]


@dataclass(frozen=True)
class NoReplacer:
    kind = "none"


@dataclass(frozen=True)
class ReplacerFunction:
    fn: ReplacerFn
    kind = "function"


@dataclass(frozen=True)
class KeyAllowList:
    keys: tuple[str | int | float, ...]
    kind = "allow_list"


Replacer = Union[NoReplacer, ReplacerFunction, KeyAllowList]


def normalize_replacer(replacer: Any) -> Replacer:
    """
    Map the caller's replacer argument onto a Replacer variant.
    Values that are neither callable nor a list/tuple are ignored.
    """
    if isinstance(replacer, (NoReplacer, ReplacerFunction, KeyAllowList)):
        return replacer
    if isinstance(replacer, (list, tuple)):
        return KeyAllowList(tuple(replacer))
    if callable(replacer):
        return ReplacerFunction(replacer)
    return NoReplacer()


# ── Indentation ───────────────────────────────────────────────────────────────

def normalize_space(space: Any) -> str:
    """
    Turn the caller's space argument into the indent unit.

    A number gives that many spaces (truncated toward zero, nothing if not
    positive); a string is used verbatim; anything else means compact output.
    An infinite width raises OverflowError.
    """
    if isinstance(space, bool):
        return ""
    if isinstance(space, (int, float)):
        if math.isnan(space) or space <= 0:
            return ""
        return " " * int(space)
    if isinstance(space, str):
        return space
    return ""


# ── Options ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EncodeOptions:
    """Configuration for one top-level stringify() call. Read-only."""
    indent: str = ""
    replacer: Replacer = NoReplacer()
    check_circular: bool = True

    @classmethod
    def build(
        cls,
        replacer: Any = None,
        space: Any = None,
        check_circular: bool = True,
    ) -> EncodeOptions:
        return cls(
            indent=normalize_space(space),
            replacer=normalize_replacer(replacer),
            check_circular=check_circular,
        )


__sdk_export__ = {
    "exports": [
        "EncodeOptions", "Replacer", "NoReplacer", "ReplacerFunction", "KeyAllowList",
    ],
    "description": "Per-call indent and replacer configuration",
    "tier": "tier1_encoding",
    "module": "options",
}
