"""
jstringify.tier1_encoding.encoder
──────────────────────────────────
The recursive encoder. encode(key, container) resolves container[key] and
dispatches on the kind of the result:

    UNDEFINED, callables, unknown types   → None (absent)
    None                                  → null
    str                                   → quoted, escaped text
    bool / int                            → true, false, digits
    float                                 → canonical number text, null if not finite
    list / tuple                          → array; absent elements become null
    Mapping / dataclass instance          → object; absent members are dropped

Nested output is re-indented by prefixing every embedded line with the
indent unit, so indentation compounds with depth.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator

from jstringify.tier0_core.errors import CyclicStructureError
from jstringify.tier0_core.logging import get_logger
from jstringify.tier1_encoding.escape import escape
from jstringify.tier1_encoding.numbers import format_number, integer_text, property_key
from jstringify.tier1_encoding.options import EncodeOptions, KeyAllowList
from jstringify.tier1_encoding.resolve import resolve
from jstringify.tier1_encoding.values import UNDEFINED


def encode(
    key: Any,
    container: Any,
    options: EncodeOptions,
    ancestors: set[int] | None = None,
) -> str | None:
    """
    Text for container[key], or None when the value has no representation.
    *ancestors* holds the ids of the containers currently being encoded and
    is only consulted when options.check_circular is set.
    """
    if options.check_circular and ancestors is None:
        ancestors = set()
    value = resolve(container, key, options)

    if value is UNDEFINED:
        return None
    if value is None:
        return "null"
    if isinstance(value, str):
        return escape(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return integer_text(value)
    if isinstance(value, float):
        return format_number(float(value)) if math.isfinite(value) else "null"

    if isinstance(value, (list, tuple)):
        with _visiting(value, key, options, ancestors) as inner:
            return _encode_array(value, options, inner)
    if isinstance(value, Mapping) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        with _visiting(value, key, options, ancestors) as inner:
            return _encode_object(value, options, inner)

    return None


# ── Containers ────────────────────────────────────────────────────────────────

def _encode_array(value: list | tuple, options: EncodeOptions, ancestors: set[int] | None) -> str:
    indent = options.indent
    partial = []
    for index in range(len(value)):
        text = encode(index, value, options, ancestors)
        partial.append(_reindent("null" if text is None else text, indent))
    return _wrap("[", partial, "]", indent)


def _encode_object(value: Any, options: EncodeOptions, ancestors: set[int] | None) -> str:
    indent = options.indent
    separator = ": " if indent else ":"
    partial = []
    for key in _member_keys(value, options):
        if not _is_member_key(key):
            continue
        name = property_key(key)
        if isinstance(options.replacer, KeyAllowList):
            key = _lookup_key(value, key, name)
        text = encode(key, value, options, ancestors)
        if text:
            partial.append(escape(name) + separator + _reindent(text, indent))
    return _wrap("{", partial, "}", indent)


def _member_keys(value: Any, options: EncodeOptions) -> list:
    if isinstance(options.replacer, KeyAllowList):
        return list(options.replacer.keys)
    if isinstance(value, Mapping):
        return list(value.keys())
    return [field.name for field in dataclasses.fields(value)]


def _is_member_key(key: Any) -> bool:
    return isinstance(key, (str, int, float)) and not isinstance(key, bool)


def _lookup_key(value: Any, key: Any, name: str) -> Any:
    # Allow-list entries name members by text; fall back to the raw entry
    # for mappings keyed by numbers.
    if not isinstance(value, Mapping) or name in value:
        return name
    return key


def _reindent(text: str, indent: str) -> str:
    return text.replace("\n", "\n" + indent) if indent else text


def _wrap(opening: str, partial: list[str], closing: str, indent: str) -> str:
    if not partial:
        return opening + closing
    if indent:
        return opening + "\n" + indent + (",\n" + indent).join(partial) + "\n" + closing
    return opening + ",".join(partial) + closing


# ── Cycle detection ───────────────────────────────────────────────────────────

@contextmanager
def _visiting(
    value: Any,
    key: Any,
    options: EncodeOptions,
    ancestors: set[int] | None,
) -> Iterator[set[int] | None]:
    """Keep *value* on the ancestor chain while its members are encoded."""
    if ancestors is None:
        yield None
        return

    marker = id(value)
    if marker in ancestors:
        name = property_key(key)
        get_logger(__name__).warning("stringify.cycle_detected", key=name)
        raise CyclicStructureError(
            detail=f"Converting circular structure to text (at key {name!r}).",
            key=name,
        )
    ancestors.add(marker)
    try:
        yield ancestors
    finally:
        ancestors.discard(marker)


__sdk_export__ = {
    "exports": ["encode"],
    "description": "Recursive value-to-text encoder",
    "tier": "tier1_encoding",
    "module": "encoder",
}
