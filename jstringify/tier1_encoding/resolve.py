"""
jstringify.tier1_encoding.resolve
──────────────────────────────────
Value resolution: read container[key], let the value substitute its own
representation (to_json / adapters), then let the caller's replacer
function substitute it again. Each step sees the result of the previous one.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from jstringify.tier1_encoding.hooks import apply_hook
from jstringify.tier1_encoding.numbers import property_key
from jstringify.tier1_encoding.options import EncodeOptions, ReplacerFunction
from jstringify.tier1_encoding.values import UNDEFINED


def read_member(container: Any, key: Any) -> Any:
    """container[key], or UNDEFINED when there is no such member."""
    if isinstance(container, Mapping):
        # Membership first: indexing would run __missing__ (defaultdict).
        if key not in container:
            return UNDEFINED
        return container[key]
    if isinstance(container, (list, tuple)):
        return container[key]
    if dataclasses.is_dataclass(container):
        return getattr(container, key, UNDEFINED)
    return UNDEFINED


def resolve(container: Any, key: Any, options: EncodeOptions) -> Any:
    """Return the value actually to be encoded for container[key]."""
    value = read_member(container, key)
    name = property_key(key)

    value = apply_hook(value, name)

    replacer = options.replacer
    if isinstance(replacer, ReplacerFunction):
        value = replacer.fn(name, value, container)

    return value


__sdk_export__ = {
    "exports": ["resolve"],
    "description": "Read a member and apply hooks and the replacer function",
    "tier": "tier1_encoding",
    "module": "resolve",
}
