"""
jstringify.tier1_encoding.hooks
────────────────────────────────
Custom-serialization hooks. A value may control its own representation in
two ways, checked in this order:

1. It implements SupportsToJSON: ``to_json(key)`` is called and its result
   is encoded instead of the value.
2. An adapter is registered for its type (or a base class). Adapters for
   dates, times, UUIDs, enums and Pydantic models are registered here.

Primitives (str, numbers, bool, None) are never passed through hooks.
"""
from __future__ import annotations

import datetime
import enum
import uuid
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel

from jstringify.tier1_encoding.values import PRIMITIVE_TYPES


# ── Capability protocol ───────────────────────────────────────────────────────

@runtime_checkable
class SupportsToJSON(Protocol):
    def to_json(self, key: str) -> Any: ...


# ── Adapter registry ──────────────────────────────────────────────────────────

Adapter = Callable[[Any, str], Any]

_adapters: dict[type, Adapter] = {}


def register_adapter(cls: type) -> Callable[[Adapter], Adapter]:
    """
    Register an adapter for *cls* and its subclasses.

    Usage:
        @register_adapter(Decimal)
        def _decimal(value, key):
            return str(value)
    """
    def decorator(fn: Adapter) -> Adapter:
        _adapters[cls] = fn
        return fn
    return decorator


def unregister_adapter(cls: type) -> None:
    _adapters.pop(cls, None)


def find_adapter(value: Any) -> Adapter | None:
    """Return the adapter registered for the most-derived matching type."""
    for klass in type(value).__mro__:
        adapter = _adapters.get(klass)
        if adapter is not None:
            return adapter
    return None


def apply_hook(value: Any, key: str) -> Any:
    """Replace *value* by its custom representation, if it has one."""
    if isinstance(value, PRIMITIVE_TYPES) or isinstance(value, type):
        return value
    if isinstance(value, SupportsToJSON) and callable(value.to_json):
        return value.to_json(key)
    adapter = find_adapter(value)
    if adapter is not None:
        return adapter(value, key)
    return value


# ── Built-in adapters ─────────────────────────────────────────────────────────

@register_adapter(datetime.date)
@register_adapter(datetime.time)
def _isoformat(value: datetime.date | datetime.time, key: str) -> str:
    return value.isoformat()


@register_adapter(uuid.UUID)
def _uuid(value: uuid.UUID, key: str) -> str:
    return str(value)


@register_adapter(enum.Enum)
def _enum(value: enum.Enum, key: str) -> Any:
    return value.value


@register_adapter(BaseModel)
def _pydantic_model(value: BaseModel, key: str) -> Any:
    return value.model_dump(mode="json")


__sdk_export__ = {
    "exports": ["SupportsToJSON", "register_adapter", "unregister_adapter"],
    "description": "to_json() capability protocol and per-type adapters",
    "tier": "tier1_encoding",
    "module": "hooks",
}
