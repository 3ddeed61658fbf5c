"""
jstringify._registry
─────────────────────
Internal module registry, the single source of truth for which modules
exist and which names each one exports.

Adding a new module:
  1. Implement it in the right tier
  2. Add ``__sdk_export__`` to the module
  3. Add one tuple to TIER_MODULES below
  4. Re-export its names from ``jstringify/__init__.py``
"""
from __future__ import annotations

import importlib
from typing import Any

# ---------------------------------------------------------------------------
# Ordered list of (tier_path, module_name) for all implemented modules.
# ---------------------------------------------------------------------------
TIER_MODULES: list[tuple[str, str]] = [
    # tier0_core: errors, logging, configuration
    ("tier0_core", "errors"),
    ("tier0_core", "logging"),
    ("tier0_core", "config"),
    # tier1_encoding: the serialization engine
    ("tier1_encoding", "values"),
    ("tier1_encoding", "escape"),
    ("tier1_encoding", "numbers"),
    ("tier1_encoding", "options"),
    ("tier1_encoding", "hooks"),
    ("tier1_encoding", "resolve"),
    ("tier1_encoding", "encoder"),
    ("tier1_encoding", "stringify"),
]


def collect_exports() -> dict[str, dict[str, Any]]:
    """
    Import every registered module and resolve its declared exports.

    Returns:
        ``{"tier.module": {export_name: object}}``. A declared name that the
        module does not define raises AttributeError.
    """
    resolved: dict[str, dict[str, Any]] = {}

    for tier_path, module_name in TIER_MODULES:
        qualified = f"jstringify.{tier_path}.{module_name}"
        mod = importlib.import_module(qualified)
        manifest: dict[str, Any] = getattr(mod, "__sdk_export__", {})
        resolved[f"{tier_path}.{module_name}"] = {
            name: getattr(mod, name) for name in manifest.get("exports", [])
        }

    return resolved
