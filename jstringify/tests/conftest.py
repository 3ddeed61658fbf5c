"""
jstringify test configuration.

Tests run with the default cycle policy and quiet console logging.
Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Pin settings for all tests ─────────────────────────────────────────────
# These must be set before any jstringify modules are imported.

os.environ.setdefault("JSTRINGIFY_LOG_LEVEL", "WARNING")
os.environ.setdefault("JSTRINGIFY_LOG_FORMAT", "console")
os.environ.setdefault("JSTRINGIFY_CHECK_CIRCULAR", "true")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_module_singletons():
    """
    Restore the adapter registry and drop the cached config between tests,
    so registrations and env overrides never leak from one test to another.
    """
    import jstringify.tier1_encoding.hooks as _hooks
    from jstringify.tier0_core.config import _reset_config

    orig_adapters = dict(_hooks._adapters)

    yield

    _hooks._adapters.clear()
    _hooks._adapters.update(orig_adapters)
    _reset_config()


@pytest.fixture
def compact():
    """stringify() with no replacer and no indentation."""
    from jstringify import stringify

    return lambda value: stringify(value)


@pytest.fixture
def pretty():
    """stringify() indenting by two spaces."""
    from jstringify import stringify

    return lambda value: stringify(value, None, 2)
