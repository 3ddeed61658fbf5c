"""
jstringify
──────────
Drop-in text serializer with the observable behavior of the JavaScript
JSON.stringify: same output text, same handling of unrepresentable
values, same replacer protocol.

Stable top-level exports. Import from here, not from sub-modules directly.
"""
from jstringify.tier0_core.errors import (
    StringifyError,
    CyclicStructureError,
    ConfigurationError,
)
from jstringify.tier0_core.logging import get_logger
from jstringify.tier0_core.config import get_config, StringifyConfig

from jstringify.tier1_encoding.values import UNDEFINED
from jstringify.tier1_encoding.escape import escape
from jstringify.tier1_encoding.numbers import format_number, integer_text
from jstringify.tier1_encoding.options import (
    EncodeOptions,
    Replacer,
    NoReplacer,
    ReplacerFunction,
    KeyAllowList,
)
from jstringify.tier1_encoding.hooks import (
    SupportsToJSON,
    register_adapter,
    unregister_adapter,
)
from jstringify.tier1_encoding.resolve import resolve
from jstringify.tier1_encoding.encoder import encode
from jstringify.tier1_encoding.stringify import stringify

__version__ = "0.1.0"
__all__ = [
    # errors
    "StringifyError", "CyclicStructureError", "ConfigurationError",
    # logging
    "get_logger",
    # config
    "get_config", "StringifyConfig",
    # values
    "UNDEFINED",
    # escape
    "escape",
    # numbers
    "format_number", "integer_text",
    # options
    "EncodeOptions", "Replacer", "NoReplacer", "ReplacerFunction", "KeyAllowList",
    # hooks
    "SupportsToJSON", "register_adapter", "unregister_adapter",
    # resolve / encoder
    "resolve", "encode",
    # stringify
    "stringify",
]
