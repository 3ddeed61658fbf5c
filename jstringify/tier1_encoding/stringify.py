"""
jstringify.tier1_encoding.stringify
────────────────────────────────────
Public entry point. The top-level value is wrapped as {"": value} and
encoded like any other member, so to_json hooks, adapters and replacer
functions see the root value too (under the key "").

Re-entrant and thread-safe: every call builds its own EncodeOptions and
passes it down explicitly; no module state is touched while encoding.
"""
from __future__ import annotations

from typing import Any

from jstringify.tier0_core.config import get_config
from jstringify.tier0_core.logging import get_logger
from jstringify.tier1_encoding.encoder import encode
from jstringify.tier1_encoding.options import EncodeOptions


def stringify(
    value: Any,
    replacer: Any = None,
    space: Any = None,
    *,
    check_circular: bool | None = None,
) -> str | None:
    """
    Serialize *value* to text. Returns None when the value itself has no
    representation (UNDEFINED, a function, an unsupported type).

    replacer:       fn(key, value, container) → substitute value, or a
                    list of member names to keep (in that order)
    space:          number of spaces, or the literal indent string
    check_circular: raise CyclicStructureError on self-containing input
                    (default from JSTRINGIFY_CHECK_CIRCULAR, on)

    Usage:
        stringify({"a": 1, "b": [True, None]})     # → '{"a":1,"b":[true,null]}'
        stringify({"a": 1}, space=2)               # → '{\\n  "a": 1\\n}'
        stringify({"a": 1, "b": 2}, ["b"])         # → '{"b":2}'
    """
    if check_circular is None:
        check_circular = get_config().check_circular

    options = EncodeOptions.build(replacer, space, check_circular)
    get_logger(__name__).debug(
        "stringify.call",
        indent=len(options.indent),
        replacer=options.replacer.kind,
        check_circular=options.check_circular,
    )
    return encode("", {"": value}, options)


__sdk_export__ = {
    "exports": ["stringify"],
    "description": "Serialize a value graph to interchange text",
    "tier": "tier1_encoding",
    "module": "stringify",
}
