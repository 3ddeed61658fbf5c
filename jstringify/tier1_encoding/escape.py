"""
jstringify.tier1_encoding.escape
─────────────────────────────────
Quoting of text scalars. Besides the characters the interchange format
requires escaping, a conservative set of invisible, format-control and
direction-changing characters is escaped as well so that the output is
safe to show in terminals and viewers.
"""
from __future__ import annotations

import re

# Inclusive code point ranges escaped on output (beyond backslash and quote).
_ESCAPE_RANGES = (
    (0x0000, 0x001F),
    (0x007F, 0x009F),
    (0x00AD, 0x00AD),
    (0x0600, 0x0604),
    (0x070F, 0x070F),
    (0x17B4, 0x17B5),
    (0x200C, 0x200F),
    (0x2028, 0x202F),
    (0x2060, 0x206F),
    (0xFEFF, 0xFEFF),
    (0xFFF0, 0xFFFF),
)

_ESCAPABLE = re.compile(
    '[\\\\"'
    + "".join("\\u%04x-\\u%04x" % bounds for bounds in _ESCAPE_RANGES)
    + "]"
)

# Table of character substitutions.
_META = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _substitute(match: re.Match[str]) -> str:
    ch = match.group()
    named = _META.get(ch)
    if named is not None:
        return named
    return "\\u%04x" % ord(ch)


def escape(s: str) -> str:
    """
    Return *s* as a double-quoted literal.

    Characters without a two-character form are written as a backslash-u
    escape with four lowercase hex digits.
    """
    if _ESCAPABLE.search(s) is None:
        return '"' + s + '"'
    return '"' + _ESCAPABLE.sub(_substitute, s) + '"'


__sdk_export__ = {
    "exports": ["escape"],
    "description": "Quote and escape text scalars",
    "tier": "tier1_encoding",
    "module": "escape",
}
