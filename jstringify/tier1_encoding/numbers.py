"""
jstringify.tier1_encoding.numbers
──────────────────────────────────
Canonical number text. Floats are rendered with the shortest digits that
round-trip (Python's repr) laid out by the ECMAScript Number-to-String
rules, so 1.0 → "1", 1e21 → "1e+21" and 1e-7 → "1e-7".
"""
from __future__ import annotations

import math


def _digits_and_point(x: float) -> tuple[str, int]:
    """
    Split a positive finite float into significant digits and the position
    of the decimal point relative to the first digit.
    """
    mantissa, _, exp = repr(x).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    point = len(int_part) + (int(exp) if exp else 0)

    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    return stripped.rstrip("0") or "0", point


def format_number(x: float) -> str:
    """Canonical decimal text for a finite float."""
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    digits, n = _digits_and_point(abs(x))
    k = len(digits)

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    exponent = ("e+" if e >= 0 else "e-") + str(abs(e))
    if k == 1:
        return sign + digits + exponent
    return sign + digits[0] + "." + digits[1:] + exponent


# str() refuses ints above sys.int_info.str_digits_check_threshold digits;
# larger values are converted in fixed-size chunks.
_CHUNK_DIGITS = 4000
_CHUNK = 10 ** _CHUNK_DIGITS


def integer_text(n: int) -> str:
    """Decimal digits of an int of any size."""
    n = int(n)
    if -_CHUNK < n < _CHUNK:
        return str(n)
    sign = "-" if n < 0 else ""
    n = abs(n)
    chunks = []
    while n:
        n, rem = divmod(n, _CHUNK)
        chunks.append(rem)
    head = str(chunks.pop())
    return sign + head + "".join(str(c).zfill(_CHUNK_DIGITS) for c in reversed(chunks))


def property_key(key: str | int | float) -> str:
    """Text form of an object member name."""
    if isinstance(key, str):
        return key
    if isinstance(key, int):
        return integer_text(key)
    if math.isnan(key):
        return "NaN"
    if math.isinf(key):
        return "Infinity" if key > 0 else "-Infinity"
    return format_number(float(key))


__sdk_export__ = {
    "exports": ["format_number", "integer_text"],
    "description": "ECMAScript-compatible number text",
    "tier": "tier1_encoding",
    "module": "numbers",
}
