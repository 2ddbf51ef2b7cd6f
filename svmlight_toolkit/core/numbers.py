"""Strict number parsing for SVMLight tokens.

Python's `int()` / `float()` are more permissive than the format: they accept
surrounding whitespace, `_` digit separators and non-ASCII digits. Tokens here are
already whitespace-split, so anything of that kind means a malformed token.
"""

from __future__ import annotations

import re
from typing import Optional

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_DIGITS_RE = re.compile(r"[0-9]+")

# Indices, class ids and qids are 64-bit unsigned values.
MAX_UNSIGNED = 2**64 - 1
_MAX_UNSIGNED_DIGITS = len(str(MAX_UNSIGNED))


def parse_unsigned(text: str, *, allow_sign: bool = True) -> Optional[int]:
    """Parse a non-negative integer, returning None if `text` is not one.

    A leading `+` is accepted unless `allow_sign` is False. Values above
    `MAX_UNSIGNED` are rejected.
    """

    pattern = _UNSIGNED_RE if allow_sign else _DIGITS_RE
    if pattern.fullmatch(text) is None:
        return None
    digits = text.lstrip("+").lstrip("0")
    if len(digits) > _MAX_UNSIGNED_DIGITS:
        return None
    value = int(digits or "0")
    if value > MAX_UNSIGNED:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    """Parse a float token (`1`, `-0.5`, `1e-3`, `inf`, `nan`), or return None."""

    if not text or "_" in text or text != text.strip() or not text.isascii():
        return None
    try:
        return float(text)
    except ValueError:
        return None
