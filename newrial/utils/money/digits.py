# newrial/utils/money/digits.py
# -*- coding: utf-8 -*-
"""
Digit conversion & extraction utilities (Persian/Arabic-Indic ↔ ASCII).

Scope
-----
This module provides:
  • Conversion between Persian/Arabic-Indic digits & separators and ASCII.
  • Digit extraction from free keystroke text (e.g., "۵۵۰٬۰۰۰ ریال" → "550000").
  • Mapping ASCII digits of an already-formatted string to the UI language.

Design principles
-----------------
- Keep functions *pure* and side‑effect free.
- Never raise on odd input: anything that is not a string is treated as empty
  text by the extractors, so a half-typed field always yields a stable value.
- Grouping of digit strings happens in the dedicated grouping module.
"""

from __future__ import annotations

import re

from .rules import (
    DIGITS_ASCII,
    DIGITS_FA,
    DIGITS_AR,
    THOUSANDS_SEP_FA,
    DECIMAL_SEP_FA,
)

__all__ = [
    # conversion
    "to_english_digits",
    "to_persian_digits",
    "map_digits_for_lang",
    # extraction
    "normalize_and_extract_digits",
    "canonical_digits",
    "digits_to_int",
    "int_to_digits",
]

# Translation maps
# Persian thousands '٬' (U+066C) → ',' and Persian decimal '٫' (U+066B) → '.'
P2E = str.maketrans(DIGITS_FA + THOUSANDS_SEP_FA + DECIMAL_SEP_FA, DIGITS_ASCII + ",.")
# Arabic-Indic digits (٠١٢٣٤٥٦٧٨٩) map to the same ASCII digits
P2E_ARABIC_INDIC = str.maketrans(DIGITS_AR, DIGITS_ASCII)

E2P = str.maketrans(DIGITS_ASCII, DIGITS_FA)       # ASCII → Persian

_ASCII_DIGIT_RUNS = re.compile(r"[0-9]+")

#: Slice size for str <-> int; stays below the interpreter's 4300-digit conversion limit
_STR_CHUNK = 4000


def to_english_digits(s: str) -> str:
    """Convert Persian/Arabic‑Indic digits & separators to ASCII (English).

    Notes
    -----
    - Persian thousands (٬) → ','
    - Persian decimal  (٫) → '.'
    - Non-string input is returned unchanged.
    """
    if not isinstance(s, str):
        return s
    return s.translate(P2E).translate(P2E_ARABIC_INDIC)


def to_persian_digits(s: str) -> str:
    """Convert ASCII digits to Persian digits (۰..۹). Non-digit characters are preserved."""
    if not isinstance(s, str):
        s = str(s)
    return s.translate(E2P)


def map_digits_for_lang(s: str, lang: str) -> str:
    """Render ASCII digits in the script of `lang`.

    Only "fa" changes anything; separators, signs and words pass through.
    """
    if lang == "fa":
        return to_persian_digits(s)
    return s


def normalize_and_extract_digits(text: str) -> str:
    """Return every digit of `text` as ASCII, in order, dropping everything else.

    Examples
    --------
    >>> normalize_and_extract_digits("۱٬۲۳۴ ریال")
    '1234'
    >>> normalize_and_extract_digits("12a٣4")
    '1234'
    >>> normalize_and_extract_digits("ریال")
    ''
    """
    if not isinstance(text, str) or not text:
        return ""
    return "".join(_ASCII_DIGIT_RUNS.findall(to_english_digits(text)))


def canonical_digits(text: str) -> str:
    """Extract digits and strip leading zeros ("000120" → "120", "" → "0")."""
    return normalize_and_extract_digits(text).lstrip("0") or "0"


def digits_to_int(raw: str) -> int:
    """Convert an ASCII digit string of any length to int ("" → 0)."""
    n = 0
    for i in range(0, len(raw), _STR_CHUNK):
        part = raw[i:i + _STR_CHUNK]
        n = n * 10 ** len(part) + int(part)
    return n


def int_to_digits(n: int) -> str:
    """Return the ASCII digits of abs(n), however long."""
    n = abs(int(n))
    base = 10 ** _STR_CHUNK
    parts = []
    while n >= base:
        n, low = divmod(n, base)
        parts.append(str(low).zfill(_STR_CHUNK))
    parts.append(str(n))
    return "".join(reversed(parts))
