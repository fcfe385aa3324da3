# newrial/utils/money/grouping.py
# -*- coding: utf-8 -*-
"""
Thousands-grouped Rial formatter with locale digits.

Scope
-----
- Group a plain digit string every three digits from the right.
- Render signed integers with the language's separator and digit glyphs.
- Keep unit suffixes ("ریال", "قِران") out of here to keep the UI flexible.

Public API
----------
group_digits(digits, separator) -> str
    '1234567', '٬' → '1٬234٬567'  (purely syntactic; '' → '0').
format_localized(n, lang) -> str
    -1234567, 'fa' → '-۱٬۲۳۴٬۵۶۷'
regroup_input(text, lang, max_digits=None) -> str
    Reformat a raw input field on every keystroke.
"""

from __future__ import annotations

from typing import Optional

from .digits import int_to_digits, map_digits_for_lang, normalize_and_extract_digits
from .rules import THOUSANDS_SEP_FA, THOUSANDS_SEP_EN, SIGN_NEG

__all__ = [
    "separator_for",
    "group_digits",
    "format_localized",
    "format_small",
    "regroup_input",
]


def separator_for(lang: str) -> str:
    """Return the thousands separator for `lang` ('٬' for fa, ',' otherwise)."""
    return THOUSANDS_SEP_FA if lang == "fa" else THOUSANDS_SEP_EN


def group_digits(digits: str, separator: str) -> str:
    """Insert `separator` every three digits counting from the least-significant end.

    The input is expected to be an unsigned ASCII digit string; no sign
    handling happens here. An empty string formats as "0".
    """
    if not digits:
        return "0"
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_localized(n: int, lang: str) -> str:
    """Format a (possibly negative) integer with grouping, sign and locale digits."""
    n = int(n)
    sign = SIGN_NEG if n < 0 else ""
    body = group_digits(int_to_digits(n), separator_for(lang))
    return map_digits_for_lang(sign + body, lang)


def format_small(n: int, lang: str) -> str:
    """Render a small value (e.g., qeran) without grouping, in locale digits."""
    n = int(n)
    sign = SIGN_NEG if n < 0 else ""
    return map_digits_for_lang(sign + int_to_digits(n), lang)


def regroup_input(text: str, lang: str, max_digits: Optional[int] = None) -> str:
    """Return the grouped, localized form of a raw input field.

    Mirrors what the input shows while the user types: digits are extracted
    from whatever script was typed, optionally truncated to the first
    `max_digits`, grouped and mapped back to the UI language. Leading zeros
    are kept as typed; garbage or empty text shows as '0'.
    """
    raw = normalize_and_extract_digits(text)
    if max_digits is not None:
        raw = raw[:max_digits]
    return map_digits_for_lang(group_digits(raw, separator_for(lang)), lang)
