# newrial/utils/money/rules.py
# -*- coding: utf-8 -*-
"""
Shared glyphs & word tables for the Rial formatting/rendering system.

This module centralizes separators, digit alphabets and the Persian word
tables used across the formatters so behavior is consistent throughout the app.

Design notes
------------
- Keep *policy* here, *logic* in the dedicated digits/grouping/words modules.
- Tables are tuples (or read-only mappings) indexed by integer; nothing here
  is ever mutated at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = [
    # glyphs
    "DIGITS_ASCII", "DIGITS_FA", "DIGITS_AR",
    "THOUSANDS_SEP_FA", "THOUSANDS_SEP_EN", "DECIMAL_SEP_FA", "SIGN_NEG",
    # words
    "WORD_ZERO", "WORD_NEGATIVE", "WORD_AND", "WORD_RIAL", "WORD_QERAN",
    "ONES", "TENS", "HUNDREDS", "TEENS", "SCALES",
]

# ------------------------------ Digit alphabets -------------------------------
DIGITS_ASCII: str = "0123456789"
#: Extended Arabic-Indic (Persian) digits U+06F0..U+06F9
DIGITS_FA: str = "۰۱۲۳۴۵۶۷۸۹"
#: Arabic-Indic digits U+0660..U+0669 (some keyboards emit these)
DIGITS_AR: str = "٠١٢٣٤٥٦٧٨٩"

# ------------------------------ Common glyphs --------------------------------
#: Persian thousands separator (U+066C)
THOUSANDS_SEP_FA: str = "٬"
THOUSANDS_SEP_EN: str = ","
#: Persian decimal separator (U+066B)
DECIMAL_SEP_FA: str = "٫"
SIGN_NEG: str = "-"

# ------------------------------ Words ----------------------------------------
WORD_ZERO: str = "صفر"
WORD_NEGATIVE: str = "منفی"
#: Joiner between triplet parts and between chunks (" و ")
WORD_AND: str = " و "
WORD_RIAL: str = "ریال"
WORD_QERAN: str = "قِران"

ONES: Tuple[str, ...] = ("", "یک", "دو", "سه", "چهار", "پنج", "شش", "هفت", "هشت", "نه")
TENS: Tuple[str, ...] = ("", "ده", "بیست", "سی", "چهل", "پنجاه", "شصت", "هفتاد", "هشتاد", "نود")
HUNDREDS: Tuple[str, ...] = (
    "", "صد", "دویست", "سیصد", "چهارصد", "پانصد", "ششصد", "هفتصد", "هشتصد", "نهصد",
)

#: Irregular 11..19; overrides the generic tens+ones composition
TEENS: Mapping[int, str] = MappingProxyType({
    11: "یازده",
    12: "دوازده",
    13: "سیزده",
    14: "چهارده",
    15: "پانزده",
    16: "شانزده",
    17: "هفده",
    18: "هجده",
    19: "نوزده",
})

#: Scale word per power of 1000 (index 0 = units, no word)
SCALES: Tuple[str, ...] = (
    "",
    "هزار",         # 10^3
    "میلیون",       # 10^6
    "میلیارد",      # 10^9
    "تریلیون",      # 10^12
    "کوادریلیون",   # 10^15
    "کوینتیلیون",   # 10^18
    "سکستیلیون",    # 10^21
    "سپتیلیون",     # 10^24
    "اکتیلیون",     # 10^27
    "نانیلیون",     # 10^30
    "دسیلیون",      # 10^33
)
