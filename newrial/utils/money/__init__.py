# newrial/utils/money/__init__.py
# -*- coding: utf-8 -*-
"""
Unified Money Utils API (old Rial ⇄ new Rial / Qeran).

This package provides a cohesive, testable, and UI-friendly surface for:
  • Digit helpers: extraction from mixed scripts, ASCII ↔ Persian digits
  • Grouping: thousands separators, localized signed formatting
  • Conversion: forgiving parsers and exact integer redenomination
  • Words: arbitrary-size integers as Persian text

Import examples
---------------
from newrial.utils.money import (
    normalize_and_extract_digits, group_digits, format_localized,
    parse_old_amount, parse_new_amount, parse_qeran,
    old_to_new, new_to_old, derive_old_toman,
    to_words,
)

Compatibility
-------------
- `parse_sub_unit` is an alias of `parse_qeran`.
"""

from __future__ import annotations

from .digits import (
    to_english_digits,
    to_persian_digits,
    map_digits_for_lang,
    normalize_and_extract_digits,
    canonical_digits,
    digits_to_int,
    int_to_digits,
)
from .grouping import (
    separator_for,
    group_digits,
    format_localized,
    format_small,
    regroup_input,
)
from .convert import (
    ConversionResult,
    parse_old_amount,
    parse_new_amount,
    parse_qeran,
    clamp_qeran,
    old_to_new,
    new_to_old,
    derive_old_toman,
    convert_old_text,
    convert_new_text,
)
from .words import (
    triplet_to_words,
    to_words,
    rial_in_words,
    amount_in_words,
)

# Friendly alias
parse_sub_unit = parse_qeran

__all__ = [
    # digits
    "to_english_digits",
    "to_persian_digits",
    "map_digits_for_lang",
    "normalize_and_extract_digits",
    "canonical_digits",
    "digits_to_int",
    "int_to_digits",
    # grouping
    "separator_for",
    "group_digits",
    "format_localized",
    "format_small",
    "regroup_input",
    # conversion
    "ConversionResult",
    "parse_old_amount",
    "parse_new_amount",
    "parse_qeran",
    "parse_sub_unit",
    "clamp_qeran",
    "old_to_new",
    "new_to_old",
    "derive_old_toman",
    "convert_old_text",
    "convert_new_text",
    # words
    "triplet_to_words",
    "to_words",
    "rial_in_words",
    "amount_in_words",
]
