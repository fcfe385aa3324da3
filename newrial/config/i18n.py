# newrial/config/i18n.py
# -*- coding: utf-8 -*-
"""
UI labels in Persian and English.

`t(key, lang)` looks a label up and falls back to the key itself, so a missing
translation shows up as its key rather than failing.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = ["LABELS", "t"]

_FA = {
    "title": "تبدیل ریال قدیم به ریال جدید",
    "mode_old_to_new": "ریال قدیم → ریال جدید/قِران",
    "mode_new_to_old": "ریال جدید/قِران → ریال قدیم",
    "old_rial": "ریال قدیم",
    "new_rial": "ریال جدید",
    "qeran": "قِران",
    "and": "و",
    "placeholder_old": "مثلاً 550,000",
    "placeholder_new": "مثلاً 55",
    "placeholder_qeran": "مثلاً 40",
    "swap": "⇄ برعکس",
    "result_new": "ریال جدید",
    "result_old": "ریال قدیم",
    "letters_new": "ریال جدید به حروف",
    "letters_old": "ریال قدیم به حروف",
    "approx_toman": "معادل تقریبی: _ تومان قدیم",
}

_EN = {
    "title": "Old Rial → New Rial",
    "mode_old_to_new": "Old Rial → New Rial/Qeran",
    "mode_new_to_old": "New Rial/Qeran → Old Rial",
    "old_rial": "Old Rial",
    "new_rial": "New Rial",
    "qeran": "Qeran",
    "and": "&",
    "placeholder_old": "e.g. 550,000",
    "placeholder_new": "e.g. 55",
    "placeholder_qeran": "e.g. 40",
    "swap": "⇄ Swap",
    "result_new": "New Rial",
    "result_old": "Old Rial",
    "letters_new": "New Rial (in words)",
    "letters_old": "Old Rial (in words)",
    "approx_toman": "Approximate: _ old Tomans",
}

LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "fa": MappingProxyType(_FA),
    "en": MappingProxyType(_EN),
})


def t(key: str, lang: str) -> str:
    """Return the label for `key` in `lang` (English for unknown languages)."""
    table = LABELS["fa"] if lang == "fa" else LABELS["en"]
    return table.get(key, key)
