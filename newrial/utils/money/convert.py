# newrial/utils/money/convert.py
# -*- coding: utf-8 -*-
"""
Exact conversion between old Rial and new Rial / Qeran.

Scope
-----
This module parses raw input text into non-negative integers and converts
between the two denominations using integer arithmetic only:

    1 new Rial = 10,000 old Rial
    1 Qeran    =    100 old Rial

Public API
----------
parse_old_amount(text) / parse_new_amount(text) -> int
parse_qeran(text) -> int            (0..99)
old_to_new(old) -> ConversionResult
new_to_old(new_amount, qeran) -> int
derive_old_toman(old) -> int
convert_old_text(text) / convert_new_text(new_text, qeran_text) -> ConversionResult

Design notes
------------
- Parsing is forgiving on purpose: empty or unparsable text is 0, never an
  error, so a field being edited always shows a stable result.
- old → new *floors*; the last two digits of the old amount (below one
  Qeran) are dropped and exposed as `ConversionResult.remainder`.
- No float ever enters the pipeline; Python ints are unbounded.
"""

from __future__ import annotations

from dataclasses import dataclass

from newrial.config.constants import (
    OLD_PER_NEW,
    OLD_PER_QERAN,
    RIAL_PER_TOMAN,
    QERAN_MAX,
    QERAN_INPUT_DIGITS,
)

from .digits import digits_to_int, normalize_and_extract_digits

__all__ = [
    "ConversionResult",
    "parse_old_amount",
    "parse_new_amount",
    "parse_qeran",
    "clamp_qeran",
    "old_to_new",
    "new_to_old",
    "derive_old_toman",
    "convert_old_text",
    "convert_new_text",
]


@dataclass(frozen=True)
class ConversionResult:
    """Both sides of one conversion.

    Invariant: old_amount == new_amount * 10000 + qeran * 100 + remainder
    """
    old_amount: int
    new_amount: int
    qeran: int

    @property
    def remainder(self) -> int:
        """Old Rial below one Qeran, discarded by the conversion (0..99)."""
        return self.old_amount % OLD_PER_QERAN

    @property
    def old_toman(self) -> int:
        return derive_old_toman(self.old_amount)


def _parse_digits(text: str) -> int:
    return digits_to_int(normalize_and_extract_digits(text))


def parse_old_amount(text: str) -> int:
    """Parse an old-Rial field (any digit script, separators allowed); garbage → 0."""
    return _parse_digits(text)


def parse_new_amount(text: str) -> int:
    """Parse a new-Rial field; garbage → 0."""
    return _parse_digits(text)


def clamp_qeran(value: int) -> int:
    """Clamp a qeran count to [0, 99]."""
    return max(0, min(QERAN_MAX, int(value)))


def parse_qeran(text: str) -> int:
    """Parse a qeran field: first two digits only, clamped to [0, 99].

    >>> parse_qeran("150")
    15
    >>> parse_qeran("ab")
    0
    """
    raw = normalize_and_extract_digits(text)[:QERAN_INPUT_DIGITS]
    return clamp_qeran(int(raw)) if raw else 0


def old_to_new(old: int) -> ConversionResult:
    """Split an old-Rial amount into new Rial and Qeran (floor semantics).

    >>> old_to_new(553140)
    ConversionResult(old_amount=553140, new_amount=55, qeran=31)
    """
    old = int(old)
    new_amount, rest = divmod(old, OLD_PER_NEW)
    return ConversionResult(old_amount=old, new_amount=new_amount, qeran=rest // OLD_PER_QERAN)


def new_to_old(new_amount: int, qeran: int) -> int:
    """Return the exact old-Rial amount for `new_amount` new Rial and `qeran` Qeran.

    Negative new amounts count as 0 and qeran is clamped to [0, 99], so the
    result is always a non-negative multiple of 100.
    """
    return max(0, int(new_amount)) * OLD_PER_NEW + clamp_qeran(qeran) * OLD_PER_QERAN


def derive_old_toman(old: int) -> int:
    """Old Toman equivalent of an old-Rial amount (floor of old / 10)."""
    return int(old) // RIAL_PER_TOMAN


def convert_old_text(text: str) -> ConversionResult:
    """Parse an old-Rial field and convert it."""
    return old_to_new(parse_old_amount(text))


def convert_new_text(new_text: str, qeran_text: str) -> ConversionResult:
    """Parse new-Rial and qeran fields and convert back to old Rial."""
    new_amount = parse_new_amount(new_text)
    qeran = parse_qeran(qeran_text)
    return ConversionResult(
        old_amount=new_to_old(new_amount, qeran),
        new_amount=new_amount,
        qeran=qeran,
    )
