# newrial/utils/money/words.py
# -*- coding: utf-8 -*-
"""
Persian number-to-words rendering for arbitrarily large integers.

Scope
-----
- triplet_to_words(n): 0..999 → words ("" for 0)
- to_words(n): any int → words ("صفر" for 0, "منفی ..." for negatives)
- rial_in_words / amount_in_words: the phrases shown under a result

Algorithm
---------
The absolute value is split into base-1000 chunks (least-significant first).
Every nonzero chunk is rendered with the triplet renderer plus its scale word
("هزار", "میلیون", ...); zero chunks are skipped; chunks are joined from most
to least significant with " و ".

Numbers beyond the scale table
------------------------------
The table ends at دسیلیون (10^33). Anything at or above the next power of
1000 is split around the largest scale S:

    words(n) = words(n // S) + " " + word(S) [+ " و " + words(n % S)]

so e.g. 10^36 reads "یک هزار دسیلیون". No scale term is ever dropped and the
renderer stays total for every int.
"""

from __future__ import annotations

from .rules import (
    ONES,
    TENS,
    HUNDREDS,
    TEENS,
    SCALES,
    WORD_ZERO,
    WORD_NEGATIVE,
    WORD_AND,
    WORD_RIAL,
    WORD_QERAN,
)

__all__ = [
    "triplet_to_words",
    "to_words",
    "rial_in_words",
    "amount_in_words",
]

#: Magnitude of the largest named scale (1000 ** 11 == 10^33)
_TOP_INDEX = len(SCALES) - 1
_TOP_SCALE = 1000 ** _TOP_INDEX


def triplet_to_words(n: int) -> str:
    """Render 0..999 as Persian words; 0 renders as "".

    Values outside the range are reduced to abs(n) % 1000.
    """
    n = abs(int(n)) % 1000
    parts = []
    if n >= 100:
        parts.append(HUNDREDS[n // 100])
        n %= 100
    if n in TEENS:
        parts.append(TEENS[n])
    elif n:
        parts.append(TENS[n // 10])
        parts.append(ONES[n % 10])
    return WORD_AND.join(p for p in parts if p)


def _chunks_to_words(n: int) -> str:
    """Render 0 < n < 1000 ** len(SCALES) by base-1000 chunks."""
    parts = []
    idx = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            words = triplet_to_words(chunk)
            scale = SCALES[idx]
            parts.append(f"{words} {scale}" if scale else words)
        idx += 1
    return WORD_AND.join(reversed(parts))


def _positive_to_words(n: int) -> str:
    lows = []
    while n >= _TOP_SCALE * 1000:
        n, low = divmod(n, _TOP_SCALE)
        lows.append(low)
    out = _chunks_to_words(n)
    for low in reversed(lows):
        out += f" {SCALES[_TOP_INDEX]}"
        if low:
            out += WORD_AND + _chunks_to_words(low)
    return out


def to_words(n: int) -> str:
    """Render any integer as Persian words.

    >>> to_words(1234)
    'یک هزار و دویست و سی و چهار'
    >>> to_words(0)
    'صفر'
    """
    n = int(n)
    if n == 0:
        return WORD_ZERO
    if n < 0:
        return f"{WORD_NEGATIVE} {_positive_to_words(-n)}"
    return _positive_to_words(n)


def rial_in_words(amount: int) -> str:
    """'<words> ریال'"""
    return f"{to_words(amount)} {WORD_RIAL}"


def amount_in_words(new_amount: int, qeran: int) -> str:
    """New-Rial amount plus qeran in words.

    Qeran (0..99) goes through the triplet renderer directly and is only
    mentioned when nonzero: 'پنجاه و پنج ریال و سی و یک قِران'.
    """
    out = rial_in_words(new_amount)
    if qeran > 0:
        out += f"{WORD_AND}{triplet_to_words(qeran)} {WORD_QERAN}"
    return out
