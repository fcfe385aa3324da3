"""
Tests for the old Rial ⇄ new Rial / Qeran conversion engine

Checks:
1. Forgiving parsers (garbage → 0, qeran clamped)
2. Floor semantics of old → new
3. Exact new → old
4. Old Toman derivation
"""


import pytest

from newrial.utils.money import parse_sub_unit
from newrial.utils.money.convert import (
    ConversionResult,
    clamp_qeran,
    convert_new_text,
    convert_old_text,
    derive_old_toman,
    new_to_old,
    old_to_new,
    parse_new_amount,
    parse_old_amount,
    parse_qeran,
)

# =============================================================================
# PARSING
# =============================================================================


class TestParseAmounts:
    """Tests for parse_old_amount / parse_new_amount"""

    def test_grouped_ascii(self) -> None:
        assert parse_old_amount("550,000") == 550000

    def test_persian_digits(self) -> None:
        assert parse_new_amount("۵۵") == 55
        assert parse_old_amount("۵۵۳٬۱۴۰") == 553140

    @pytest.mark.parametrize("text", ["", "abc", "ریال", "-", None])
    def test_garbage_is_zero(self, text) -> None:
        assert parse_old_amount(text) == 0
        assert parse_new_amount(text) == 0

    def test_sign_is_ignored(self) -> None:
        """Only digits matter; the result is never negative"""
        assert parse_old_amount("-1200") == 1200

    def test_arbitrary_size(self) -> None:
        digits = "9" * 60
        assert parse_old_amount(digits) == int(digits)

    def test_beyond_str_int_limit(self) -> None:
        """5000-digit input parses exactly instead of raising"""
        assert parse_old_amount("1" * 5000) == (10 ** 5000 - 1) // 9
        assert parse_new_amount("۹" * 5000) == 10 ** 5000 - 1


class TestParseQeran:
    """Tests for parse_qeran"""

    def test_plain(self) -> None:
        assert parse_qeran("40") == 40
        assert parse_qeran("۷") == 7

    def test_truncates_to_two_digits(self) -> None:
        """'150' keeps its first two digits"""
        assert parse_qeran("150") == 15
        assert parse_qeran("9999") == 99

    @pytest.mark.parametrize("text", ["", "abc", None, "قِران"])
    def test_garbage_is_zero(self, text) -> None:
        assert parse_qeran(text) == 0

    def test_alias(self) -> None:
        assert parse_sub_unit is parse_qeran

    @pytest.mark.parametrize("value,expected", [(-5, 0), (0, 0), (42, 42), (99, 99), (150, 99)])
    def test_clamp(self, value: int, expected: int) -> None:
        assert clamp_qeran(value) == expected


# =============================================================================
# CONVERSION
# =============================================================================


class TestOldToNew:
    """Tests for old_to_new"""

    def test_exact_multiple(self) -> None:
        r = old_to_new(550000)
        assert (r.new_amount, r.qeran) == (55, 0)

    def test_remainder_discarded(self) -> None:
        """Last two digits are dropped, not rounded"""
        r = old_to_new(553140)
        assert (r.new_amount, r.qeran) == (55, 31)
        assert r.remainder == 40

    def test_floor_not_round(self) -> None:
        r = old_to_new(9999)
        assert (r.new_amount, r.qeran, r.remainder) == (0, 99, 99)

    def test_zero(self) -> None:
        assert old_to_new(0) == ConversionResult(old_amount=0, new_amount=0, qeran=0)

    @pytest.mark.parametrize("x", [0, 1, 99, 100, 9999, 10000, 553140, 10 ** 30 + 12345])
    def test_bounds(self, x: int) -> None:
        """new*10000 + qeran*100 <= x < that + 100"""
        r = old_to_new(x)
        base = r.new_amount * 10000 + r.qeran * 100
        assert base <= x < base + 100
        assert 0 <= r.qeran <= 99
        assert r.old_amount == base + r.remainder

    def test_result_is_frozen(self) -> None:
        r = old_to_new(100)
        with pytest.raises(AttributeError):
            r.qeran = 5  # type: ignore[misc]


class TestNewToOld:
    """Tests for new_to_old"""

    def test_scenario(self) -> None:
        assert new_to_old(55, 40) == 554000

    def test_roundtrip_when_remainder_zero(self) -> None:
        r = old_to_new(553100)
        assert new_to_old(r.new_amount, r.qeran) == 553100

    def test_no_roundtrip_with_remainder(self) -> None:
        r = old_to_new(553140)
        assert new_to_old(r.new_amount, r.qeran) == 553100

    def test_clamps_inputs(self) -> None:
        assert new_to_old(1, 150) == 19900
        assert new_to_old(-3, -1) == 0

    def test_large(self) -> None:
        assert new_to_old(10 ** 25, 1) == 10 ** 29 + 100


class TestDeriveOldToman:
    """Tests for derive_old_toman"""

    def test_scenario(self) -> None:
        assert derive_old_toman(553140) == 55314

    def test_floor(self) -> None:
        assert derive_old_toman(9) == 0
        assert derive_old_toman(19) == 1

    def test_property(self) -> None:
        assert old_to_new(553140).old_toman == 55314


class TestTextConversions:
    """Tests for convert_old_text / convert_new_text"""

    def test_convert_old_text(self) -> None:
        r = convert_old_text("۵۵۳٬۱۴۰")
        assert (r.old_amount, r.new_amount, r.qeran) == (553140, 55, 31)

    def test_convert_new_text(self) -> None:
        r = convert_new_text("55", "40")
        assert (r.old_amount, r.new_amount, r.qeran) == (554000, 55, 40)
        assert r.remainder == 0

    def test_convert_new_text_garbage(self) -> None:
        r = convert_new_text("", "xyz")
        assert (r.old_amount, r.new_amount, r.qeran) == (0, 0, 0)

    def test_convert_old_text_5000_digits(self) -> None:
        r = convert_old_text("9" * 5000)
        assert r.new_amount == (10 ** 5000 - 1) // 10000
        assert (r.qeran, r.remainder) == (99, 99)
