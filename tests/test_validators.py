"""
Tests for the low-level GS1 validators.
"""

import pytest

from gs1_128.validators import (
    calculate_check_digit_mod10,
    decode_decimal_value,
    is_digits,
    split_decimal_point,
    validate_check_digit,
    validate_date,
    validate_datetime,
    validate_numeric,
)


class TestCheckDigit:
    """Tests for check digit calculation and validation."""

    def test_mod10_gtin14(self):
        """Test Mod10 check digit for GTIN-14."""
        assert calculate_check_digit_mod10("0628509600084") == 2
        assert calculate_check_digit_mod10("0001234567890") == 5

    def test_mod10_sscc18(self):
        """Test Mod10 check digit for SSCC-18."""
        assert calculate_check_digit_mod10("00183456000000001") == 2

    def test_mod10_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("12A4")
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("")

    def test_mod10_rejects_non_ascii_digits(self):
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("12²")

    def test_is_digits(self):
        assert is_digits("0123456789")
        assert not is_digits("")
        assert not is_digits("1²")
        assert not is_digits("12\n")

    def test_validate_gtin_valid(self):
        """Test validation of valid GTIN."""
        result = validate_check_digit("06285096000842")
        assert result.valid
        assert result.meta['check_digit_valid']

    def test_validate_gtin_invalid(self):
        """Test validation of invalid GTIN."""
        result = validate_check_digit("06285096000841")
        assert not result.valid
        assert result.meta['calculated_check_digit'] == 2
        assert 'check digit mismatch' in result.errors[0].lower()


class TestNumericValidation:
    """Tests for numeric content."""

    def test_digits_and_point(self):
        result = validate_numeric("0012.34")
        assert result.valid
        assert result.meta['normalized'] == "0012.34"

    def test_decimal_comma_normalized(self):
        """A decimal comma is accepted and turned into a point."""
        result = validate_numeric("12,5")
        assert result.valid
        assert result.meta['normalized'] == "12.5"

    def test_letters_rejected(self):
        result = validate_numeric("12A4")
        assert not result.valid

    def test_empty_rejected(self):
        assert not validate_numeric("").valid

    def test_trailing_newline_rejected(self):
        assert not validate_numeric("12\n").valid


class TestDateValidation:
    """Tests for YYMMDD dates."""

    def test_yymmdd_valid(self):
        result = validate_date("290131")
        assert result.valid
        assert result.meta['year'] == 2029
        assert result.meta['month'] == 1
        assert result.meta['day'] == 31
        assert result.meta['iso_date'] == "2029-01-31"

    def test_century_pivot(self):
        assert validate_date("990101").meta['year'] == 1999

    def test_day_zero_allowed(self):
        """Day 00 means the day is not specified."""
        result = validate_date("290200")
        assert result.valid
        assert result.meta['day_unspecified']
        assert 'iso_date' not in result.meta

    def test_day_not_checked_against_month(self):
        """February 31 passes: only the 0-31 range is enforced."""
        assert validate_date("290231").valid

    @pytest.mark.parametrize("value", ["291301", "290001", "290132", "2901", "29013A", "2901310"])
    def test_invalid_dates(self, value):
        assert not validate_date(value).valid

    def test_trailing_newline_rejected(self):
        assert not validate_date("290131\n").valid


class TestDateTimeValidation:
    """Tests for YYMMDDHH[MM[SS]] date/times."""

    def test_hour_only(self):
        result = validate_datetime("25123123")
        assert result.valid
        assert result.meta['hour'] == 23
        assert 'minute' not in result.meta

    def test_with_minutes_and_seconds(self):
        result = validate_datetime("251231235959")
        assert result.valid
        assert result.meta['minute'] == 59
        assert result.meta['second'] == 59

    @pytest.mark.parametrize("value", [
        "2512312",        # too short
        "2512312359590",  # too long
        "25123124",       # hour 24
        "2512312360",     # minute 60
        "251231235960",   # second 60
        "25133123",       # month 13
        "25123223",       # day 32
    ])
    def test_invalid_datetimes(self, value):
        assert not validate_datetime(value).valid

    def test_trailing_newline_rejected(self):
        assert not validate_datetime("25123123\n").valid


class TestDecimalPoint:
    """Tests for decimal position handling."""

    def test_split_with_point(self):
        assert split_decimal_point("12.34") == (2, "1234")

    def test_split_without_point(self):
        """Without a point the value is a whole number."""
        assert split_decimal_point("1234") == (0, "1234")

    def test_split_trailing_point(self):
        assert split_decimal_point("1234.") == (0, "1234")

    def test_decode(self):
        assert decode_decimal_value("001234", 2) == "0012.34"
        assert decode_decimal_value("001234", 0) == "001234"

    def test_decode_pads_short_values(self):
        assert decode_decimal_value("5", 2) == "0.05"
