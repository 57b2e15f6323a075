"""
Tests for normalization and the mod-10 check digit.
"""

import pytest

from upcean.barcode.checkdigit import compute_check_digit, is_valid_ean8
from upcean.barcode.normalize import is_digits, normalize


class TestNormalize:
    """Tests for input normalization."""

    def test_strips_outer_and_inner_spaces(self):
        """Test whitespace trimming and space removal."""
        assert normalize("  0360 0029 1452 ") == "036000291452"

    def test_none_and_empty(self):
        """Test that missing input normalizes to empty string."""
        assert normalize(None) == ""
        assert normalize("") == ""
        assert normalize("   ") == ""

    def test_keeps_other_characters(self):
        """Test that dashes and letters are not stripped."""
        assert normalize("036-000-29145-2") == "036-000-29145-2"
        assert normalize("abc 123") == "abc123"

    def test_is_digits(self):
        """Test the digit-only predicate."""
        assert is_digits("0123456789")
        assert not is_digits("")
        assert not is_digits("12a4")
        assert not is_digits("12-4")
        assert not is_digits("١٢٣")  # non-ASCII digits


class TestComputeCheckDigit:
    """Tests for check digit calculation."""

    def test_upca_bodies(self):
        """Test check digits for 11-digit UPC-A bodies."""
        assert compute_check_digit("03600029145") == 2
        assert compute_check_digit("01234500005") == 8

    def test_ean13_bodies(self):
        """Test check digits for 12-digit EAN-13 bodies."""
        assert compute_check_digit("400638133393") == 1
        assert compute_check_digit("590123412345") == 7
        assert compute_check_digit("001234567890") == 5

    def test_ean8_bodies(self):
        """Test check digits for 7-digit EAN-8 bodies."""
        assert compute_check_digit("9638507") == 4
        assert compute_check_digit("5512345") == 7
        assert compute_check_digit("0123456") == 5

    def test_multiple_of_ten_gives_zero(self):
        """Test that a sum already divisible by 10 yields 0."""
        assert compute_check_digit("0000000") == 0
        assert compute_check_digit("") == 0

    def test_deterministic(self):
        """Test that repeated calls agree."""
        assert compute_check_digit("40063813339") == compute_check_digit("40063813339")

    def test_non_numeric_rejected(self):
        """Test that non-digit characters raise."""
        with pytest.raises(ValueError):
            compute_check_digit("12a45")


class TestEAN8Checksum:
    """Tests for EAN-8 checksum validation."""

    def test_validate_ean8_valid(self):
        """Test validation of valid EAN-8 codes."""
        for code in ["96385074", "55123457", "01234565"]:
            assert is_valid_ean8(code), f"Expected {code} to be valid"

    def test_validate_ean8_invalid(self):
        """Test validation of invalid EAN-8 codes."""
        invalid_codes = [
            "96385075",  # Wrong checksum
            "1234567",  # Too short
            "123456789",  # Too long
            "9638507A",  # Non-numeric
        ]
        for code in invalid_codes:
            assert not is_valid_ean8(code), f"Expected {code} to be invalid"
