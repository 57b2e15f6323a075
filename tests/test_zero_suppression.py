"""
Tests for UPC-E to UPC-A expansion.
"""

import pytest

from upcean.barcode.validator import validate
from upcean.barcode.zero_suppression import expand_upce


class TestExpandCore:
    """Tests for each pattern selector of a bare 6-digit core."""

    @pytest.mark.parametrize(
        "core, expected",
        [
            ("123455", "012345000058"),  # selector 5-9
            ("123454", "012304000051"),  # selector 4
            ("123453", "012300000451"),  # selector 3
            ("123450", "012300000451"),  # selector 0
            ("123451", "012310000458"),  # selector 1
            ("000000", "000000000000"),
        ],
    )
    def test_selectors(self, core, expected):
        """Test decoding of each zero-suppression pattern."""
        assert expand_upce(core, assumed_number_system=0) == (True, expected)

    def test_expansion_validates(self):
        """Test that an expansion is a valid 12-digit UPC-A."""
        success, upca = expand_upce("123450", assumed_number_system=0)
        assert success
        assert len(upca) == 12
        assert validate(upca)

    def test_number_system_one(self):
        """Test a bare core under number system 1."""
        assert expand_upce("123455", assumed_number_system=1) == (True, "112345000055")

    def test_unsupported_assumed_number_system_falls_back(self):
        """Test that assumed number systems other than 0/1 use 0."""
        assert expand_upce("123455", assumed_number_system=7) == (True, "012345000058")

    def test_default_number_system(self):
        """Test the default assumed number system."""
        assert expand_upce("123455") == (True, "012345000058")


class TestExpandWithNumberSystem:
    """Tests for 7 and 8 digit UPC-E forms."""

    def test_seven_digits(self):
        """Test number system + core."""
        assert expand_upce("0123455") == (True, "012345000058")
        assert expand_upce("1123455") == (True, "112345000055")

    def test_seven_digits_ignores_assumed_number_system(self):
        """Test that an explicit number system wins."""
        assert expand_upce("0123455", assumed_number_system=1) == (True, "012345000058")

    def test_eight_digits_with_matching_check(self):
        """Test number system + core + check digit."""
        assert expand_upce("01234558") == (True, "012345000058")
        assert expand_upce("01234565") == (True, "012345000065")
        assert expand_upce("11234538") == (True, "112300000458")

    def test_eight_digits_with_wrong_check(self):
        """Test that a mismatched check digit fails without correction."""
        assert expand_upce("01234559") == (False, "")

    def test_unsupported_number_system(self):
        """Test that number systems other than 0/1 fail."""
        assert expand_upce("2123455") == (False, "")
        assert expand_upce("21234558") == (False, "")

    def test_bad_input(self):
        """Test malformed input."""
        for code in ["", None, "12345", "123456789", "12345a", "0123 45a"]:
            assert expand_upce(code) == (False, "")
