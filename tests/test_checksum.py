"""Tests for the modulo 11 check digit engine."""

import pytest

from rutcl import InvalidInputError, append_check_digit, compute_check_digit, group_thousands


class TestComputeCheckDigit:
    @pytest.mark.parametrize(
        "number,expected",
        [
            (12345678, "5"),
            (9876543, "3"),
            (11111111, "1"),
            (7654321, "6"),
            (1111111, "4"),
            (1000005, "K"),
            (1000013, "0"),
            (1, "9"),
            (12, "4"),
        ],
        ids=[
            "standard",
            "seven_digits",
            "ones",
            "descending",
            "short_ones",
            "dv_K",
            "dv_zero",
            "single_digit",
            "two_digits",
        ],
    )
    def test_known_values(self, number, expected):
        assert compute_check_digit(number) == expected

    def test_zero_is_degenerate_but_defined(self):
        assert compute_check_digit(0) == "0"

    def test_result_is_always_single_valid_character(self):
        allowed = set("0123456789K")
        for number in range(0, 200_000, 7):
            digit = compute_check_digit(number)
            assert len(digit) == 1
            assert digit in allowed

    def test_deterministic(self):
        assert compute_check_digit(76086428) == compute_check_digit(76086428)

    @pytest.mark.parametrize("bad", [-1, True, 1.5, "12345678", None], ids=["negative", "bool", "float", "str", "none"])
    def test_rejects_non_natural_numbers(self, bad):
        with pytest.raises(InvalidInputError):
            compute_check_digit(bad)


class TestAppendCheckDigit:
    def test_appends_without_separators(self):
        assert append_check_digit(12345678) == "123456785"
        assert append_check_digit(9876543) == "98765433"

    def test_appends_k(self):
        assert append_check_digit(1000005) == "1000005K"


class TestGroupThousands:
    @pytest.mark.parametrize(
        "number,expected",
        [(0, "0"), (999, "999"), (1000, "1.000"), (1000000, "1.000.000"), (99999999, "99.999.999")],
    )
    def test_groups_with_dots(self, number, expected):
        assert group_thousands(number) == expected
