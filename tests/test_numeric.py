import math
from fractions import Fraction

from pytest import mark, raises

from xlsxwriter_cellutils.numeric import DEFAULT_DIGITS, count_decimal_places, round_to_decimal_places


class TestRoundToDecimalPlaces:
    def test_digits(self):
        assert round_to_decimal_places(1.1234567890123456789, 6) == 1.123457
        assert round_to_decimal_places(2.5, 0) == 2.0

    def test_default_digits(self):
        assert DEFAULT_DIGITS == 14
        assert round_to_decimal_places(0.1 + 0.2) == 0.3
        assert round_to_decimal_places(1.000000000000001) == 1.0

    def test_returns_float(self):
        assert type(round_to_decimal_places(3)) is float
        assert round_to_decimal_places(3) == 3.0

    def test_negative(self):
        assert round_to_decimal_places(-1.23456, 2) == -1.23

    def test_non_finite(self):
        assert round_to_decimal_places(math.inf) == math.inf
        assert math.isnan(round_to_decimal_places(math.nan))

    def test_rational(self):
        assert round_to_decimal_places(Fraction(1, 3), 4) == 0.3333
        assert round_to_decimal_places(Fraction(7, 2)) == 3.5

    def test_negative_digits(self):
        with raises(ValueError):
            round_to_decimal_places(1.5, -1)


class TestCountDecimalPlaces:
    @mark.parametrize('value, expected', [
        (1.12345, 5),
        (42, 0),
        (42.0, 0),
        (-3.5, 1),
        (0.25, 2),
    ])
    def test_count(self, value, expected):
        assert count_decimal_places(value) == expected

    def test_follows_representation(self):
        assert count_decimal_places(0.1 + 0.2) == 17
        assert count_decimal_places(1e-07) == 0
        assert count_decimal_places(1.5e-07) == 5

    def test_non_finite(self):
        assert count_decimal_places(math.inf) == 0
        assert count_decimal_places(math.nan) == 0
