"""Property-based tests for time and rounding helpers.

**Feature: live-charting**
"""

from decimal import Decimal
from datetime import datetime, timedelta, timezone

import pytest
import pytz
from hypothesis import given, settings
from hypothesis import strategies as st

from livecharts.utils import round_to_significant_digits, to_unix_timestamp


class TestUnixTimestamp:
    """
    **Feature: live-charting, Property 15: Epoch Conversion**

    *For any* datetime, the epoch seconds match the UTC instant it names.
    """

    def test_epoch_is_zero(self):
        assert to_unix_timestamp(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_naive_datetime_treated_as_utc(self):
        assert to_unix_timestamp(datetime(2024, 1, 1)) == 1704067200

    def test_aware_datetime_converted_to_utc(self):
        eastern = pytz.timezone("America/New_York")
        time = eastern.localize(datetime(2024, 1, 1, 9, 30))

        assert to_unix_timestamp(time) == 1704067200 + 14 * 3600 + 30 * 60

    @given(
        time=st.datetimes(
            min_value=datetime(1970, 1, 1),
            max_value=datetime(2100, 1, 1),
        )
    )
    @settings(max_examples=100)
    def test_matches_datetime_timestamp(self, time: datetime):
        expected = time.replace(tzinfo=timezone.utc).timestamp()

        assert abs(to_unix_timestamp(time) - expected) <= 0.5

    def test_rounds_to_nearest_second(self):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert to_unix_timestamp(base + timedelta(milliseconds=400)) == 1704067200
        assert to_unix_timestamp(base + timedelta(milliseconds=600)) == 1704067201


class TestSignificantDigits:
    """
    **Feature: live-charting, Property 16: Significant Digit Rounding**

    *For any* finite value, rounding keeps it within half a unit of the last
    kept significant digit.
    """

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (Decimal("123.456789"), 5, Decimal("123.46")),
            (Decimal("-123.456789"), 5, Decimal("-123.46")),
            (Decimal("0.000123456"), 3, Decimal("0.000123")),
            (Decimal("987654"), 2, Decimal("990000")),
            (Decimal("12345678901234.1234567"), 18, Decimal("12345678901234.1235")),
            (Decimal("1"), 5, Decimal("1")),
            (Decimal("0"), 5, Decimal("0")),
            (123.456789, 5, Decimal("123.46")),
        ],
    )
    def test_known_values(self, value, digits: int, expected: Decimal):
        assert round_to_significant_digits(value, digits) == expected

    def test_result_is_decimal(self):
        assert isinstance(round_to_significant_digits(1.5, 5), Decimal)

    def test_non_finite_unchanged(self):
        assert round_to_significant_digits(Decimal("Infinity"), 5) == Decimal("Infinity")
        assert round_to_significant_digits(Decimal("NaN"), 5).is_nan()

    def test_digits_must_be_positive(self):
        with pytest.raises(ValueError):
            round_to_significant_digits(Decimal("1"), 0)

    @given(
        value=st.decimals(
            min_value=Decimal("0.000001"),
            max_value=Decimal("1000000000"),
            places=12,
            allow_nan=False,
            allow_infinity=False,
        ).filter(lambda d: d != 0),
        digits=st.integers(min_value=1, max_value=25),
    )
    @settings(max_examples=200)
    def test_error_within_half_unit(self, value: Decimal, digits: int):
        rounded = round_to_significant_digits(value, digits)
        unit = Decimal(1).scaleb(value.adjusted() - digits + 1)

        assert abs(rounded - value) <= unit / 2
