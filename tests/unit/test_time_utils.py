"""
Unit tests for time_utils module.

Tests hour bucketing, padding coercion and the seconds-based fallback.
"""

import pytest

from rum_collector.config.constants import MAX_PADDING_MS, MS_PER_HOUR
from rum_collector.utils.time_utils import coerce_padding, get_masked_time, mask_time


class TestMaskTimeWithPadding:
    """Tests for mask_time with an explicit padding."""

    def test_zero_padding_is_not_absent(self, sample_time, sample_base_hour):
        """Zero padding should return the start of the hour."""
        assert mask_time(sample_time, 0) == sample_base_hour

    def test_numeric_padding(self, sample_time, sample_base_hour):
        """Numeric padding is added to the start of the hour."""
        assert mask_time(sample_time, 1500) == sample_base_hour + 1500

    def test_string_padding(self, sample_time, sample_base_hour):
        """Numeric strings are coerced."""
        assert mask_time(sample_time, "1500") == sample_base_hour + 1500

    def test_padding_clamped_to_a_day(self, sample_time, sample_base_hour):
        """Padding larger than 24h is clamped, not rejected."""
        result = mask_time(sample_time, 25 * MS_PER_HOUR)
        assert result == sample_base_hour + 24 * MS_PER_HOUR

    def test_padding_of_exactly_a_day(self, sample_time, sample_base_hour):
        """A padding of exactly 24h is kept."""
        assert mask_time(sample_time, MAX_PADDING_MS) == sample_base_hour + MAX_PADDING_MS

    def test_negative_padding_clamped_to_zero(self, sample_time, sample_base_hour):
        """Negative padding never moves the time before the hour."""
        assert mask_time(sample_time, -5000) == sample_base_hour

    def test_float_padding(self, sample_time, sample_base_hour):
        """Fractional padding is added as is."""
        assert mask_time(sample_time, 1.5) == sample_base_hour + 1.5

    def test_padding_independent_of_position_in_hour(self, sample_base_hour):
        """Every time in the same hour masks to the same value."""
        start = mask_time(sample_base_hour, 1234)
        end = mask_time(sample_base_hour + MS_PER_HOUR - 1, 1234)
        assert start == end == sample_base_hour + 1234


class TestMaskTimeFallback:
    """Tests for mask_time without a usable padding."""

    def test_no_padding_uses_seconds(self, sample_time, sample_base_hour):
        """Seconds within the minute become the offset."""
        # 15:23.456 into the hour -> 23 seconds
        assert mask_time(sample_time) == sample_base_hour + 23_000

    def test_non_numeric_string_equals_absent(self, sample_time):
        """A non-numeric string behaves like no padding."""
        assert mask_time(sample_time, "not-a-number") == mask_time(sample_time)

    @pytest.mark.parametrize(
        "padding",
        [float("nan"), float("inf"), "Infinity", True, [], {}, "1_000"],
    )
    def test_unusable_padding_equals_absent(self, sample_time, padding):
        """NaN, infinities, booleans and other types fall back."""
        assert mask_time(sample_time, padding) == mask_time(sample_time)

    def test_start_of_hour(self, sample_base_hour):
        """The start of an hour masks to itself."""
        assert mask_time(sample_base_hour) == sample_base_hour

    def test_epoch(self):
        """Zero is a valid timestamp."""
        assert mask_time(0) == 0

    def test_large_safe_integer(self):
        """Masking is total over safe integers."""
        t = 2**53 - 1
        base = (t // MS_PER_HOUR) * MS_PER_HOUR
        assert base <= mask_time(t) <= base + 59_000

    @pytest.mark.parametrize("offset", [0, 999, 1_000, 59_999, 60_000, 754_321, 3_599_999])
    def test_result_within_first_minute(self, sample_base_hour, offset):
        """Fallback result stays within the first minute of the hour."""
        result = mask_time(sample_base_hour + offset)
        assert sample_base_hour <= result <= sample_base_hour + 59_000
        assert (result - sample_base_hour) % 1000 == 0

    def test_fallback_is_idempotent(self, sample_time):
        """Masking a masked time again does not change it."""
        once = mask_time(sample_time)
        assert mask_time(once) == once


class TestCoercePadding:
    """Tests for coerce_padding function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (42, 42),
            (2.5, 2.5),
            ("42", 42),
            (" 42 ", 42),
            ("", 0),
            ("1e3", 1000),
            ("0x10", 16),
            ("0b11", 3),
            ("0X1F", 31),
            ("0o17", 15),
            ("-7", -7),
        ],
    )
    def test_numeric_values(self, value, expected):
        """Numbers and numeric strings resolve to numbers."""
        assert coerce_padding(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "abc", "12px", "0xzz", "nan", float("nan"), True, False, object()]
    )
    def test_absent_values(self, value):
        """Everything else resolves to None."""
        assert coerce_padding(value) is None

    @pytest.mark.parametrize(
        "value",
        ["0x-1f", "0x+1f", "0x1_f", "0x", "0b12", "-0x1f", "1_000", "\u0661\u0662", "\uff11\uff12"],
    )
    def test_strings_number_rejects(self, value):
        """Strings a JavaScript Number() coercion rejects resolve to None."""
        assert coerce_padding(value) is None

    def test_integral_string_becomes_int(self):
        """Integral numeric strings resolve to int."""
        assert isinstance(coerce_padding("1500"), int)


class TestGetMaskedTime:
    """Tests for get_masked_time function."""

    def test_uses_injected_clock(self, sample_time, sample_base_hour):
        """The injected clock supplies the current time."""
        assert get_masked_time(now=lambda: sample_time) == sample_base_hour + 23_000

    def test_padding_with_injected_clock(self, sample_time, sample_base_hour):
        """Padding applies to the injected current time."""
        assert get_masked_time("1234", now=lambda: sample_time) == sample_base_hour + 1234

    def test_wall_clock_default(self):
        """Without a clock the result is a plausible epoch timestamp."""
        result = get_masked_time(0)
        assert result % MS_PER_HOUR == 0
        assert result > 1_600_000_000_000
