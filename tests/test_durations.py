"""Tests for duration literal parsing and formatting."""

from datetime import timedelta

import pytest

from envflags.errors import ParseError
from envflags.utils.durations import format_duration, parse_duration


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1h", timedelta(hours=1)),
            ("30s", timedelta(seconds=30)),
            ("1h30m", timedelta(minutes=90)),
            ("1.5h", timedelta(minutes=90)),
            ("2h45m0.5s", timedelta(hours=2, minutes=45, milliseconds=500)),
            ("300ms", timedelta(milliseconds=300)),
            ("2us", timedelta(microseconds=2)),
            ("2µs", timedelta(microseconds=2)),
            (".5s", timedelta(milliseconds=500)),
            ("+5m", timedelta(minutes=5)),
            ("0", timedelta(0)),
            ("-0", timedelta(0)),
        ],
    )
    def test_valid_literals(self, text, expected):
        assert parse_duration(text) == expected

    def test_negative_duration(self):
        assert parse_duration("-1.5s") == -timedelta(seconds=1.5)

    def test_nanoseconds_truncate_to_microseconds(self):
        assert parse_duration("1500ns") == timedelta(microseconds=1)

    @pytest.mark.parametrize("text", ["", "1", "h", "-", ".s", "1x", "1.2.3s", "1h 30m", "soon"])
    def test_malformed_literals(self, text):
        with pytest.raises(ParseError):
            parse_duration(text)

    def test_missing_unit_message(self):
        with pytest.raises(ParseError, match="missing unit"):
            parse_duration("15")

    def test_overflow(self):
        """Durations must fit in 64-bit nanoseconds."""
        with pytest.raises(ParseError):
            parse_duration("3000000h")


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (timedelta(0), "0s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(seconds=90), "1m30s"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(milliseconds=250), "250ms"),
            (timedelta(microseconds=3), "3µs"),
            (timedelta(microseconds=1500), "1.5ms"),
            (-timedelta(seconds=30), "-30s"),
        ],
    )
    def test_format(self, value, expected):
        assert format_duration(value) == expected

    def test_formatted_value_parses_back(self):
        value = timedelta(hours=26, minutes=3, seconds=4, microseconds=5)
        assert parse_duration(format_duration(value)) == value
