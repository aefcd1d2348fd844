"""Tests for formatting utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from backup_retention.utils.formatters import format_file_size, format_rfc3339, parse_rfc3339


class TestRfc3339:
    """Test timestamp parsing and formatting."""

    def test_format_utc_uses_z(self):
        dt = datetime(2024, 5, 1, 2, 0, 0, tzinfo=timezone.utc)
        assert format_rfc3339(dt) == "2024-05-01T02:00:00Z"

    def test_format_keeps_offset(self):
        dt = datetime(2024, 5, 3, 2, 0, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert format_rfc3339(dt) == "2024-05-03T02:00:00-03:00"

    def test_format_half_hour_offset(self):
        dt = datetime(2024, 5, 3, 2, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert format_rfc3339(dt) == "2024-05-03T02:00:00+05:30"

    def test_format_drops_fractional_seconds(self):
        dt = datetime(2024, 5, 1, 2, 0, 0, 987654, tzinfo=timezone.utc)
        assert format_rfc3339(dt) == "2024-05-01T02:00:00Z"

    def test_format_naive_treated_as_utc(self):
        assert format_rfc3339(datetime(2024, 5, 1, 2, 0, 0)) == "2024-05-01T02:00:00Z"

    def test_parse_z_suffix(self):
        assert parse_rfc3339("2024-05-01T02:00:00Z") == datetime(2024, 5, 1, 2, tzinfo=timezone.utc)

    def test_parse_offset(self):
        parsed = parse_rfc3339("2024-05-03T02:00:00-03:00")
        assert parsed.utcoffset() == timedelta(hours=-3)
        assert parsed == datetime(2024, 5, 3, 5, tzinfo=timezone.utc)

    def test_parse_nanosecond_fraction(self):
        parsed = parse_rfc3339("2024-05-01T02:00:00.123456789Z")
        assert parsed == datetime(2024, 5, 1, 2, 0, 0, 123456, tzinfo=timezone.utc)

    def test_parse_naive_is_utc(self):
        assert parse_rfc3339("2024-05-01T02:00:00").tzinfo is not None

    @pytest.mark.parametrize("value", [
        "", "yesterday", "2024-13-01T00:00:00Z", "2024-05-01", "2024-05-01 02:00:00",
        "2024-05-01T02:00:00+0300", 1714528800, None
    ])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_rfc3339(value)

    def test_parse_lowercase_separators(self):
        assert parse_rfc3339("2024-05-01t02:00:00z") == datetime(2024, 5, 1, 2, tzinfo=timezone.utc)

    def test_format_parses_back(self):
        text = "2024-05-03T02:00:00-03:00"
        assert format_rfc3339(parse_rfc3339(text)) == text


class TestFormatFileSize:
    """Test human readable sizes."""

    def test_sizes(self):
        assert format_file_size(512) == "512B"
        assert format_file_size(2048) == "2KB"
        assert format_file_size(5 * 1024 * 1024) == "5MB"
        assert format_file_size(3 * 1024 ** 3) == "3GB"
