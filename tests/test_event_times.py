"""Unit tests for event time arithmetic."""
from datetime import timedelta

import pytest

from processor.errors import MalformedDuration, MalformedTimestamp
from processor.event_times import (
    compute_end,
    current_timestamp,
    parse_duration,
    parse_timestamp,
)


class TestParseDuration:
    """Test cases for parse_duration."""

    def test_single_digit_hours(self):
        assert parse_duration('1:30') == timedelta(hours=1, minutes=30)

    def test_two_digit_hours(self):
        assert parse_duration('12:05') == timedelta(hours=12, minutes=5)

    def test_zero_hours(self):
        assert parse_duration('0:45') == timedelta(minutes=45)

    @pytest.mark.parametrize('value', [
        '90', '1:2:3', 'a:b', '', ':', '1:', '-1:30', '1:3x', ' 1:30',
        '99999999999:00',
    ])
    def test_invalid_durations(self, value):
        """Test that anything but two integer parts is rejected."""
        with pytest.raises(MalformedDuration):
            parse_duration(value)


class TestParseTimestamp:
    """Test cases for parse_timestamp."""

    def test_keeps_offset(self):
        moment = parse_timestamp('2024-06-01T09:00:00+02:00')

        assert moment.hour == 9
        assert moment.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize('value', [
        '2024-06-01 09:00:00+02:00',
        '2024-06-01T09:00:00',
        '2024-06-01T09:00:00Z',
        '2024-06-01T09:00:00+0200',
        '２０２４-06-01T09:00:00+02:00',
        '2024-13-01T09:00:00+00:00',
        'tomorrow',
    ])
    def test_invalid_timestamps(self, value):
        """Test that only YYYY-MM-DDThh:mm:ss+hh:mm is accepted."""
        with pytest.raises(MalformedTimestamp):
            parse_timestamp(value)


class TestComputeEnd:
    """Test cases for compute_end."""

    def test_adds_duration(self):
        assert compute_end('2024-01-01T10:00:00+00:00', '1:30') == '2024-01-01T11:30:00+00:00'

    def test_keeps_non_utc_offset(self):
        """Test plain clock arithmetic without timezone conversion."""
        assert compute_end('2024-06-01T09:00:00-07:00', '0:45') == '2024-06-01T09:45:00-07:00'

    def test_crosses_midnight(self):
        assert compute_end('2024-06-01T22:30:00+02:00', '2:15') == '2024-06-02T00:45:00+02:00'

    def test_minutes_over_sixty(self):
        assert compute_end('2024-06-01T10:00:00+00:00', '0:90') == '2024-06-01T11:30:00+00:00'

    def test_malformed_duration_raises(self):
        with pytest.raises(MalformedDuration):
            compute_end('2024-06-01T10:00:00+00:00', '90')

    def test_end_past_last_representable_date(self):
        """Test an end beyond year 9999 is a duration error, not an overflow."""
        with pytest.raises(MalformedDuration):
            compute_end('9999-12-31T23:00:00+00:00', '2:00')

    def test_malformed_date_raises(self):
        with pytest.raises(MalformedTimestamp):
            compute_end('2024-06-01', '1:00')


def test_current_timestamp_round_trips():
    """Test the run timestamp uses the same format as event dates."""
    stamp = current_timestamp()

    assert parse_timestamp(stamp).utcoffset() is not None
