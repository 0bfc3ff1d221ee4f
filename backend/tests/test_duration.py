from __future__ import annotations

import datetime as dt

from timesheets.duration import compute_duration_seconds

UTC = dt.timezone.utc


def test_four_hour_window() -> None:
    start = dt.datetime(2024, 1, 15, 8, 0, tzinfo=UTC)
    end = dt.datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    assert compute_duration_seconds(start, end) == 14400


def test_sub_second_remainder_is_floored() -> None:
    start = dt.datetime(2024, 1, 15, 8, 0, tzinfo=UTC)
    end = start + dt.timedelta(seconds=90, milliseconds=999)
    assert compute_duration_seconds(start, end) == 90


def test_end_before_start_is_negative() -> None:
    start = dt.datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    end = dt.datetime(2024, 1, 15, 11, 0, tzinfo=UTC)
    assert compute_duration_seconds(start, end) == -3600


def test_negative_fraction_floors_away_from_zero() -> None:
    start = dt.datetime(2024, 1, 15, 12, 0, 0, 500000, tzinfo=UTC)
    end = dt.datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    assert compute_duration_seconds(start, end) == -1


def test_zero_length_window() -> None:
    moment = dt.datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    assert compute_duration_seconds(moment, moment) == 0


def test_mixed_offsets_compare_absolute_instants() -> None:
    start = dt.datetime(2024, 1, 15, 8, 0, tzinfo=UTC)
    end = dt.datetime(2024, 1, 15, 10, 0, tzinfo=dt.timezone(dt.timedelta(hours=1)))
    assert compute_duration_seconds(start, end) == 3600
