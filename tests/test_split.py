"""Tests for the splitter, the year/week corrector and the unit constants."""

import logging
import re

import pytest

from shortdur import BUCKETS, classify, correct_year_week, present, split
from shortdur.util import DAY, END_OF_YEAR, HOUR, MINUTE, WEEK, YEAR

_SPLIT_PATTERN = re.compile(r"^(\d+)([mhdwy])(\d+)([smhdw])$")
_UNIT_SECONDS = {"s": 1.0, "m": MINUTE, "h": HOUR, "d": DAY, "w": WEEK, "y": YEAR}


def test_unit_constants() -> None:
    assert MINUTE == 60
    assert HOUR == 3600
    assert DAY == 86400
    assert WEEK == 7 * DAY
    assert YEAR == 31556952
    assert END_OF_YEAR == YEAR - 51 * WEEK
    # 8.2425 days
    assert END_OF_YEAR == 712152


def test_split_floors_major_and_scales_minor() -> None:
    assert split(151.0, MINUTE, 1.0) == (2, 31.0)
    assert split(7630.0, HOUR, MINUTE) == (2, 430.0 / 60.0)
    assert split(11.0 * DAY, WEEK, DAY) == (1, 4.0)
    assert split(0.0, DAY, HOUR) == (0, 0.0)


def test_split_exact_multiple_has_no_remainder() -> None:
    assert split(3.0 * WEEK, WEEK, DAY) == (3, 0.0)


def test_corrector_leaves_regular_weeks_alone() -> None:
    assert correct_year_week(1, 0.0) == (1, 0.0)
    assert correct_year_week(1, 51.0) == (1, 51.0)
    assert correct_year_week(3, 21.4) == (3, 21.4)


def test_corrector_clamps_early_tail() -> None:
    weeks = 51.0 + (4.0 * DAY) / WEEK
    assert correct_year_week(1, weeks) == (1, 51.0)


def test_corrector_rolls_late_tail_into_next_year() -> None:
    weeks = 51.0 + (END_OF_YEAR * 0.75) / WEEK
    assert correct_year_week(1, weeks) == (2, 0.0)


def test_corrector_logs_decision(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="shortdur.split"):
        correct_year_week(1, 51.0 + (END_OF_YEAR * 0.75) / WEEK)
        correct_year_week(1, 51.2)
        correct_year_week(1, 20.0)

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert messages[0].startswith("Rounded")
    assert "year 2" in messages[0]
    assert messages[1].startswith("Clamped")


def _reconstruct(text: str) -> float:
    match = _SPLIT_PATTERN.match(text)
    assert match, text
    major, major_unit, minor, minor_unit = match.groups()
    return int(major) * _UNIT_SECONDS[major_unit] + int(minor) * _UNIT_SECONDS[
        minor_unit
    ]


def test_split_buckets_reconstruct_within_rounding() -> None:
    split_buckets = [bucket for bucket in BUCKETS if bucket.units is not None]
    lower = {
        bucket.kind: previous.threshold
        for previous, bucket in zip(BUCKETS, BUCKETS[1:])
    }
    for bucket in split_buckets:
        greater, lesser = bucket.units
        tolerance = lesser / 2
        if bucket.kind == "years_weeks":
            tolerance = END_OF_YEAR / 2
        step = (bucket.threshold - lower[bucket.kind]) / 997
        value = lower[bucket.kind]
        while value < bucket.threshold:
            major, minor = split(value, greater, lesser)
            assert major * greater + minor * lesser == pytest.approx(value)
            assert abs(_reconstruct(present(value)) - value) <= tolerance, value
            value += step


def test_week_field_never_exceeds_51() -> None:
    years_weeks = next(b for b in BUCKETS if b.kind == "years_weeks")
    value = next(b for b in BUCKETS if b.kind == "weeks").threshold
    while value < years_weeks.threshold:
        text = present(value)
        assert 0 <= int(text[2:4]) <= 51, (value, text)
        value += 3571.0


def test_week_field_near_every_year_end() -> None:
    for year in range(2, 11):
        for offset in (1.0, 3600.0, DAY, 4.0 * DAY, END_OF_YEAR / 2, 8.0 * DAY):
            value = year * YEAR - offset
            if classify(value).kind != "years_weeks":
                continue
            text = present(value)
            assert 0 <= int(text[2:4]) <= 51, (value, text)
