"""Tests for cutoff and Nexus timestamp parsing."""

import datetime

import pytest

from nexus_reaper.exceptions import InvalidTimeFormat
from nexus_reaper.models.timestamps import (
    parse_nexus_time,
    resolve_cutoff,
    resolve_time,
)


def test_resolve_full_layout() -> None:
    t = resolve_time("2024-01-05 13:14:15")
    assert t.tzinfo is not None
    local = t.replace(tzinfo=None)
    assert local == datetime.datetime(2024, 1, 5, 13, 14, 15)


def test_resolve_date_is_local_midnight() -> None:
    """A bare date is the same instant as midnight on that date."""
    assert resolve_time("2024-01-05") == resolve_time("2024-01-05 00:00:00")
    assert resolve_time("2024-01-05").replace(
        tzinfo=None
    ) == datetime.datetime(2024, 1, 5)


@pytest.mark.parametrize(
    "text",
    ["", "yesterday", "2024/01/05", "2024-01-05T00:00:00", "05-01-2024"],
)
def test_resolve_rejects(text: str) -> None:
    with pytest.raises(InvalidTimeFormat):
        resolve_time(text)


def test_parse_nexus_time() -> None:
    t = parse_nexus_time("2015-03-18 15:18:53.0 UTC")
    assert t == datetime.datetime(2015, 3, 18, 15, 18, 53, tzinfo=datetime.UTC)


def test_parse_nexus_time_fractions() -> None:
    assert parse_nexus_time("2022-05-05 08:15:42.123 UTC").microsecond == (
        123000
    )
    assert parse_nexus_time("2022-05-05 08:15:42 UTC").microsecond == 0
    nanos = parse_nexus_time("2022-05-05 08:15:42.123456789 UTC")
    assert nanos.microsecond == 123456


@pytest.mark.parametrize(
    "text",
    [
        "2015-03-18 15:18:53.0",
        "2015-03-18T15:18:53.0 UTC",
        "2015-03-18 15:18:53.0 CET",
        "2015-02-30 15:18:53.0 UTC",
        "Thu Jun  1 10:00:00 2023",
    ],
)
def test_parse_nexus_time_rejects(text: str) -> None:
    with pytest.raises(InvalidTimeFormat):
        parse_nexus_time(text)


def test_cutoff_before() -> None:
    assert resolve_cutoff(before="2024-01-05") == resolve_time("2024-01-05")


def test_cutoff_age() -> None:
    now = datetime.datetime(2024, 3, 1, 12, 0, 0, 500, tzinfo=datetime.UTC)
    cutoff = resolve_cutoff(age=datetime.timedelta(days=30), now=now)
    expected = datetime.datetime(2024, 1, 31, 12, 0, 0, tzinfo=datetime.UTC)
    assert cutoff == expected


def test_cutoff_defaults_to_now() -> None:
    before = datetime.datetime.now(tz=datetime.UTC).replace(microsecond=0)
    cutoff = resolve_cutoff()
    after = datetime.datetime.now(tz=datetime.UTC)
    assert cutoff.microsecond == 0
    assert before <= cutoff <= after


def test_cutoff_both() -> None:
    with pytest.raises(ValueError, match="at most one"):
        resolve_cutoff(before="2024-01-05", age=datetime.timedelta(days=1))
