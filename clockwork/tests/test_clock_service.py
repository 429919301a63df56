"""Formatting rules of the clock service."""
from __future__ import annotations

import re
from datetime import datetime, timedelta

import pytest

from clockwork.logic.clock_service import ClockService, format_time

_RE_24H = re.compile(r"^(\d{2}):(\d{2}):(\d{2})$")
_RE_12H = re.compile(r"^(\d{2}):(\d{2}):(\d{2}) (AM|PM)$")


def _every_hour():
    start = datetime(2024, 3, 10, 0, 7, 9)
    return [start + timedelta(hours=h, minutes=h) for h in range(24)]


def test_afternoon_in_both_formats() -> None:
    moment = datetime(2024, 5, 1, 14, 40, 15)
    assert format_time(moment, use_12h=False) == "14:40:15"
    assert format_time(moment, use_12h=True) == "02:40:15 PM"


def test_midnight_is_twelve_am() -> None:
    assert format_time(datetime(2024, 5, 1, 0, 5, 9), use_12h=True) == "12:05:09 AM"
    assert format_time(datetime(2024, 5, 1, 0, 5, 9), use_12h=False) == "00:05:09"


def test_noon_is_twelve_pm() -> None:
    assert format_time(datetime(2024, 5, 1, 12, 0, 0), use_12h=True) == "12:00:00 PM"


@pytest.mark.parametrize("moment", _every_hour())
def test_hour_ranges_and_suffix(moment: datetime) -> None:
    h24, m24, s24 = _RE_24H.match(format_time(moment, use_12h=False)).groups()
    match = _RE_12H.match(format_time(moment, use_12h=True))
    assert match is not None
    h12, m12, s12, suffix = match.groups()

    assert 0 <= int(h24) <= 23
    assert 1 <= int(h12) <= 12
    assert (m12, s12) == (m24, s24)
    assert suffix == ("AM" if moment.hour < 12 else "PM")

    # Recover the 24h hour from the 12h rendering
    recovered = int(h12) % 12 + (12 if suffix == "PM" else 0)
    assert recovered == int(h24) == moment.hour


def test_service_uses_injected_clock() -> None:
    svc = ClockService(now_provider=lambda: datetime(2024, 1, 1, 23, 59, 59))
    assert svc.format(use_12h=True) == "11:59:59 PM"
    assert svc.format(use_12h=False) == "23:59:59"


def test_explicit_moment_wins_over_clock() -> None:
    svc = ClockService(now_provider=lambda: datetime(2024, 1, 1, 1, 0, 0))
    assert svc.format(False, datetime(2024, 1, 1, 9, 8, 7)) == "09:08:07"


def test_timezone_is_applied() -> None:
    svc = ClockService("UTC")
    assert svc.timezone is not None
    assert svc.now().utcoffset() == timedelta(0)


def test_unknown_timezone_falls_back_to_local(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        svc = ClockService("Nowhere/Atlantis")
    assert svc.timezone is None
    assert svc.now().tzinfo is None
    assert "Nowhere/Atlantis" in caplog.text
