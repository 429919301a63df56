"""
ClockService – timezone-aware clock formatting.
Separated from the view to keep responsibilities clean.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def format_time(moment: datetime, use_12h: bool) -> str:
    """
    Formats a single instant.

    12-hour output is "hh:mm:ss AM|PM" (hour 01-12), 24-hour output is
    "HH:mm:ss" (hour 00-23). The suffix is always uppercase English, whatever
    the process locale (strftime's %p is locale dependent).
    """
    if use_12h:
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{hour:02d}:{moment.minute:02d}:{moment.second:02d} {suffix}"
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


class ClockService:
    """Reads the wall clock (optionally in a fixed timezone) and formats it."""

    def __init__(self, timezone: str = "", now_provider: Optional[Callable[[], datetime]] = None) -> None:
        self._tz = self._resolve_timezone(timezone)
        self._now_provider = now_provider

    @staticmethod
    def _resolve_timezone(tz_name: str) -> Optional[ZoneInfo]:
        if not tz_name:
            return None
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone '{tz_name}', falling back to local time")
            return None

    @property
    def timezone(self) -> Optional[ZoneInfo]:
        return self._tz

    def now(self) -> datetime:
        if self._now_provider is not None:
            return self._now_provider()
        return datetime.now(self._tz)

    def format(self, use_12h: bool, moment: Optional[datetime] = None) -> str:
        return format_time(moment if moment is not None else self.now(), use_12h)
