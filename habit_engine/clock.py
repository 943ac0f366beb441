"""Calendar dates in the deployment's reference time zone."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from habit_engine.config import Settings, load_settings


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Clock:
    """Injectable source of "today" for parsing and weekly summaries.

    ``week_starts_on`` follows ``date.weekday()`` numbering (0 = Monday,
    6 = Sunday).
    """

    def __init__(self, tz: str, now_fn: Optional[Callable[[], datetime]] = None, week_starts_on: int = 6):
        self.tz = ZoneInfo(tz)
        self.week_starts_on = week_starts_on
        self._now_fn = now_fn or _utc_now

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Clock":
        settings = settings or load_settings()
        return cls(settings.timezone, week_starts_on=settings.week_starts_on)

    def now(self) -> datetime:
        current = self._now_fn()
        if current.tzinfo is None:
            raise ValueError("Clock time source must return timezone-aware datetimes")
        return current.astimezone(self.tz)

    def local_date(self) -> date:
        return self.now().date()

    def today(self) -> str:
        return self.local_date().isoformat()

    def yesterday(self) -> str:
        return (self.local_date() - timedelta(days=1)).isoformat()

    def tomorrow(self) -> str:
        return (self.local_date() + timedelta(days=1)).isoformat()

    def week_start(self) -> str:
        current = self.local_date()
        offset = (current.weekday() - self.week_starts_on) % 7
        return (current - timedelta(days=offset)).isoformat()


class FixedClock(Clock):
    """Clock pinned to noon of one local calendar day."""

    def __init__(self, day: str, tz: str = "Pacific/Honolulu", week_starts_on: int = 6):
        zone = ZoneInfo(tz)
        pinned = datetime.combine(date.fromisoformat(day), time(12, 0), tzinfo=zone)
        super().__init__(tz, now_fn=lambda: pinned, week_starts_on=week_starts_on)


def default_clock() -> Clock:
    return Clock.from_settings()
