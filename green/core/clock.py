"""
Source of "now" for the task engine.

Eligibility and recurrence math depend entirely on the current calendar
day, so every service takes a Clock instead of calling datetime.now().
"today" is the calendar day in the household's time zone (GARDEN_TIMEZONE).
"""
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from green.core.config import settings


class Clock:
    def __init__(self, tz: str | None = None):
        self.tz = ZoneInfo(tz or settings.GARDEN_TIMEZONE)

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().astimezone(self.tz).date()


class FrozenClock(Clock):
    """Clock pinned to a fixed instant, moved only by travel_to()."""

    def __init__(self, now: datetime, tz: str | None = None):
        super().__init__(tz)
        if now.tzinfo is None:
            now = now.replace(tzinfo=self.tz)
        self._now = now.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self._now

    @classmethod
    def on(cls, day: date, hour: int = 12, tz: str | None = None) -> "FrozenClock":
        """Freeze at local noon (by default) on the given calendar day."""
        return cls(datetime(day.year, day.month, day.day, hour), tz)

    def travel_to(self, day: date, hour: int = 12) -> None:
        self._now = datetime(day.year, day.month, day.day, hour, tzinfo=self.tz).astimezone(timezone.utc)


system_clock = Clock()
