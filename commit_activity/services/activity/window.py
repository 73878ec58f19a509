"""The trailing time window an activity report covers."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta


@dataclass(frozen=True)
class ActivityWindow:
    """A fixed-length interval ending at a single "now" instant.

    Computed once per request and shared by the commit fetch (as the
    `since` cutoff) and the daily bucketing, so both see the same boundary.
    """

    since: datetime
    until: datetime

    @classmethod
    def trailing(cls, days: int = 7, now: datetime | None = None) -> "ActivityWindow":
        """Window covering the `days` days before `now` (default: current UTC time)."""
        if days < 0:
            raise ValueError(f"Window length must be non-negative, got {days}")
        until = (now or datetime.now(UTC)).astimezone(UTC)
        return cls(since=until - timedelta(days=days), until=until)

    def calendar_days(self) -> list[date]:
        """Every UTC calendar date touched by the window, ascending."""
        first = self.since.date()
        last = self.until.date()
        return [first + timedelta(days=i) for i in range((last - first).days + 1)]
