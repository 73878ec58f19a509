"""Bucket commit dates into a contiguous per-day series."""

from collections.abc import Iterable
from datetime import UTC

from commit_activity.schemas.activity import DailyCount
from commit_activity.services.activity.window import ActivityWindow
from commit_activity.services.github.types import CommitRecord


def build_daily_buckets(window: ActivityWindow) -> dict[str, int]:
    """Zeroed counts for every day in the window, keyed YYYY-MM-DD, ascending."""
    return {day.strftime("%Y-%m-%d"): 0 for day in window.calendar_days()}


def aggregate_commits_by_day(
    commits: Iterable[CommitRecord],
    window: ActivityWindow,
) -> list[DailyCount]:
    """
    Count commits per UTC calendar day across the window.

    Every day in the window appears exactly once, including days with no
    commits. Commits without a date, or dated outside the window, are skipped.

    Args:
        commits: Commit records from any number of repositories, any order
        window: The same window the commits were fetched with

    Returns:
        DailyCount entries sorted ascending by date
    """
    buckets = build_daily_buckets(window)

    for commit in commits:
        if commit.date is None:
            continue
        moment = commit.date
        if moment.tzinfo is not None:
            moment = moment.astimezone(UTC)
        day = moment.strftime("%Y-%m-%d")
        if day in buckets:
            buckets[day] += 1

    return [DailyCount(date=day, count=count) for day, count in sorted(buckets.items())]
