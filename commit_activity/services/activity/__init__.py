"""Weekly commit activity: fetch commits across repositories and bucket them by day."""

from commit_activity.services.activity.aggregator import (
    aggregate_commits_by_day,
    build_daily_buckets,
)
from commit_activity.services.activity.fetcher import fetch_all_commits, fetch_repo_commits
from commit_activity.services.activity.window import ActivityWindow

__all__ = [
    "ActivityWindow",
    "aggregate_commits_by_day",
    "build_daily_buckets",
    "fetch_all_commits",
    "fetch_repo_commits",
]
