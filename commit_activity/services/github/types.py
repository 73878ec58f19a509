"""Data types for GitHub API responses."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class GitHubRepo:
    """Normalized GitHub repository data."""

    name: str
    full_name: str
    owner: str
    pushed_at: str | None = None


@dataclass(frozen=True)
class CommitRecord:
    """A single commit, reduced to what activity aggregation needs."""

    sha: str | None
    date: datetime | None  # Author date in UTC; None when GitHub omits it
