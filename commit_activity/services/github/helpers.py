"""
GitHub API helper utilities.

Provides rate limit handling, error response processing and pagination
link parsing shared by all GitHub API calls.
"""

import logging
from dataclasses import dataclass

import httpx

from commit_activity.services.github.exceptions import (
    GitHubAPIError,
    GitHubAuthenticationError,
)

logger = logging.getLogger(__name__)


def _int_header(response: httpx.Response, name: str) -> int | None:
    value = response.headers.get(name)
    if value is None or not value.strip().isdigit():
        return None
    return int(value)


@dataclass(frozen=True)
class RateLimitInfo:
    """Primary rate limit state reported on a GitHub response."""

    remaining: int | None
    reset_timestamp: int | None  # Unix seconds

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RateLimitInfo":
        return cls(
            remaining=_int_header(response, "X-RateLimit-Remaining"),
            reset_timestamp=_int_header(response, "X-RateLimit-Reset"),
        )

    @property
    def is_exhausted(self) -> bool:
        return self.remaining == 0


def handle_error_response(response: httpx.Response, context: str) -> None:
    """
    Handle common error responses from GitHub API.

    Args:
        response: The HTTP response from GitHub API
        context: Resource description for error messages (e.g. "owner/repo")

    Raises:
        GitHubAuthenticationError: If the token was rejected (401)
        GitHubAPIError: For authorization, not-found, or other API errors
    """
    if response.status_code == 200:
        return

    rate_info = RateLimitInfo.from_response(response)

    if response.status_code == 401:
        raise GitHubAuthenticationError()
    elif response.status_code == 404:
        raise GitHubAPIError(f"Repository or resource not found: {context}", 404)
    elif response.status_code == 409:
        # GitHub answers 409 when listing commits of an empty repository
        raise GitHubAPIError(f"Repository is empty: {context}", 409)
    elif response.status_code == 403:
        if rate_info.is_exhausted:
            raise GitHubAPIError(
                f"GitHub API rate limit exceeded while fetching {context}",
                403,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        raise GitHubAPIError(f"GitHub API forbidden: {context}", 403)
    else:
        raise GitHubAPIError(
            f"GitHub API error: {response.status_code}", response.status_code
        )


def next_page_url(response: httpx.Response) -> str | None:
    """Return the rel="next" URL from the Link header, or None on the last page."""
    next_link = response.links.get("next")
    if not next_link:
        return None
    return next_link.get("url")
