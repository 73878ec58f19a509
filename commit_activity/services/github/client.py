"""
GitHub API read operations used by the activity report.

Provides the three calls the report needs, each authenticated with the
caller's bearer token:
- The authenticated user's identity
- Repositories owned by that user (paginated)
- Commits in a repository since an instant (paginated)
"""

import logging
from datetime import UTC, datetime
from typing import Any

from commit_activity.config import settings
from commit_activity.services.github.helpers import handle_error_response, next_page_url
from commit_activity.services.github.http_client import get_github_client
from commit_activity.services.github.types import CommitRecord, GitHubRepo

logger = logging.getLogger(__name__)


def format_since(instant: datetime) -> str:
    """Format an instant as GitHub's ISO-8601 UTC form, e.g. 2026-10-10T09:30:00.000Z."""
    return instant.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_github_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp into an aware UTC datetime, or None."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Ignoring unparseable commit date: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class GitHubClient:
    """
    Authenticated client for the GitHub REST API.

    One instance per decrypted token. Uses the shared HTTP client singleton
    for connection pooling; the token only lives in this instance's headers.
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        page_size: int | None = None,
    ):
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.page_size = min(page_size or settings.github_page_size, 100)
        # Accept, API version and User-Agent come from the shared client
        self._headers = {"Authorization": f"Bearer {token}"}

    def __repr__(self) -> str:
        return f"GitHubClient(base_url={self.base_url!r})"

    async def _paginate(
        self,
        path: str,
        params: dict[str, str | int],
        context: str,
        extra_headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch every page of a list endpoint by following Link rel="next".

        Args:
            path: API path, e.g. "/user/repos"
            params: Query parameters for the first page
            context: Resource description for error messages
            extra_headers: Headers added to every page request

        Returns:
            All items across all pages, in API order
        """
        client = get_github_client()
        headers = {**self._headers, **(extra_headers or {})}

        items: list[dict[str, Any]] = []
        url: str | None = f"{self.base_url}{path}"
        request_params: dict[str, str | int] | None = {**params, "per_page": self.page_size}

        while url:
            response = await client.get(url, headers=headers, params=request_params)
            handle_error_response(response, context)

            items.extend(response.json())

            # The next link already carries every query parameter
            url = next_page_url(response)
            request_params = None

        return items

    async def get_authenticated_user(self) -> dict[str, Any]:
        """
        Fetch authenticated user info.

        Returns:
            Dict with user info (login, name, avatar_url, etc.)

        Raises:
            GitHubAuthenticationError: If the token is invalid or expired
        """
        client = get_github_client()
        response = await client.get(
            f"{self.base_url}/user",
            headers=self._headers,
            timeout=10.0,
        )

        handle_error_response(response, "authenticated user")

        result: dict[str, Any] = response.json()
        return result

    async def list_user_repos(self) -> list[GitHubRepo]:
        """
        List every repository owned by the authenticated user.

        Ordered by most recently pushed first.
        """
        data = await self._paginate(
            "/user/repos",
            params={
                "affiliation": "owner",
                "sort": "pushed",
                "direction": "desc",
            },
            context="user repositories",
        )
        return [self._normalize_repo(r) for r in data]

    async def list_commits(
        self,
        owner: str,
        repo: str,
        since: datetime,
    ) -> list[CommitRecord]:
        """
        List every commit in a repository since an instant.

        Args:
            owner: Repository owner
            repo: Repository name
            since: Only commits after this instant are returned

        Returns:
            CommitRecords carrying the author date of each commit
        """
        data = await self._paginate(
            f"/repos/{owner}/{repo}/commits",
            params={"since": format_since(since)},
            context=f"{owner}/{repo}",
            # Empty validator bypasses conditional-request caching
            extra_headers={"If-None-Match": ""},
        )
        return [self._normalize_commit(c) for c in data]

    @staticmethod
    def _normalize_repo(data: dict[str, Any]) -> GitHubRepo:
        """Convert GitHub API response to GitHubRepo dataclass."""
        owner_data = data.get("owner") or {}
        full_name = data.get("full_name") or ""
        owner = owner_data.get("login") or full_name.split("/", 1)[0]
        return GitHubRepo(
            name=data["name"],
            full_name=full_name or f"{owner}/{data['name']}",
            owner=owner,
            pushed_at=data.get("pushed_at"),
        )

    @staticmethod
    def _normalize_commit(data: dict[str, Any]) -> CommitRecord:
        """Reduce a commit payload to its sha and author date."""
        author = (data.get("commit") or {}).get("author") or {}
        return CommitRecord(
            sha=data.get("sha"),
            date=parse_github_timestamp(author.get("date")),
        )
