"""
Shared HTTP client for GitHub API operations.

Provides a singleton AsyncClient with connection pooling for all GitHub API calls.
The client carries the configured API root and the headers every GitHub request
needs. Auth headers are passed per-request, so one client serves every caller's token.
"""

import logging

import httpx

from commit_activity.config import settings

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "commit-activity-api"

# Module-level singleton client
_client: httpx.AsyncClient | None = None


def build_github_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Build an AsyncClient configured for the GitHub REST API.

    Args:
        transport: Optional transport override (tests route to an in-memory API)
    """
    return httpx.AsyncClient(
        base_url=settings.github_api_url,
        headers={
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": USER_AGENT,
        },
        timeout=httpx.Timeout(30.0, connect=5.0),
        http2=True,
        transport=transport,
    )


def get_github_client() -> httpx.AsyncClient:
    """
    Get or create the shared HTTP client for GitHub API calls.

    Returns:
        Shared httpx.AsyncClient configured for GitHub API
    """
    global _client
    if _client is None or _client.is_closed:
        _client = build_github_client()
        logger.debug(f"Created GitHub HTTP client for {settings.github_api_url}")
    return _client


async def close_github_client() -> None:
    """
    Close the shared HTTP client.

    Call on app shutdown for graceful termination.
    """
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed GitHub HTTP client")
