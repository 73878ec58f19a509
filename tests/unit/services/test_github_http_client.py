"""Unit tests for GitHub HTTP client and helpers.

Tests the shared HTTP client singleton, rate limit parsing,
Link header pagination and error response processing.
"""

from __future__ import annotations

import httpx
import pytest

from commit_activity.config import settings
from commit_activity.services.github.exceptions import (
    GitHubAPIError,
    GitHubAuthenticationError,
)
from commit_activity.services.github.helpers import (
    RateLimitInfo,
    handle_error_response,
    next_page_url,
)
from commit_activity.services.github.http_client import (
    GITHUB_API_VERSION,
    build_github_client,
    close_github_client,
    get_github_client,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a fake httpx.Response."""
    return httpx.Response(
        status_code=status_code,
        json=json_data,
        headers=headers or {},
    )


# ═══════════════════════════════════════════════════════════════════════════
# RateLimitInfo
# ═══════════════════════════════════════════════════════════════════════════


class TestRateLimitInfo:
    """Tests for rate limit header parsing."""

    def test_extracts_remaining_and_reset(self):
        resp = _make_response(
            headers={
                "X-RateLimit-Remaining": "42",
                "X-RateLimit-Reset": "1700000000",
            }
        )
        info = RateLimitInfo(resp)

        assert info.remaining == "42"
        assert info.reset_timestamp == 1700000000
        assert info.is_exhausted is False

    def test_detects_exhausted(self):
        resp = _make_response(
            headers={
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": "1700000000",
            }
        )
        assert RateLimitInfo.from_response(resp).is_exhausted is True

    def test_missing_headers(self):
        info = RateLimitInfo.from_response(_make_response(headers={}))

        assert info.remaining is None
        assert info.reset_timestamp is None
        assert info.is_exhausted is False

    def test_ignores_malformed_headers(self):
        resp = _make_response(
            headers={
                "X-RateLimit-Remaining": "lots",
                "X-RateLimit-Reset": "",
            }
        )
        info = RateLimitInfo.from_response(resp)

        assert info.remaining is None
        assert info.reset_timestamp is None
        assert info.is_exhausted is False
        assert info.is_exhausted is False


# ═══════════════════════════════════════════════════════════════════════════
# next_page_url
# ═══════════════════════════════════════════════════════════════════════════


class TestNextPageUrl:
    """Tests for following Link: rel="next" pagination."""

    def test_returns_next_link(self):
        resp = _make_response(
            headers={
                "Link": (
                    '<https://api.github.com/user/repos?page=2>; rel="next", '
                    '<https://api.github.com/user/repos?page=5>; rel="last"'
                )
            }
        )
        assert next_page_url(resp) == "https://api.github.com/user/repos?page=2"

    def test_last_page_has_no_next(self):
        resp = _make_response(
            headers={"Link": '<https://api.github.com/user/repos?page=1>; rel="first"'}
        )
        assert next_page_url(resp) is None

    def test_no_link_header(self):
        assert next_page_url(_make_response()) is None


# ═══════════════════════════════════════════════════════════════════════════
# handle_error_response
# ═══════════════════════════════════════════════════════════════════════════


class TestHandleErrorResponse:
    """Tests for centralized GitHub API error handling."""

    def test_200_does_nothing(self):
        handle_error_response(_make_response(status_code=200), "owner/repo")

    def test_401_raises_auth_error(self):
        with pytest.raises(GitHubAuthenticationError, match="Invalid or expired") as exc_info:
            handle_error_response(_make_response(status_code=401), "authenticated user")

        assert exc_info.value.status_code == 401

    def test_auth_error_is_api_error(self):
        with pytest.raises(GitHubAPIError):
            handle_error_response(_make_response(status_code=401), "owner/repo")

    def test_404_raises_not_found(self):
        with pytest.raises(GitHubAPIError, match="not found: owner/repo"):
            handle_error_response(_make_response(status_code=404), "owner/repo")

    def test_409_raises_empty_repository(self):
        with pytest.raises(GitHubAPIError, match="empty") as exc_info:
            handle_error_response(_make_response(status_code=409), "owner/repo")

        assert exc_info.value.status_code == 409

    def test_403_with_rate_limit_exhausted(self):
        resp = _make_response(
            status_code=403,
            headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )
        with pytest.raises(GitHubAPIError, match="rate limit") as exc_info:
            handle_error_response(resp, "owner/repo")

        assert exc_info.value.rate_limit_reset == 1700000000
        assert exc_info.value.is_rate_limited is True
        assert "owner/repo" in str(exc_info.value)

    def test_403_without_rate_limit_raises_forbidden(self):
        resp = _make_response(
            status_code=403,
            headers={"X-RateLimit-Remaining": "50"},
        )
        with pytest.raises(GitHubAPIError, match="forbidden") as exc_info:
            handle_error_response(resp, "owner/repo")

        assert exc_info.value.is_rate_limited is False

    def test_500_raises_generic_error(self):
        with pytest.raises(GitHubAPIError, match="500"):
            handle_error_response(_make_response(status_code=500), "owner/repo")


# ═══════════════════════════════════════════════════════════════════════════
# HTTP Client Singleton
# ═══════════════════════════════════════════════════════════════════════════


class TestGitHubHttpClient:
    """Tests for the shared HTTP client singleton."""

    @pytest.mark.anyio
    async def test_client_returns_async_client(self):
        import commit_activity.services.github.http_client as mod

        original = mod._client
        mod._client = None

        try:
            client = get_github_client()
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.connect == 5.0
            assert client.timeout.pool == 30.0
        finally:
            await close_github_client()
            mod._client = original

    @pytest.mark.anyio
    async def test_returns_same_instance(self):
        import commit_activity.services.github.http_client as mod

        original = mod._client
        mod._client = None

        try:
            a = get_github_client()
            b = get_github_client()
            assert a is b
        finally:
            await close_github_client()
            mod._client = original

    @pytest.mark.anyio
    async def test_close_then_get_creates_new_client(self):
        import commit_activity.services.github.http_client as mod

        original = mod._client
        mod._client = None

        try:
            first = get_github_client()
            await close_github_client()

            assert first.is_closed
            assert mod._client is None
            assert get_github_client() is not first
        finally:
            await close_github_client()
            mod._client = original

    @pytest.mark.anyio
    async def test_client_carries_configured_api_root_and_headers(self):
        import commit_activity.services.github.http_client as mod

        original = mod._client
        mod._client = None

        try:
            client = get_github_client()
            assert str(client.base_url).rstrip("/") == settings.github_api_url
            assert client.headers["Accept"] == "application/vnd.github+json"
            assert client.headers["X-GitHub-Api-Version"] == GITHUB_API_VERSION
            assert client.headers["User-Agent"] == "commit-activity-api"
            assert "Authorization" not in client.headers
        finally:
            await close_github_client()
            mod._client = original

    @pytest.mark.anyio
    async def test_build_with_transport_keeps_default_headers(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"login": "octocat"})

        async with build_github_client(transport=httpx.MockTransport(handler)) as client:
            await client.get("/user")

        assert seen[0].url == f"{settings.github_api_url}/user"
        assert seen[0].headers["X-GitHub-Api-Version"] == GITHUB_API_VERSION
