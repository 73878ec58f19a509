"""Exceptions raised by the GitHub API layer."""


class GitHubAPIError(Exception):
    """A GitHub request answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix seconds, set only when rate limited

    @property
    def is_rate_limited(self) -> bool:
        return self.rate_limit_reset is not None


class GitHubAuthenticationError(GitHubAPIError):
    """The bearer token was rejected (invalid, expired or revoked)."""

    def __init__(self, message: str = "Invalid or expired GitHub token"):
        super().__init__(message, status_code=401)
