"""
GitHub service package.

Usage: `from commit_activity.services.github import GitHubClient, CommitRecord`

Module structure:
- client.py: Authenticated read operations with transparent pagination
- http_client.py: Shared pooled httpx client
- helpers.py: Rate limit handling, error mapping, Link header parsing
- types.py: Data types for API responses
- exceptions.py: Custom exceptions
"""

from commit_activity.services.github.client import GitHubClient
from commit_activity.services.github.exceptions import (
    GitHubAPIError,
    GitHubAuthenticationError,
)
from commit_activity.services.github.helpers import RateLimitInfo, handle_error_response
from commit_activity.services.github.http_client import close_github_client
from commit_activity.services.github.types import CommitRecord, GitHubRepo

__all__ = [
    # Client
    "GitHubClient",
    # HTTP client lifecycle
    "close_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "GitHubAuthenticationError",
    # Types
    "CommitRecord",
    "GitHubRepo",
]
