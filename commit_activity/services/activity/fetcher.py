"""Collect commit records across every repository a user owns."""

import asyncio
import logging

from commit_activity.services.activity.window import ActivityWindow
from commit_activity.services.github.client import GitHubClient
from commit_activity.services.github.exceptions import GitHubAPIError
from commit_activity.services.github.types import CommitRecord, GitHubRepo

logger = logging.getLogger(__name__)


async def fetch_repo_commits(
    client: GitHubClient,
    owner: str,
    repo: GitHubRepo,
    window: ActivityWindow,
) -> list[CommitRecord]:
    """
    Fetch one repository's commits since the window start.

    Failures are contained here: the repository contributes no commits
    and the error is logged, so one inaccessible repository can't sink
    the whole report.
    """
    try:
        return await client.list_commits(owner, repo.name, since=window.since)
    except GitHubAPIError as e:
        if e.is_rate_limited:
            logger.warning(
                f"Rate limited fetching commits for {owner}/{repo.name}, "
                f"limit resets at {e.rate_limit_reset}"
            )
        else:
            logger.warning(f"Error fetching commits for {owner}/{repo.name}: {e}")
        return []
    except Exception as e:
        logger.warning(f"Error fetching commits for {owner}/{repo.name}: {e}")
        return []


async def fetch_all_commits(
    client: GitHubClient,
    window: ActivityWindow,
    max_concurrency: int | None = None,
) -> list[CommitRecord]:
    """
    Fetch the authenticated user's commits across all owned repositories.

    Resolves the user, lists their repositories, then fetches each
    repository's commits concurrently and flattens the results.

    Args:
        client: GitHub client authenticated as the user
        window: Shared cutoff; every repository is queried with window.since
        max_concurrency: Optional cap on simultaneous repository fetches.
            None issues one fetch per repository at once.

    Returns:
        Commit records from every repository, in no particular order

    Raises:
        GitHubAuthenticationError: If the token is invalid or expired
        GitHubAPIError: If the user or repository list can't be fetched
    """
    user = await client.get_authenticated_user()
    login: str = user["login"]

    repos = await client.list_user_repos()
    logger.info(f"Fetching commits for {len(repos)} repositories of {login}")

    if max_concurrency is not None:
        semaphore = asyncio.Semaphore(max_concurrency)

        async def fetch_with_limit(repo: GitHubRepo) -> list[CommitRecord]:
            async with semaphore:
                return await fetch_repo_commits(client, repo.owner or login, repo, window)

        tasks = [fetch_with_limit(repo) for repo in repos]
    else:
        tasks = [fetch_repo_commits(client, repo.owner or login, repo, window) for repo in repos]

    per_repo = await asyncio.gather(*tasks)
    return [commit for commits in per_repo for commit in commits]
