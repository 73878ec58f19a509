"""
Commit activity endpoint: decrypt a caller's GitHub token and report
their commits per day over the trailing week.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from commit_activity.api.deps import get_token_decryptor
from commit_activity.config import settings
from commit_activity.core.encryption import TokenDecryptor
from commit_activity.schemas.activity import DailyCount, EncryptedTokenRequest
from commit_activity.services.activity import (
    ActivityWindow,
    aggregate_commits_by_day,
    fetch_all_commits,
)
from commit_activity.services.github import GitHubClient

router = APIRouter(tags=["activity"])
logger = logging.getLogger(__name__)

PROCESSING_ERROR_MESSAGE = "Error processing request"


@router.post("/commit-activity", response_model=list[DailyCount])
async def get_commit_activity(
    body: EncryptedTokenRequest,
    decryptor: TokenDecryptor = Depends(get_token_decryptor),
):
    """
    Report the token owner's commits per UTC day for the trailing window.

    Every day in the window is present, oldest first. Failures after the
    body is validated (decryption, authentication, GitHub errors) return
    an opaque 500; details go to the log only.
    """
    try:
        token = decryptor.decrypt(body.encrypted_token)
        github = GitHubClient(token)

        window = ActivityWindow.trailing(days=settings.activity_window_days)
        commits = await fetch_all_commits(
            github, window, max_concurrency=settings.max_repo_concurrency
        )
        return aggregate_commits_by_day(commits, window)
    except Exception:
        logger.exception(PROCESSING_ERROR_MESSAGE)
        return PlainTextResponse(
            PROCESSING_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
