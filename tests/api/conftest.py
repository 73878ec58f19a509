"""API test fixtures — HTTP client against the ASGI app.

The token decryptor dependency is overridden with the test key material,
and the shared GitHub HTTP client is routed to the fake API.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def api_client(token_decryptor, fake_github):
    """HTTP client for the app, with startup-built dependencies overridden."""
    from commit_activity.api.deps import get_token_decryptor
    from commit_activity.main import app

    app.dependency_overrides[get_token_decryptor] = lambda: token_decryptor

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def encrypted_token(token_decryptor) -> str:
    """The fake API's valid token, encrypted the way clients send it."""
    from tests.conftest import GITHUB_TOKEN

    return token_decryptor.encrypt(GITHUB_TOKEN)
