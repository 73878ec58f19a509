"""Root conftest — shared fixtures for all tests.

Provides:
- anyio backend selection for async tests
- Deterministic AES key material and a TokenDecryptor built from it
- A fake GitHub API installed as the shared HTTP client (no network)
"""

from __future__ import annotations

import httpx
import pytest

from commit_activity.core.encryption import KeyMaterial, TokenDecryptor
from commit_activity.services.github import http_client
from tests.helpers.github import FakeGitHub

# 32-byte key (AES-256) and 16-byte IV, hex encoded
KEY_HEX = "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
IV_HEX = "000102030405060708090a0b0c0d0e0f"

GITHUB_TOKEN = "ghp_test_token_1234567890abcdefABCDEF"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def key_material() -> KeyMaterial:
    return KeyMaterial.from_hex(KEY_HEX, IV_HEX)


@pytest.fixture
def token_decryptor(key_material: KeyMaterial) -> TokenDecryptor:
    return TokenDecryptor(key_material)


@pytest.fixture
async def fake_github():
    """Route the shared GitHub HTTP client to an in-memory fake API.

    Yields the FakeGitHub so tests can add repos, commits and failures.
    """
    fake = FakeGitHub(token=GITHUB_TOKEN)
    original = http_client._client
    http_client._client = http_client.build_github_client(
        transport=httpx.MockTransport(fake.handler)
    )
    try:
        yield fake
    finally:
        await http_client._client.aclose()
        http_client._client = original
