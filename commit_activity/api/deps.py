"""API dependencies."""

from fastapi import Request

from commit_activity.core.encryption import TokenDecryptor


def get_token_decryptor(request: Request) -> TokenDecryptor:
    """The decryptor built from settings at startup (see main.lifespan)."""
    decryptor: TokenDecryptor = request.app.state.token_decryptor
    return decryptor
