"""Encrypt a GitHub token for use with the commit activity endpoint.

Uses the same ENCRYPTION_KEY / ENCRYPTION_IV settings as the API, so the
output can be sent as the `encryptedToken` field.

Usage:
    python -m scripts.encrypt_token ghp_xxxxxxxxxxxx
    echo "$GITHUB_TOKEN" | python -m scripts.encrypt_token -
"""

from __future__ import annotations

import argparse
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Print the hex ciphertext of a token; returns the process exit code."""
    from commit_activity.config.settings import settings
    from commit_activity.core.encryption import TokenDecryptor
    from commit_activity.core.exceptions import ConfigurationError

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("token", help='GitHub token to encrypt, or "-" to read it from stdin')
    args = parser.parse_args(argv)

    token = sys.stdin.readline().strip() if args.token == "-" else args.token
    if not token:
        logger.error("No token given")
        return 1

    try:
        decryptor = TokenDecryptor.from_settings(settings)
    except ConfigurationError as e:
        logger.error(f"Cannot encrypt: {e}")
        return 1

    print(decryptor.encrypt(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())
