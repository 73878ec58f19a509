"""Hex string <-> bytes conversion for key material and ciphertexts."""

import re

from commit_activity.core.exceptions import MalformedInputError

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def decode_hex(value: str) -> bytes:
    """
    Decode a hex string into raw bytes, two characters per byte.

    Unlike bytes.fromhex, whitespace is rejected.

    Raises:
        MalformedInputError: If the value is empty, has odd length, or
            contains anything other than hex digits
    """
    if not isinstance(value, str) or not value:
        raise MalformedInputError("Hex input is empty")
    if len(value) % 2:
        raise MalformedInputError(f"Hex input has odd length ({len(value)})")
    if not _HEX_RE.fullmatch(value):
        raise MalformedInputError("Hex input contains non-hex characters")
    return bytes.fromhex(value)


def encode_hex(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return data.hex()
