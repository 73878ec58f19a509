"""Decryption of caller-supplied GitHub tokens.

Tokens arrive hex-encoded and encrypted with AES in CBC mode, PKCS#7 padded.
The key and IV are process-wide settings (hex), decoded once at startup.
The key length selects AES-128/192/256.

Generate key material:
    python -c "import secrets; print(secrets.token_hex(32), secrets.token_hex(16))"
"""

import logging
from dataclasses import dataclass

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from commit_activity.config import Settings
from commit_activity.core.exceptions import (
    ConfigurationError,
    DecryptionError,
    MalformedInputError,
)
from commit_activity.core.hex import decode_hex, encode_hex

logger = logging.getLogger(__name__)

AES_KEY_SIZES = (16, 24, 32)
IV_SIZE = 16
BLOCK_SIZE_BITS = 128


@dataclass(frozen=True, repr=False)
class KeyMaterial:
    """Raw AES key and CBC initialization vector."""

    key: bytes
    iv: bytes

    def __repr__(self) -> str:
        return f"KeyMaterial(key=<{len(self.key)} bytes>, iv=<{len(self.iv)} bytes>)"

    @classmethod
    def from_hex(cls, key_hex: str, iv_hex: str) -> "KeyMaterial":
        """
        Decode hex key material and validate sizes.

        Raises:
            ConfigurationError: If either value is missing, not hex, or the
                wrong size for AES-CBC
        """
        if not key_hex or not iv_hex:
            raise ConfigurationError("Encryption key and IV are both required")
        try:
            key = decode_hex(key_hex)
            iv = decode_hex(iv_hex)
        except MalformedInputError as e:
            raise ConfigurationError(f"Invalid key material: {e}") from e

        if len(key) not in AES_KEY_SIZES:
            raise ConfigurationError(
                f"Encryption key must be 16, 24 or 32 bytes, got {len(key)}"
            )
        if len(iv) != IV_SIZE:
            raise ConfigurationError(f"Encryption IV must be {IV_SIZE} bytes, got {len(iv)}")
        return cls(key=key, iv=iv)


class TokenDecryptor:
    """Decrypts (and, for clients and tooling, encrypts) bearer tokens.

    Holds the key material injected at construction; never reads the
    environment itself.
    """

    def __init__(self, key_material: KeyMaterial) -> None:
        self._key_material = key_material

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenDecryptor":
        """Build a decryptor from application settings, failing fast."""
        key_hex, iv_hex = settings.require_key_material()
        key_material = KeyMaterial.from_hex(key_hex, iv_hex)
        logger.info(f"Token decryption configured (AES-{len(key_material.key) * 8}-CBC)")
        return cls(key_material)

    def _cipher(self) -> Cipher:
        return Cipher(
            algorithms.AES(self._key_material.key),
            modes.CBC(self._key_material.iv),
        )

    def decrypt(self, encrypted_token: str) -> str:
        """
        Decrypt a hex-encoded ciphertext into the plaintext token.

        Args:
            encrypted_token: Hex-encoded AES-CBC ciphertext

        Returns:
            The plaintext token

        Raises:
            DecryptionError: On malformed hex, a partial block, bad padding,
                non-UTF-8 output, or output that cannot be a bearer token
                (which is how a wrong key or IV shows up)
        """
        try:
            ciphertext = decode_hex(encrypted_token)
        except MalformedInputError as e:
            raise DecryptionError(f"Encrypted token is not valid hex: {e}") from e

        if len(ciphertext) % (BLOCK_SIZE_BITS // 8):
            raise DecryptionError("Encrypted token is not a whole number of AES blocks")

        decryptor = self._cipher().decryptor()
        unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
        try:
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            raw = unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise DecryptionError("Encrypted token has invalid padding") from e

        try:
            token = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError("Decrypted token is not valid UTF-8") from e

        if not token or not token.isprintable():
            raise DecryptionError("Decrypted token is not a usable credential")
        return token

    def encrypt(self, token: str) -> str:
        """Encrypt a plaintext token into hex-encoded AES-CBC ciphertext."""
        padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
        padded = padder.update(token.encode("utf-8")) + padder.finalize()

        encryptor = self._cipher().encryptor()
        return encode_hex(encryptor.update(padded) + encryptor.finalize())


def decrypt_token(encrypted_token: str, key_hex: str, iv_hex: str) -> str:
    """
    Decrypt a single token with explicit hex key material.

    Raises:
        DecryptionError: If the key material is unusable or decryption fails
    """
    try:
        key_material = KeyMaterial.from_hex(key_hex, iv_hex)
    except ConfigurationError as e:
        raise DecryptionError(str(e)) from e
    return TokenDecryptor(key_material).decrypt(encrypted_token)
