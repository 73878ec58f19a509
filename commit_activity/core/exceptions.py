class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""


class MalformedInputError(ValueError):
    """Raised when a hex string cannot be decoded into bytes."""


class DecryptionError(Exception):
    """Raised when an encrypted token cannot be decrypted.

    The message never contains key, IV or plaintext material.
    """
