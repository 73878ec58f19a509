"""Request and response models for the commit activity endpoint."""

from pydantic import BaseModel, Field, NonNegativeInt, StrictStr


class EncryptedTokenRequest(BaseModel):
    """Body of a commit activity request.

    Only the wire name `encryptedToken` is accepted.
    """

    encrypted_token: StrictStr = Field(alias="encryptedToken")  # Hex AES-CBC ciphertext


class DailyCount(BaseModel):
    """Number of commits authored on one UTC calendar day."""

    date: str  # YYYY-MM-DD
    count: NonNegativeInt
