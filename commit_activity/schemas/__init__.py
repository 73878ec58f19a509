from commit_activity.schemas.activity import DailyCount, EncryptedTokenRequest

__all__ = ["DailyCount", "EncryptedTokenRequest"]
