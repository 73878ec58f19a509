from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_activity.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Token decryption - hex-encoded AES key (16/24/32 bytes) and CBC IV (16 bytes)
    # Both are required at startup; the app refuses to boot without them.
    encryption_key: str = ""
    encryption_iv: str = ""

    # GitHub
    github_api_url: str = "https://api.github.com"
    github_page_size: int = 100  # GitHub maximum for list endpoints

    # Activity report
    activity_window_days: int = 7
    # None = one concurrent commit fetch per repository, no cap; otherwise at least 1
    max_repo_concurrency: PositiveInt | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @property
    def key_material_configured(self) -> bool:
        """Check if both the encryption key and IV are set."""
        return bool(self.encryption_key) and bool(self.encryption_iv)

    def require_key_material(self) -> tuple[str, str]:
        """Return (key_hex, iv_hex), failing fast when either is missing."""
        missing = [
            name
            for name, value in (
                ("ENCRYPTION_KEY", self.encryption_key),
                ("ENCRYPTION_IV", self.encryption_iv),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required setting(s): {', '.join(missing)}")
        return self.encryption_key, self.encryption_iv


settings = Settings()
