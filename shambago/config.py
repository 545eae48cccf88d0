"""
Core configuration.

Environment-based settings using Pydantic v2.
"""

from pydantic_settings import BaseSettings
from pydantic import ConfigDict, Field


class Settings(BaseSettings):
    # --------------------
    # Storage keys
    # --------------------
    USER_STORAGE_KEY: str = Field(
        default="currentUser",
        min_length=1,
        description="Key holding the serialized user record",
    )
    LANGUAGE_STORAGE_KEY: str = Field(
        default="AppLanguage",
        min_length=1,
        description="Key holding the selected UI language",
    )
    DEFAULT_LANGUAGE: str = "en"

    # --------------------
    # Cosmetic delays
    # --------------------
    CHAT_REPLY_DELAY_SECONDS: float = Field(default=1.5, ge=0)
    SCAN_DELAY_SECONDS: float = Field(default=2.0, ge=0)

    model_config = ConfigDict(
        env_file=".env",
        env_prefix="SHAMBAGO_",
        extra="ignore",
    )


settings = Settings()
