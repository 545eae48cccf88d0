"""
Frontend configuration.

Loads frontend-specific environment variables only.
Safely ignores unrelated core environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import ConfigDict, Field


class Settings(BaseSettings):
    """
    Frontend application settings.

    Environment variables must be prefixed with:
        SHAMBAGO_

    Example:
        SHAMBAGO_STORAGE_SECRET=change-me
    """

    APP_TITLE: str = Field(default="ShambaGo", min_length=1)

    STORAGE_SECRET: str = Field(
        default="dev-secret",
        description="Secret used by NiceGUI to sign browser storage",
        min_length=1,
    )

    PORT: int = Field(default=8080, gt=0, lt=65536)

    # - env_prefix shared with the core services
    # - extra='ignore' skips core-only variables
    model_config = ConfigDict(
        env_file=".env",
        env_prefix="SHAMBAGO_",
        extra="ignore",
    )


settings = Settings()
