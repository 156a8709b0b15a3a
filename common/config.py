import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging, defaulting to the configured LOG_LEVEL."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper())
