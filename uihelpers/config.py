"""Configuration management for uihelpers.

Uses Pydantic Settings so host applications can override limits and locale
defaults with ``UIHELPERS_*`` environment variables or a ``.env`` file.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UIHELPERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upload validation
    max_file_size: int = 10 * 1024 * 1024
    allowed_file_types: list[str] = ["image/jpeg", "image/jpg", "image/png"]

    # Locale defaults
    currency: str = "INR"
    currency_locale: str = "en_IN"
    date_locale: str = "en_US"

    log_level: str = "WARNING"

    @property
    def max_file_size_mb(self) -> int:
        """Upload limit in whole megabytes, for user-facing messages."""
        return self.max_file_size // (1024 * 1024)


settings = Settings()


def configure_logging(level: str | int | None = None) -> None:
    """Attach a basic stream handler to the package logger.

    The library itself only installs a ``NullHandler``; call this from an
    application or script that wants the validation messages on stderr.
    """
    logger = logging.getLogger("uihelpers")
    logger.setLevel(level if level is not None else settings.log_level.upper())
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
