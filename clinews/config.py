"""
Configuration for clinews.

Values come from the environment, after loading an optional .env file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigError
from .request import BASE_URL
from .transport import DEFAULT_TIMEOUT


@dataclass
class Settings:
    api_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    def validate(self) -> "Settings":
        if not self.api_key:
            raise ConfigError("API_KEY environment variable is not set. Check your .env file.")
        if self.timeout <= 0:
            raise ConfigError(f"NEWSAPI_TIMEOUT must be positive, got {self.timeout}")
        return self


class Config:
    """Environment variable names and loader."""

    API_KEY_VAR = "API_KEY"
    BASE_URL_VAR = "NEWSAPI_BASE_URL"
    TIMEOUT_VAR = "NEWSAPI_TIMEOUT"
    LOG_LEVEL_VAR = "LOG_LEVEL"

    @classmethod
    def load(cls, dotenv: bool = True) -> Settings:
        """Read settings from the environment (and .env unless dotenv=False) and validate them."""
        if dotenv:
            load_dotenv()

        raw_timeout = os.getenv(cls.TIMEOUT_VAR, str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"{cls.TIMEOUT_VAR} must be a number, got {raw_timeout!r}") from e

        settings = Settings(
            api_key=os.getenv(cls.API_KEY_VAR, "").strip(),
            base_url=os.getenv(cls.BASE_URL_VAR) or BASE_URL,
            timeout=timeout,
            log_level=os.getenv(cls.LOG_LEVEL_VAR, "WARNING"),
        )
        return settings.validate()
