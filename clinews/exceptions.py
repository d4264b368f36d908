from __future__ import annotations

from typing import Optional


class NewsApiError(Exception):
    """Base class for every error raised by clinews."""


class TransportError(NewsApiError):
    """Raised when the HTTP request cannot be completed (network, DNS, timeout)."""


class UrlParseError(NewsApiError):
    """Raised when the request URL cannot be built from the base URL."""


class ParseError(NewsApiError):
    """Raised when a response body does not match the expected envelope."""


class ConfigError(NewsApiError):
    """Raised when required configuration is missing or invalid."""


class ApiError(NewsApiError):
    """Raised when the API answers with a non-"ok" status."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(f"Request failed: {message}")
        self.message = message
        self.code = code
