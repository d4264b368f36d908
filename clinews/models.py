from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Endpoint(str, Enum):
    """Named resource paths of the API."""

    TOP_HEADLINES = "top-headlines"

    def __str__(self) -> str:
        return self.value


class Country(str, Enum):
    """Countries accepted by the top-headlines endpoint."""

    US = "us"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Article:
    """
    A single headline as returned by the API.

    `published_at` keeps the raw ISO-8601 string (e.g. "2023-05-01T10:00:00Z").
    """
    title: str
    url: str
    published_at: str


@dataclass(frozen=True)
class NewsApiResponse:
    status: str
    articles: List[Article] = field(default_factory=list)
    code: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
