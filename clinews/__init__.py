"""
clinews

A minimal client for the NewsAPI "top headlines" endpoint.

Core ideas:
- Input: API key, endpoint and country
- Process: build URL → GET (blocking or async) → map the JSON envelope
- Output: List[Article], or a NewsApiError subclass

Example
-------
from clinews import NewsApi, Endpoint, Country

api = NewsApi("my-key").endpoint(Endpoint.TOP_HEADLINES).country(Country.US)

for article in api.fetch():
    print(article.published_at, article.title, article.url)
"""
from .models import Article, Country, Endpoint, NewsApiResponse
from .client import NewsApi
from .exceptions import (
    ApiError,
    ConfigError,
    NewsApiError,
    ParseError,
    TransportError,
    UrlParseError,
)
from .parser import map_response, parse_envelope
from .request import build_url

from .version import __version__

__all__ = [
    "Article",
    "Country",
    "Endpoint",
    "NewsApiResponse",
    "NewsApi",
    "NewsApiError",
    "ApiError",
    "ConfigError",
    "ParseError",
    "TransportError",
    "UrlParseError",
    "build_url",
    "map_response",
    "parse_envelope",
]
