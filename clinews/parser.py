from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from .exceptions import ApiError, ParseError
from .models import Article, NewsApiResponse

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

# Error codes documented by NewsAPI. Add entries here to cover new codes.
ERROR_MESSAGES: Dict[str, str] = {
    "apiKeyDisabled": "Your API key has been disabled.",
    "apiKeyExhausted": "Your API key has no more requests available.",
    "apiKeyInvalid": "Your API key hasn't been entered correctly.",
    "apiKeyMissing": "Your API key is missing from the request.",
    "parameterInvalid": "You've included a parameter in your request which is currently not supported.",
    "parametersMissing": "Required parameters are missing from the request.",
    "rateLimited": "You have been rate limited.",
    "sourcesTooMany": "You have requested too many sources in a single request.",
    "sourceDoesNotExist": "You have requested a source which does not exist.",
    "unexpectedError": "This shouldn't happen, and if it does then it's our fault, not yours.",
}


def error_for_code(code: Optional[str]) -> ApiError:
    """Map an API error code to an ApiError. Unknown or missing codes are generic."""
    message = ERROR_MESSAGES.get(code, UNKNOWN_ERROR) if code else UNKNOWN_ERROR
    return ApiError(message, code=code)


def _parse_article(raw: Any, index: int) -> Article:
    if not isinstance(raw, dict):
        raise ParseError(f"Article #{index} is not an object")
    values = {}
    for key in ("title", "url", "publishedAt"):
        val = raw.get(key)
        if not isinstance(val, str):
            raise ParseError(f"Article #{index} has no string field '{key}'")
        values[key] = val
    return Article(title=values["title"], url=values["url"], published_at=values["publishedAt"])


def parse_envelope(raw_body: Union[str, bytes]) -> NewsApiResponse:
    """
    Deserialize a raw response body into a NewsApiResponse.

    `articles` is required only when status is "ok"; error responses omit it.
    Raises ParseError when the body does not match the envelope shape.
    """
    try:
        data = json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Article parsing failed: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ParseError("Article parsing failed: response is not a JSON object")

    status = data.get("status")
    if not isinstance(status, str):
        raise ParseError("Article parsing failed: missing 'status'")

    code = data.get("code")
    if code is not None and not isinstance(code, str):
        raise ParseError("Article parsing failed: 'code' is not a string")

    raw_articles = data.get("articles")
    articles: List[Article] = []
    if status == "ok" or raw_articles is not None:
        if not isinstance(raw_articles, list):
            raise ParseError("Article parsing failed: 'articles' is not a list")
        articles = [_parse_article(a, i) for i, a in enumerate(raw_articles)]

    return NewsApiResponse(status=status, articles=articles, code=code)


def map_response(raw_body: Union[str, bytes]) -> List[Article]:
    """Return the articles of an "ok" envelope, or raise the ApiError it describes."""
    response = parse_envelope(raw_body)
    if response.is_ok:
        return response.articles
    logger.debug("API returned status=%s code=%s", response.status, response.code)
    raise error_for_code(response.code)
