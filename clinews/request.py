from __future__ import annotations

from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .exceptions import UrlParseError
from .models import Country, Endpoint

BASE_URL = "https://newsapi.org/v2"


def build_url(base_url: str, endpoint: Endpoint, country: Country) -> str:
    """
    Compose `{base_url}/{endpoint}?country={country}`.

    The endpoint is pushed as a new path segment and the query string is
    replaced by exactly one `country` parameter. Any fragment is dropped.

    Raises UrlParseError when base_url is not an absolute http(s) URL.
    """
    try:
        parts = urlsplit(base_url)
        # raises ValueError on an out-of-range or non-numeric port
        _ = parts.port
    except (TypeError, ValueError, AttributeError) as e:
        raise UrlParseError(f"Invalid base URL: {base_url!r} ({e})") from e

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise UrlParseError(f"Invalid base URL: {base_url!r}")
    # urlsplit silently strips tabs and newlines, so check the raw string too
    if any(c.isspace() for c in parts.netloc) or not base_url.isprintable():
        raise UrlParseError(f"Invalid host in base URL: {base_url!r}")

    path = parts.path.rstrip("/") + "/" + quote(str(endpoint), safe="")
    query = urlencode({"country": str(country)})
    return urlunsplit((parts.scheme, parts.netloc, path, query, ""))
