from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from .exceptions import TransportError
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"clinews/{__version__}"


def _headers(api_key: str, user_agent: str) -> Dict[str, str]:
    # NewsAPI accepts the bare key in Authorization, no scheme prefix
    return {"Authorization": api_key, "User-Agent": user_agent}


def fetch(
    url: str,
    api_key: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Issue a blocking GET and return the response body as text.

    The body is returned whatever the HTTP status: the API reports failures
    inside its JSON envelope. Raises TransportError on network issues.
    Redirects are followed. A caller-supplied client is used as configured
    and left open.
    """
    headers = _headers(api_key, user_agent)
    try:
        if client is not None:
            resp = client.get(url, headers=headers, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as cx:
                resp = cx.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise TransportError(f"Failed fetching articles: {url} ({e})") from e

    logger.debug("GET %s -> %s", url, resp.status_code)
    return resp.text


async def fetch_async(
    url: str,
    api_key: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Non-blocking counterpart of `fetch`; suspends on network I/O only."""
    headers = _headers(api_key, user_agent)
    try:
        if client is not None:
            resp = await client.get(url, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as cx:
                resp = await cx.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise TransportError(f"Async request failed: {url} ({e})") from e

    logger.debug("GET %s -> %s", url, resp.status_code)
    return resp.text
