from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from .exceptions import ConfigError
from .models import Article, Country, Endpoint
from .parser import map_response
from .request import BASE_URL, build_url
from .transport import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, fetch, fetch_async

logger = logging.getLogger(__name__)


class NewsApi:
    """
    High-level API: build the request, call the API and return typed articles.

    Pipeline: build URL → GET (blocking or async) → map envelope → List[Article]

    Setters return the same instance so configuration can be chained:

        api = NewsApi(key).endpoint(Endpoint.TOP_HEADLINES).country(Country.US)
        articles = api.fetch()
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not api_key:
            raise ConfigError("An API key is required")
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._endpoint = Endpoint.TOP_HEADLINES
        self._country = Country.US

    def endpoint(self, endpoint: Endpoint) -> "NewsApi":
        self._endpoint = Endpoint(endpoint)
        return self

    def country(self, country: Country) -> "NewsApi":
        self._country = Country(country)
        return self

    def prepare_url(self) -> str:
        return build_url(self.base_url, self._endpoint, self._country)

    def _finish(self, body: str) -> List[Article]:
        articles = map_response(body)
        logger.info("Fetched %d articles (%s, %s)", len(articles), self._endpoint, self._country)
        return articles

    def fetch(self, client: Optional[httpx.Client] = None) -> List[Article]:
        url = self.prepare_url()
        logger.debug("Requesting %s", url)
        body = fetch(url, self.api_key, timeout=self.timeout, user_agent=self.user_agent, client=client)
        return self._finish(body)

    async def fetch_async(self, client: Optional[httpx.AsyncClient] = None) -> List[Article]:
        url = self.prepare_url()
        logger.debug("Requesting %s (async)", url)
        body = await fetch_async(url, self.api_key, timeout=self.timeout, user_agent=self.user_agent, client=client)
        return self._finish(body)
