import asyncio

import httpx
import pytest

from clinews import ApiError, ConfigError, Country, Endpoint, NewsApi, UrlParseError


def _client(seen, text):
    def handler(request):
        seen.append(request)
        return httpx.Response(200, text=text)
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_empty_api_key_is_rejected():
    with pytest.raises(ConfigError):
        NewsApi("")


def test_setters_chain_on_same_instance():
    api = NewsApi("key")
    assert api.endpoint(Endpoint.TOP_HEADLINES) is api
    assert api.country(Country.US) is api
    assert api.endpoint(Endpoint.TOP_HEADLINES).country(Country.US) is api


def test_setters_accept_enum_values():
    api = NewsApi("key").endpoint("top-headlines").country("us")
    assert api.prepare_url() == "https://newsapi.org/v2/top-headlines?country=us"


def test_unknown_country_value_is_rejected():
    with pytest.raises(ValueError):
        NewsApi("key").country("zz")


def test_fetch_returns_articles(ok_body):
    seen = []
    api = NewsApi("key").endpoint(Endpoint.TOP_HEADLINES).country(Country.US)
    with _client(seen, ok_body) as client:
        articles = api.fetch(client=client)

    assert [a.title for a in articles] == ["T"]
    assert str(seen[0].url) == "https://newsapi.org/v2/top-headlines?country=us"
    assert seen[0].headers["Authorization"] == "key"


def test_fetch_twice_issues_identical_requests(ok_body):
    seen = []
    api = NewsApi("key")
    with _client(seen, ok_body) as client:
        first = api.fetch(client=client)
        second = api.fetch(client=client)

    assert first == second
    assert len(seen) == 2
    assert seen[0].url == seen[1].url
    for name in ("Authorization", "User-Agent"):
        assert seen[0].headers[name] == seen[1].headers[name]


def test_fetch_propagates_api_error():
    seen = []
    with _client(seen, '{"status": "error", "code": "apiKeyDisabled"}') as client:
        with pytest.raises(ApiError):
            NewsApi("key").fetch(client=client)


def test_bad_base_url_fails_before_any_request():
    seen = []
    api = NewsApi("key", base_url="::nope::")
    with _client(seen, "{}") as client:
        with pytest.raises(UrlParseError):
            api.fetch(client=client)
    assert seen == []


def test_fetch_async_matches_fetch(ok_body):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text=ok_body)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await NewsApi("key").fetch_async(client=client)

    articles = asyncio.run(run())
    assert articles[0].published_at == "2023-05-01T10:00:00Z"
    assert str(seen[0].url) == "https://newsapi.org/v2/top-headlines?country=us"
