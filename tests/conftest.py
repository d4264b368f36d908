import json

import pytest

OK_BODY = {
    "status": "ok",
    "totalResults": 1,
    "articles": [
        {"title": "T", "url": "U", "publishedAt": "2023-05-01T10:00:00Z"},
    ],
}


@pytest.fixture
def ok_body():
    return json.dumps(OK_BODY)


@pytest.fixture
def no_dotenv(monkeypatch):
    """Keep a developer's local .env out of the tests."""
    monkeypatch.setattr("clinews.config.load_dotenv", lambda *a, **k: False)
