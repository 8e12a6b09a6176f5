"""Tests for the FastAPI lookup endpoint."""

import pytest
from fastapi.testclient import TestClient

from conftest import entry_page, entry_url
from core.dictionary_lookup import DictionaryLookup
from web_apps.lookup_api import app, get_lookup


@pytest.fixture
def client_for(make_fetcher):
    def _make(pages=None, lookup=None):
        if lookup is None:
            fetcher, _ = make_fetcher(pages)
            lookup = DictionaryLookup(fetcher)
        app.dependency_overrides[get_lookup] = lambda: lookup
        return TestClient(app, raise_server_exceptions=False)

    yield _make
    app.dependency_overrides.clear()


def test_lookup_found(client_for):
    client = client_for({
        entry_url("run_1"): (200, entry_page("run", pos="verb")),
    })

    response = client.post("/api/oxford", json={"word": "Run", "hint": "v"})

    assert response.status_code == 200
    body = response.json()
    assert body["notFound"] == []
    assert body["success"][0]["head"] == "run"
    assert body["success"][0]["url"] == entry_url("run_1")


def test_lookup_not_found_reports_word(client_for):
    client = client_for()
    response = client.post("/api/oxford", json={"word": "qwxz"})
    assert response.json() == {"success": [], "notFound": ["qwxz"]}


@pytest.mark.parametrize("payload", [{}, {"word": "   "}, {"word": "!!!"}, {"word": "run", "hint": "pronoun"}])
def test_bad_requests_are_rejected(client_for, payload):
    client = client_for()
    assert client.post("/api/oxford", json=payload).status_code == 400


def test_unexpected_failure_returns_error_body(client_for):
    class BrokenLookup:
        def lookup_payload(self, word, hint=None):
            raise RuntimeError("boom")

    client = client_for(lookup=BrokenLookup())
    response = client.post("/api/oxford", json={"word": "cat"})

    assert response.status_code == 500
    body = response.json()
    assert body["details"] == "boom"
    assert body["notFound"] == ["cat"]


def test_health(client_for):
    assert client_for().get("/health").json() == {"status": "ok"}


def test_each_request_gets_its_own_lookup():
    first, second = get_lookup(), get_lookup()

    assert first is not second
    assert first.fetcher is not second.fetcher
    assert first.fetcher.session is not second.fetcher.session
