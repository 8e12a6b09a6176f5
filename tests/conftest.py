"""Shared fixtures: an offline requests session and Oxford-like HTML pages."""

import textwrap

import pytest
import requests

from core.config import ScraperSettings
from scrapers.oxford_fetcher import OxfordPageFetcher

BASE = "https://www.oxfordlearnersdictionaries.com"


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Maps URLs to (status, html) pairs or exceptions; unknown URLs are 404."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.headers = {}
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            return FakeResponse(404, "<html><body>Not found</body></html>")
        status, html = page
        return FakeResponse(status, html)


def entry_page(head, pos=None, definitions=("a definition",), phon=None, examples=()):
    senses = "\n".join(
        f'<li class="sense"><span class="def">{text}</span>'
        + "".join(f'<span class="x">{ex}</span>' for ex in examples)
        + "</li>"
        for text in definitions
    )
    pos_html = f'<span class="pos">{pos}</span>' if pos else ""
    phon_html = f'<span class="phon">{phon}</span>' if phon else ""
    return textwrap.dedent(
        f"""
        <html><head><title>{head} - Oxford Learner's Dictionaries</title></head>
        <body>
          <div id="entryContent">
            <div class="webtop-g"><h1 class="headword">{head}</h1>{pos_html}{phon_html}</div>
            <ol class="senses_multiple">{senses}</ol>
          </div>
        </body></html>
        """
    )


def entry_url(slug):
    return f"{BASE}/definition/english/{slug}"


def search_url(query):
    return f"{BASE}/search/english/?q={query}"


@pytest.fixture
def settings():
    return ScraperSettings(request_delay=0)


@pytest.fixture
def make_fetcher(settings):
    def _make(pages=None):
        session = FakeSession(pages)
        return OxfordPageFetcher(settings, session=session), session

    return _make


@pytest.fixture
def transport_error():
    return requests.ConnectionError("connection refused")
