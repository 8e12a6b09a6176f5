#!/usr/bin/env python3
"""
Oxford Page Fetcher
Retrieves entry pages with browser-like headers and hands them to the extractor
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from core.config import ScraperSettings, get_scraper_settings
from core.models import FetchOutcome, FetchStatus
from .oxford_extractor import extract

logger = logging.getLogger(__name__)


class OxfordPageFetcher:
    """Client for fetching and extracting Oxford entry pages.

    Transport errors and non-2xx responses are returned as tagged outcomes
    rather than raised; a single failed request is routine here because the
    lookup cascade simply moves on to the next URL. No request is retried.
    """

    def __init__(self, settings: Optional[ScraperSettings] = None,
                 session: Optional[requests.Session] = None):
        self.settings = settings or get_scraper_settings()
        self.session = session or requests.Session()
        if session is None:
            self.session.headers.update(self.settings.headers)
        self.fetch_count = 0

    def entry_url(self, slug: str) -> str:
        return f"{self.settings.entry_base}{quote(slug, safe='_-.')}"

    def fetch_document(self, url: str) -> FetchOutcome:
        """GET a page; OK outcomes carry the HTML body"""
        self.fetch_count += 1
        logger.debug(f"Fetching URL: {url}")

        try:
            response = self.session.get(url, headers=self.settings.headers,
                                        timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request error for {url}: {e}")
            return FetchOutcome.transport_failure(url, str(e))

        if not 200 <= response.status_code < 300:
            logger.info(f"HTTP {response.status_code} from {url}")
            return FetchOutcome.not_found(url, f"HTTP {response.status_code}")

        return FetchOutcome(status=FetchStatus.OK, url=url, html=response.text)

    def extract_from(self, document: FetchOutcome) -> FetchOutcome:
        """Run the extractor on a fetched document and annotate the entry"""
        if not document.ok:
            return document

        entry = extract(document.html, base_url=self.settings.base_url,
                        brand_name=self.settings.brand_name)
        if entry is None:
            return FetchOutcome.not_found(document.url, "no entry on page")

        return FetchOutcome(
            status=FetchStatus.OK,
            url=document.url,
            entry=entry.with_source_url(document.url),
            html=document.html,
        )

    def fetch_by_slug(self, slug: str) -> FetchOutcome:
        outcome = self.extract_from(self.fetch_document(self.entry_url(slug)))
        if outcome.ok:
            logger.info(f"Oxford: found '{outcome.entry.head}' at {outcome.url}")
        return outcome
