#!/usr/bin/env python3
"""
Oxford Search Fallback
Resolves free-text queries through the site's search results page
"""

import logging
import re
from typing import Optional
from urllib.parse import quote, unquote

from bs4 import BeautifulSoup

from core.models import FetchOutcome
from .oxford_fetcher import OxfordPageFetcher
from .selectors import SEARCH_RESULT_SELECTORS

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r'/definition/english/(.+?)(?:[?#]|$)')


def extract_slug_from_url(url: Optional[str]) -> str:
    """Entry slug from an entry URL, '' when the URL is not an entry link"""
    if not url:
        return ''
    match = SLUG_PATTERN.search(url)
    return unquote(match.group(1)).strip('/') if match else ''


class OxfordSearch:
    """Search-page fallback built on the page fetcher"""

    def __init__(self, fetcher: OxfordPageFetcher):
        self.fetcher = fetcher

    def search_url(self, query: str) -> str:
        return f"{self.fetcher.settings.search_base}?q={quote(query, safe='')}"

    def first_result_href(self, html: str) -> Optional[str]:
        soup = BeautifulSoup(html or '', 'html.parser')
        for selector in SEARCH_RESULT_SELECTORS:
            link = soup.select_one(selector)
            if link is not None and link.get('href'):
                logger.debug(f"Found result link: {link['href']}")
                return link['href']
        return None

    def search_by_query(self, query: str) -> FetchOutcome:
        url = self.search_url(query)
        logger.info(f"Searching URL: {url}")

        document = self.fetcher.fetch_document(url)
        if not document.ok:
            return document

        # Some search pages embed a full entry instead of a result list
        embedded = self.fetcher.extract_from(document)
        if embedded.ok:
            logger.info(f"Search page for '{query}' embeds an entry")
            return embedded

        href = self.first_result_href(document.html)
        if not href:
            logger.info(f"No result links found for '{query}'")
            return FetchOutcome.not_found(url, "no result links")

        slug = extract_slug_from_url(href)
        if not slug:
            logger.info(f"Could not extract slug from {href}")
            return FetchOutcome.not_found(url, "unusable result link")

        return self.fetcher.fetch_by_slug(slug)
