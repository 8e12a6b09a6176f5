"""
Oxford Learner's Dictionary scraping components.

This package contains the network-facing half of the lookup system:
- Markup extraction via ordered selector cascades
- Entry page fetching with browser-like headers
- Search results fallback
"""

from .oxford_extractor import extract, clean_example, clean_phonetic
from .oxford_fetcher import OxfordPageFetcher
from .oxford_search import OxfordSearch, extract_slug_from_url

__all__ = [
    'extract',
    'clean_example',
    'clean_phonetic',
    'OxfordPageFetcher',
    'OxfordSearch',
    'extract_slug_from_url'
]
