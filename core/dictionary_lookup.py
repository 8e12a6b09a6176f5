#!/usr/bin/env python3
"""
Dictionary Lookup Orchestrator
Resolves a word (with an optional part-of-speech hint) to one Oxford entry.

The cascade, returning on the first success:

1. with a hint, numbered homograph pages ``word_1`` .. ``word_8`` whose
   part of speech matches the hint
2. the bare entry page
3. the site search

Each stage returns a tagged ``FetchOutcome``; nothing below this module
raises for a missing page or an unreachable site.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Union

from .config import ScraperSettings, get_scraper_settings
from .exceptions import MalformedInputError
from .models import DictionaryEntry, PartOfSpeechHint
from scrapers.oxford_fetcher import OxfordPageFetcher
from scrapers.oxford_search import OxfordSearch

logger = logging.getLogger(__name__)

# Underscores are reserved for homograph numbering (run_1, run_2, ...)
DISALLOWED_CHARS = re.compile(r"[^\w\s'.-]|_")
WORD_CHAR = re.compile(r"[^\W_]")

HintLike = Union[PartOfSpeechHint, str, None]


def sanitize_word(word: Optional[str]) -> str:
    """Lowercase, drop disallowed characters and collapse whitespace.

    Raises MalformedInputError when nothing usable is left.
    """
    if word is None or not str(word).strip():
        raise MalformedInputError("Missing required field: word", word)

    cleaned = DISALLOWED_CHARS.sub('', str(word).lower())
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()
    # At least one letter or digit; bare "'", "-" or "..." are not words.
    if not WORD_CHAR.search(cleaned):
        raise MalformedInputError(f"Word {word!r} has no usable characters", word)
    return cleaned


def pos_matches(part_of_speech: Optional[str], hint: HintLike) -> bool:
    """True when the entry's part-of-speech text satisfies the hint"""
    hint = PartOfSpeechHint.parse(hint)
    if not part_of_speech or hint is None:
        return False
    return hint.expected in part_of_speech.lower()


def singularize(word: str) -> str:
    """Naive singular form: -ies -> -y, else drop -es, else drop -s"""
    if word.endswith('ies'):
        return word[:-3] + 'y'
    if word.endswith('es'):
        return word[:-2]
    if word.endswith('s'):
        return word[:-1]
    return word


class DictionaryLookup:
    """Homograph/bare/search cascade over the Oxford fetcher"""

    def __init__(self, fetcher: Optional[OxfordPageFetcher] = None,
                 search: Optional[OxfordSearch] = None,
                 settings: Optional[ScraperSettings] = None):
        self.settings = settings or (fetcher.settings if fetcher else get_scraper_settings())
        self.fetcher = fetcher or OxfordPageFetcher(self.settings)
        self.search = search or OxfordSearch(self.fetcher)

    def lookup(self, word: str, hint: HintLike = None) -> Optional[DictionaryEntry]:
        """Return the best entry for ``word`` or None when nothing matches"""
        slug = sanitize_word(word)
        hint = PartOfSpeechHint.parse(hint)
        logger.info(f"Looking up word: '{slug}' with hint: {hint.value if hint else 'none'}")

        if hint is not None:
            entry = self._lookup_homograph(slug, hint)
            if entry is not None:
                return entry

        outcome = self.fetcher.fetch_by_slug(slug)
        if outcome.ok:
            logger.info(f"Found bare entry: {slug}")
            return outcome.entry

        outcome = self.search.search_by_query(slug)
        if outcome.ok:
            logger.info(f"Found via search: {slug}")
            return outcome.entry

        logger.info(f"No entry found for '{slug}' ({outcome.status.value})")
        return None

    def _lookup_homograph(self, slug: str, hint: PartOfSpeechHint) -> Optional[DictionaryEntry]:
        for number in range(1, self.settings.max_homograph_variants + 1):
            variant = f"{slug}_{number}"
            outcome = self.fetcher.fetch_by_slug(variant)
            if outcome.ok and pos_matches(outcome.entry.part_of_speech, hint):
                logger.info(f"Found matching variant: {variant}")
                return outcome.entry
        return None

    def lookup_payload(self, word: str, hint: HintLike = None) -> Dict[str, Any]:
        """Single-word lookup in the ``{"success", "notFound"}`` response shape"""
        entry = self.lookup(word, hint)
        if entry is None:
            return {'success': [], 'notFound': [word]}
        return {'success': [entry.to_dict()], 'notFound': []}
