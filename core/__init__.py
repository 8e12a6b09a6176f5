"""
Core dictionary lookup components.

This package contains the fundamental building blocks of the lookup system:
- Configuration and logging setup
- Dictionary entry data model and tagged fetch outcomes
- Lookup orchestration (core.dictionary_lookup) and batch running
  (core.batch_runner), which build on the scrapers package
"""

from .config import LookupConfig, ScraperSettings, get_scraper_settings, setup_logging
from .exceptions import DictionaryLookupError, MalformedInputError
from .models import (
    DictionaryEntry,
    FetchOutcome,
    FetchStatus,
    LookupResult,
    PartOfSpeechHint,
    RelatedSection,
    RelatedWord,
    Sense,
)

__all__ = [
    'LookupConfig',
    'ScraperSettings',
    'get_scraper_settings',
    'setup_logging',
    'DictionaryLookupError',
    'MalformedInputError',
    'DictionaryEntry',
    'FetchOutcome',
    'FetchStatus',
    'LookupResult',
    'PartOfSpeechHint',
    'RelatedSection',
    'RelatedWord',
    'Sense'
]
