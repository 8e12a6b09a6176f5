"""Tests for configuration, models and CLI output helpers."""

import pytest

from core.config import LookupConfig, ScraperSettings, get_scraper_settings
from core.exceptions import MalformedInputError
from core.models import DictionaryEntry, PartOfSpeechHint, RelatedSection, RelatedWord, Sense, format_entry


def test_defaults_match_site():
    settings = ScraperSettings()
    assert settings.base_url == "https://www.oxfordlearnersdictionaries.com"
    assert settings.entry_base.endswith("/definition/english/")
    assert settings.search_base.endswith("/search/english/")
    assert settings.max_homograph_variants == 8
    assert settings.max_successes == 50


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OXFORD_BASE_URL", "https://mirror.example.test/")
    monkeypatch.setenv("OXFORD_REQUEST_DELAY", "0.25")
    monkeypatch.setenv("OXFORD_MAX_VARIANTS", "not-a-number")

    settings = get_scraper_settings()

    assert settings.base_url == "https://mirror.example.test"
    assert settings.request_delay == 0.25
    assert settings.max_homograph_variants == LookupConfig.OXFORD["max_homograph_variants"]


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"base_url": "ftp://x"}, "Base URL"),
        ({"request_delay": -1}, "delay"),
        ({"timeout": 0}, "Timeout"),
        ({"max_homograph_variants": 0}, "homograph"),
        ({"max_successes": 0}, "cap"),
    ],
)
def test_invalid_settings(kwargs, message):
    with pytest.raises(ValueError, match=message):
        ScraperSettings(**kwargs)


def test_hint_parsing():
    assert PartOfSpeechHint.parse("adj") is PartOfSpeechHint.ADJECTIVE
    assert PartOfSpeechHint.parse("Verb") is PartOfSpeechHint.VERB
    assert PartOfSpeechHint.parse("") is None
    with pytest.raises(MalformedInputError):
        PartOfSpeechHint.parse("article")


def test_entry_requires_head_and_senses():
    with pytest.raises(ValueError):
        DictionaryEntry(head="", senses=[Sense("x")])
    with pytest.raises(ValueError):
        DictionaryEntry(head="cat", senses=[])


def test_format_entry_numbers_senses():
    entry = DictionaryEntry(
        head="run",
        part_of_speech="verb",
        phonetic="rʌn",
        senses=[
            Sense("to move fast", label="informal", examples=["run home"]),
            Sense("to manage", synonym="operate"),
        ],
        related_sections=[RelatedSection("Nearby words", [RelatedWord("rung", "noun")])],
        source_url="https://www.oxfordlearnersdictionaries.com/definition/english/run_1",
    )

    text = format_entry(entry)

    assert text.splitlines()[0] == "run (verb) /rʌn/"
    assert "1. [informal] to move fast" in text
    assert "2. to manage (SYN operate)" in text
    assert "Nearby words: rung (noun)" in text
