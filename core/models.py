#!/usr/bin/env python3
"""
Dictionary Entry Data Model
Structured records produced by the Oxford scraper and consumed by the
lookup orchestrator, the batch runner and the HTTP/CLI front ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from .exceptions import MalformedInputError


@dataclass(frozen=True)
class Sense:
    """One definition unit within an entry"""
    definition: str
    label: Optional[str] = None
    synonym: Optional[str] = None
    examples: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'definition': self.definition}
        if self.label:
            data['label'] = self.label
        if self.synonym:
            data['synonym'] = self.synonym
        data['examples'] = list(self.examples)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Sense':
        return cls(
            definition=data['definition'],
            label=data.get('label'),
            synonym=data.get('synonym'),
            examples=list(data.get('examples') or []),
        )


@dataclass(frozen=True)
class RelatedWord:
    """A link from a sidebar section to another dictionary entry"""
    word: str
    type: str = 'word'
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'word': self.word, 'type': self.type}
        if self.url:
            data['url'] = self.url
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RelatedWord':
        return cls(word=data['word'], type=data.get('type') or 'word', url=data.get('url'))


@dataclass(frozen=True)
class RelatedSection:
    """Sidebar grouping such as "Other results" or "Nearby words" """
    title: str
    words: List[RelatedWord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'title': self.title, 'words': [w.to_dict() for w in self.words]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RelatedSection':
        return cls(
            title=data['title'],
            words=[RelatedWord.from_dict(w) for w in data.get('words') or []],
        )


@dataclass(frozen=True)
class DictionaryEntry:
    """The resolved result of a lookup.

    Entries are built fresh per lookup and never mutated afterwards;
    ``with_source_url`` returns an annotated copy.
    """
    head: str
    senses: List[Sense]
    part_of_speech: Optional[str] = None
    phonetic: Optional[str] = None
    extra_notes: Optional[List[str]] = None
    source_url: Optional[str] = None
    related_sections: Optional[List[RelatedSection]] = None

    def __post_init__(self):
        if not self.head or not self.head.strip():
            raise ValueError("Dictionary entry requires a headword")
        if not self.senses:
            raise ValueError(f"Dictionary entry '{self.head}' has no senses")

    def with_source_url(self, url: str) -> 'DictionaryEntry':
        return replace(self, source_url=url)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the keys of the lookup service's JSON responses"""
        data: Dict[str, Any] = {'head': self.head}
        if self.part_of_speech:
            data['pos'] = self.part_of_speech
        if self.phonetic:
            data['phon'] = self.phonetic
        if self.extra_notes:
            data['extra'] = list(self.extra_notes)
        data['senses'] = [s.to_dict() for s in self.senses]
        if self.source_url:
            data['url'] = self.source_url
        if self.related_sections:
            data['relatedSections'] = [s.to_dict() for s in self.related_sections]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DictionaryEntry':
        related = data.get('relatedSections')
        return cls(
            head=data['head'],
            senses=[Sense.from_dict(s) for s in data.get('senses') or []],
            part_of_speech=data.get('pos'),
            phonetic=data.get('phon'),
            extra_notes=list(data['extra']) if data.get('extra') else None,
            source_url=data.get('url'),
            related_sections=[RelatedSection.from_dict(s) for s in related] if related else None,
        )


@dataclass
class LookupResult:
    """Batch-level outcome: resolved entries (newest first) and failed words"""
    successes: List[DictionaryEntry] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': [entry.to_dict() for entry in self.successes],
            'notFound': list(self.not_found),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LookupResult':
        return cls(
            successes=[DictionaryEntry.from_dict(e) for e in data.get('success') or []],
            not_found=list(data.get('notFound') or []),
        )


class PartOfSpeechHint(Enum):
    """Caller-supplied part-of-speech constraint for homograph pages"""
    NOUN = 'n'
    VERB = 'v'
    ADJECTIVE = 'adj'
    ADVERB = 'adv'

    @property
    def expected(self) -> str:
        """Substring the resolved part-of-speech text must contain"""
        return self.name.lower()

    @classmethod
    def parse(cls, value) -> Optional['PartOfSpeechHint']:
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if not text:
            return None
        for hint in cls:
            if text in (hint.value, hint.expected):
                return hint
        raise MalformedInputError(f"Unknown part-of-speech hint: {value!r}", value)


class FetchStatus(Enum):
    OK = 'ok'
    NOT_FOUND = 'not_found'
    TRANSPORT_FAILURE = 'transport_failure'


@dataclass(frozen=True)
class FetchOutcome:
    """Tagged result of one scraping stage (fetch, extract or search)"""
    status: FetchStatus
    url: str
    entry: Optional[DictionaryEntry] = None
    html: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def not_found(cls, url: str, detail: Optional[str] = None) -> 'FetchOutcome':
        return cls(status=FetchStatus.NOT_FOUND, url=url, detail=detail)

    @classmethod
    def transport_failure(cls, url: str, detail: Optional[str] = None) -> 'FetchOutcome':
        return cls(status=FetchStatus.TRANSPORT_FAILURE, url=url, detail=detail)


def format_entry(entry: DictionaryEntry) -> str:
    """Render an entry as plain text with senses numbered 1..N"""
    header = entry.head
    if entry.part_of_speech:
        header += f" ({entry.part_of_speech})"
    if entry.phonetic:
        header += f" /{entry.phonetic}/"
    lines = [header]

    for note in entry.extra_notes or []:
        lines.append(f"  {note}")

    for index, sense in enumerate(entry.senses, 1):
        prefix = f"[{sense.label}] " if sense.label else ""
        line = f"{index}. {prefix}{sense.definition}"
        if sense.synonym:
            line += f" (SYN {sense.synonym})"
        lines.append(line)
        for example in sense.examples:
            lines.append(f"   - {example}")

    for section in entry.related_sections or []:
        words = ", ".join(f"{w.word} ({w.type})" for w in section.words)
        lines.append(f"{section.title}: {words}")

    if entry.source_url:
        lines.append(entry.source_url)
    return "\n".join(lines)
