#!/usr/bin/env python3
"""
Oxford Learner's Dictionary Markup Extractor
Turns one fetched entry page into a DictionaryEntry using selector cascades
"""

import logging
import re
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from core.config import LookupConfig
from core.models import DictionaryEntry, RelatedSection, RelatedWord, Sense
from .selectors import (
    DEFINITION_SELECTORS,
    EXAMPLE_SELECTORS,
    EXTRA_NOTE_SELECTORS,
    HEAD_SELECTORS,
    LABEL_SELECTORS,
    PHONETIC_SELECTORS,
    POS_SELECTORS,
    RELATED_CONTAINER_TAGS,
    RELATED_HEADING_TAGS,
    RELATED_LINK_SELECTOR,
    SENSE_SELECTORS,
    SIDEBAR_SELECTOR,
    SYNONYM_SELECTORS,
    collapse_whitespace,
    first_matching,
    first_text,
    node_text,
    probes_for,
)

logger = logging.getLogger(__name__)

MAX_HEAD_LENGTH = 50
MAX_EXAMPLES_PER_SENSE = 5
MAX_RELATED_WORDS = 12

HEAD_PROBES = probes_for(HEAD_SELECTORS)
POS_PROBES = probes_for(POS_SELECTORS)
PHONETIC_PROBES = probes_for(PHONETIC_SELECTORS)
DEFINITION_PROBES = probes_for(DEFINITION_SELECTORS)
LABEL_PROBES = probes_for(LABEL_SELECTORS)
SYNONYM_PROBES = probes_for(SYNONYM_SELECTORS)

# Related-word sections, searched in this order
RELATED_SECTION_PHRASES = ('other results', 'nearby words')
RELATED_TITLE_PATTERN = re.compile(r'other results|nearby words', re.IGNORECASE)
POS_PATTERN = re.compile(r'(noun|verb|adjective|adverb|combining form)\b', re.IGNORECASE)

PHONETIC_EDGE_PATTERN = re.compile(r'^[\s/\[]+|[\s/\]]+$')
EMPHASIS_PATTERN = re.compile(r'_+([^_]+)_+')
EDGE_UNDERSCORE_PATTERN = re.compile(r'^_+|_+$')


def _strip_phonetic_delimiters(text: str) -> str:
    text = PHONETIC_EDGE_PATTERN.sub('', text)
    # Parentheses only go when they wrap everything, so "ˈwɔːtə(r)" survives
    if text.startswith('(') and text.endswith(')'):
        inner = text[1:-1]
        if inner.count('(') == inner.count(')'):
            text = inner
    return collapse_whitespace(text)


def clean_phonetic(text: Optional[str]) -> str:
    """Strip slash/bracket delimiters and collapse whitespace.

    Stripping repeats until nothing changes, so cleaning twice gives the
    same text as cleaning once.
    """
    if not text:
        return ''
    cleaned = collapse_whitespace(text)
    while True:
        stripped = _strip_phonetic_delimiters(cleaned)
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def clean_example(text: Optional[str]) -> str:
    """Remove underscore emphasis markers and normalize whitespace.

    >>> clean_example('_the cat_ sat')
    'the cat sat'
    """
    if not text:
        return ''
    cleaned = EMPHASIS_PATTERN.sub(r'\1', text)
    cleaned = EDGE_UNDERSCORE_PATTERN.sub('', cleaned.strip())
    return collapse_whitespace(cleaned)


def extract_examples(container: Tag) -> List[str]:
    """Examples from the first selector yielding any, capped per sense"""
    for selector in EXAMPLE_SELECTORS:
        examples = []
        for element in container.select(selector):
            example = clean_example(node_text(element))
            if example:
                examples.append(example)
            if len(examples) >= MAX_EXAMPLES_PER_SENSE:
                break
        if examples:
            return examples
    return []


def extract_senses(soup: Tag) -> List[Sense]:
    selector, containers = first_matching(SENSE_SELECTORS, soup)
    if not containers:
        return []

    logger.debug(f"Found {len(containers)} sense containers with selector: {selector}")
    senses = []
    for container in containers:
        definition = first_text(DEFINITION_PROBES, container)
        if not definition:
            continue
        senses.append(Sense(
            definition=definition,
            label=first_text(LABEL_PROBES, container),
            synonym=first_text(SYNONYM_PROBES, container),
            examples=extract_examples(container),
        ))
    return senses


def extract_extra_notes(soup: Tag) -> Optional[List[str]]:
    notes: List[str] = []
    for selector in EXTRA_NOTE_SELECTORS:
        for element in soup.select(selector):
            note = collapse_whitespace(element.get_text())
            if note and note not in notes:
                notes.append(note)
    return notes or None


def _explicit_word_type(link: Tag) -> str:
    inner = ''.join(node_text(el) for el in link.select('.pos, .type')).strip()
    if inner:
        return inner.lower()
    sibling = link.find_next_sibling()
    if sibling is not None and {'pos', 'type'} & set(sibling.get('class') or []):
        return node_text(sibling).lower()
    return ''


def parse_related_links(container: Tag, base_url: str) -> List[RelatedWord]:
    """Collect up to 12 entry links from a sidebar container"""
    words: List[RelatedWord] = []
    for link in container.select(RELATED_LINK_SELECTOR):
        if len(words) >= MAX_RELATED_WORDS:
            break
        text = node_text(link)
        word_type = _explicit_word_type(link)

        match = POS_PATTERN.search(text)
        if match:
            word_type = word_type or match.group(1).lower()
            text = POS_PATTERN.sub('', text, count=1).strip()

        word = re.sub(r'\s{2,}', ' ', text).strip()
        if not word:
            continue
        href = link.get('href')
        words.append(RelatedWord(
            word=word,
            type=word_type or 'word',
            url=urljoin(base_url, href) if href else None,
        ))
    return words


def _section_from_heading(soup: Tag, phrase: str, base_url: str) -> Optional[RelatedSection]:
    for heading in soup.find_all(RELATED_HEADING_TAGS):
        title = node_text(heading)
        if phrase not in title.lower():
            continue
        container = heading.find_parent(RELATED_CONTAINER_TAGS) or heading.parent
        return RelatedSection(title=title, words=parse_related_links(container, base_url))
    return None


def extract_related_sections(soup: Tag, base_url: Optional[str] = None) -> Optional[List[RelatedSection]]:
    """Related-word sidebar sections ("Other results", "Nearby words").

    Headings are authoritative; the sidebar scan only runs when fewer than
    two sections were found and only adds titles not seen yet. Sections
    without any resolved word are dropped.
    """
    base_url = base_url or LookupConfig.OXFORD['base_url']
    sections: List[RelatedSection] = []
    seen_titles = set()

    for phrase in RELATED_SECTION_PHRASES:
        section = _section_from_heading(soup, phrase, base_url)
        if section is None or not section.words:
            continue
        key = section.title.lower()
        if key in seen_titles:
            continue
        sections.append(section)
        seen_titles.add(key)

    if len(sections) < 2:
        sidebar = soup.select_one(SIDEBAR_SELECTOR)
        if sidebar is not None:
            for block in sidebar.find_all(RELATED_CONTAINER_TAGS):
                title = node_text(block.find(RELATED_HEADING_TAGS))
                if not title or not RELATED_TITLE_PATTERN.search(title):
                    continue
                key = title.lower()
                if key in seen_titles:
                    continue
                words = parse_related_links(block, base_url)
                if words:
                    sections.append(RelatedSection(title=title, words=words))
                    seen_titles.add(key)

    logger.debug(f"Found {len(sections)} related sections")
    return sections or None


def extract(html: str, base_url: Optional[str] = None,
            brand_name: Optional[str] = None) -> Optional[DictionaryEntry]:
    """Extract a dictionary entry from an entry (or search) page.

    Returns None when the page has no acceptable headword or no sense with
    a definition; a partial entry is never produced.
    """
    brand = brand_name or LookupConfig.OXFORD['brand_name']
    soup = BeautifulSoup(html or '', 'html.parser')

    head = first_text(
        HEAD_PROBES, soup,
        accept=lambda text: brand not in text and len(text) < MAX_HEAD_LENGTH,
    )
    if not head:
        logger.debug("No head word found")
        return None

    senses = extract_senses(soup)
    if not senses:
        logger.debug(f"No senses found for '{head}'")
        return None

    part_of_speech = first_text(POS_PROBES, soup, accept=lambda text: text != brand)
    phonetic = clean_phonetic(first_text(PHONETIC_PROBES, soup)) or None

    logger.debug(f"Extracted '{head}' with {len(senses)} senses")
    return DictionaryEntry(
        head=head,
        senses=senses,
        part_of_speech=part_of_speech,
        phonetic=phonetic,
        extra_notes=extract_extra_notes(soup),
        related_sections=extract_related_sections(soup, base_url),
    )
