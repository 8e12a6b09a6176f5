#!/usr/bin/env python3
"""
Oxford Selector Cascades
Ordered CSS selector lists and first-match helpers for Oxford Learner's Dictionary pages.

Each cascade is a literal tuple of CSS selectors tried in order; the
first probe producing an acceptable value wins. The order is part of the
extraction behaviour on ambiguous markup, so keep these tuples as-is.
"""

import re
from typing import Callable, Iterable, Optional

from bs4 import Tag

Probe = Callable[[Tag], Optional[str]]

HEAD_SELECTORS = (
    '.headword',
    '.webtop-g .headword',
    '.webtop-g h2 .hw',
    '.webtop-g h2',
    '#entryContent h1',
    'h1.headword',
    '.h',
    'h1',
)

POS_SELECTORS = (
    'span.pos',
    '.pos',
    'span[class*="pos"]',
    '.grammar span',
)

PHONETIC_SELECTORS = (
    'span.phon',
    '.phon',
    'span[class*="phon"]',
    '.pronunciation',
)

EXTRA_NOTE_SELECTORS = (
    '.webtop .variants',
    '.webtop .inflections',
    '.webtop-g .variants',
)

SENSE_SELECTORS = (
    '#entryContent li.sense',
    '.sense',
    'li[class*="sense"]',
    '.definition-item',
    '.def-item',
)

DEFINITION_SELECTORS = ('span.def', '.def', '.definition', 'span[class*="def"]')

LABEL_SELECTORS = (
    'span.registerlabel',
    'span.grammar',
    'span.label',
    'span.labels',
    '.label',
    '.grammar',
)

SYNONYM_SELECTORS = ('span.syn', '.syn', '.synonym')

EXAMPLE_SELECTORS = ('span.x', '.x', '.example', 'span[class*="example"]')

RELATED_LINK_SELECTOR = 'a[href*="/definition/english/"]'
RELATED_HEADING_TAGS = ['h3', 'h4']
RELATED_CONTAINER_TAGS = ['section', 'div']
SIDEBAR_SELECTOR = '.sidebar, aside, #rightcolumn, .right-column'

SEARCH_RESULT_SELECTORS = (
    ".result-list a[href*='/definition/english/']",
    "a[href*='/definition/english/']",
    ".search-results a[href*='/definition/']",
    ".results a[href*='/definition/']",
)


def node_text(node: Optional[Tag]) -> str:
    """Trimmed text of a node, empty when the node is missing"""
    if node is None:
        return ''
    return node.get_text().strip()


def collapse_whitespace(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()


def text_probe(selector: str) -> Probe:
    """Probe returning the trimmed text of the first match for ``selector``"""

    def probe(node: Tag) -> Optional[str]:
        return node_text(node.select_one(selector)) or None

    return probe


def probes_for(selectors: Iterable[str]):
    return tuple(text_probe(selector) for selector in selectors)


def first_text(probes, node: Tag, accept: Optional[Callable[[str], bool]] = None) -> Optional[str]:
    """Run probes in order; return the first non-empty value ``accept`` allows"""
    for probe in probes:
        value = probe(node)
        if value and (accept is None or accept(value)):
            return value
    return None


def first_matching(selectors: Iterable[str], node: Tag):
    """Elements of the first selector that matches anything (no merging)"""
    for selector in selectors:
        elements = node.select(selector)
        if elements:
            return selector, elements
    return None, []
