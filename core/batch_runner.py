#!/usr/bin/env python3
"""
Batch Runner
Looks up one word per input line, sequentially and with a pacing delay.

Lines look like ``word`` or ``word (n|v|adj|adv)``. A word that is not
found and ends in "s" is retried once in a naive singular form; the
literal input word is what gets reported when both attempts fail.
"""

import logging
import re
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from .dictionary_lookup import DictionaryLookup, singularize
from .exceptions import MalformedInputError
from .models import DictionaryEntry, LookupResult, PartOfSpeechHint
from .result_store import ResultStore

logger = logging.getLogger(__name__)

HINT_LINE_PATTERN = re.compile(r'^(.+?)\s*\((n|v|adj|adv)\)\s*$')


@dataclass(frozen=True)
class WordInput:
    base: str
    hint: Optional[PartOfSpeechHint] = None


def parse_input_lines(lines: Union[str, Iterable[str]]) -> List[WordInput]:
    """Split input into words with optional inline hints, skipping blanks"""
    if isinstance(lines, str):
        lines = lines.strip().split('\n')

    words: List[WordInput] = []
    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue
        match = HINT_LINE_PATTERN.match(trimmed)
        if match:
            words.append(WordInput(match.group(1).strip(), PartOfSpeechHint.parse(match.group(2))))
        else:
            words.append(WordInput(trimmed))
    return words


class BatchRunner:
    """Sequential batch lookups with a bounded, newest-first success list"""

    def __init__(self, lookup: Optional[DictionaryLookup] = None,
                 delay_seconds: Optional[float] = None,
                 store: Optional[ResultStore] = None,
                 max_successes: Optional[int] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.lookup = lookup or DictionaryLookup()
        settings = self.lookup.settings
        self.delay_seconds = settings.request_delay if delay_seconds is None else delay_seconds
        self.max_successes = max_successes or settings.max_successes
        self.store = store
        self.sleep = sleep

    def lookup_with_singular_fallback(self, word: str,
                                      hint: Optional[PartOfSpeechHint] = None) -> Optional[DictionaryEntry]:
        entry = self.lookup.lookup(word, hint)
        if entry is None and word.endswith('s'):
            singular = singularize(word)
            logger.info(f"'{word}' not found, trying singular '{singular}'")
            entry = self.lookup.lookup(singular, hint)
        return entry

    def run_batch(self, lines: Union[str, Iterable[str]]) -> LookupResult:
        words = parse_input_lines(lines)
        successes = deque(maxlen=self.max_successes)
        not_found: List[str] = []

        for index, item in enumerate(words):
            if index and self.delay_seconds:
                self.sleep(self.delay_seconds)

            try:
                entry = self.lookup_with_singular_fallback(item.base, item.hint)
            except MalformedInputError as e:
                logger.warning(f"Skipping malformed input {item.base!r}: {e}")
                entry = None

            if entry is None:
                not_found.append(item.base)
            else:
                # Newest first; the oldest entry falls off the end
                successes.appendleft(entry)

        result = LookupResult(successes=list(successes), not_found=not_found)
        logger.info(f"Batch complete: {len(result.successes)} found, "
                    f"{len(result.not_found)} not found")

        if self.store is not None:
            self.store.save(result)
        return result
