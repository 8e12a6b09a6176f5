"""Exceptions surfaced by the lookup core.

Scraping-layer failures never raise; they come back as ``FetchOutcome``
values. Only input that cannot be looked up at all is rejected with an
exception, before any request is made.
"""


class DictionaryLookupError(ValueError):
    """Base class for errors raised by the lookup core"""


class MalformedInputError(DictionaryLookupError):
    """Raised when a word (or hint) is unusable before any network call"""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
