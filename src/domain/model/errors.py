"""Domain-level exceptions.

Parsers and services raise these errors to express broken preconditions,
unrecognised page structure, or lookups that produced nothing.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class InvalidInputError(DomainError, ValueError):
    """Caller passed an empty document or a missing model (precondition violation)."""


class NotFoundError(DomainError):
    """Requested word or file does not exist upstream."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class UnsupportedLanguageError(ValidationError):
    """Source language is not one of the supported dictionaries."""

    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Unsupported source language: {language!r}")


class PageParserError(DomainError):
    """Dictionary page does not have the expected structure.

    Usually means the upstream site changed its markup. ``selector`` names
    the element the parser was looking for; ``url`` is filled in by the
    lookup service once the page origin is known.
    """

    def __init__(self, message: str, selector: str | None = None, url: str | None = None):
        self.selector = selector
        self.url = url
        super().__init__(message)


class SpanishDictParserError(PageParserError):
    """SpanishDict embedded JSON is missing or has an unexpected shape."""
