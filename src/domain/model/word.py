"""Word domain models.

The canonical word model both dictionary parsers are folded into.
All models are frozen; translation augmentation builds new instances
with ``dataclasses.replace`` instead of mutating.
"""

from dataclasses import dataclass, field

from domain.model.language import SourceLanguage

# Placeholder text for a meaning whose source page lists no examples
EMPTY_EXAMPLE_TEXT = "-"


@dataclass(frozen=True)
class Example:
    """A usage example, optionally translated."""
    original: str
    translation: str | None = None


def placeholder_examples() -> list[Example]:
    return [Example(original=EMPTY_EXAMPLE_TEXT)]


@dataclass(frozen=True)
class Meaning:
    """A single meaning inside a context.

    ``alphabetical_position`` is "1", "2", ... for DDO and "a", "b", ...
    for SpanishDict. ``examples`` always holds at least one entry.
    """
    original: str
    alphabetical_position: str
    translation: str | None = None
    tag: str | None = None
    image_url: str | None = None
    examples: list[Example] = field(default_factory=placeholder_examples)


@dataclass(frozen=True)
class Context:
    """A disambiguated sense grouping (exactly one for DDO)."""
    context_en: str
    position: str
    meanings: list[Meaning] = field(default_factory=list)


@dataclass(frozen=True)
class Headword:
    """Dictionary form of the word plus translations filled by augmentation."""
    original: str
    english: str | None = None
    russian: str | None = None


@dataclass(frozen=True)
class Definition:
    """One word form / part of speech with its contexts."""
    headword: Headword
    part_of_speech: str
    endings: str
    contexts: list[Context] = field(default_factory=list)


@dataclass(frozen=True)
class Variant:
    """Related lemma linked from a dictionary page."""
    word: str
    url: str


@dataclass(frozen=True)
class WordModel:
    """Root result of a lookup (Value Object)."""
    word: str
    source_language: SourceLanguage
    definitions: list[Definition]
    sound_url: str | None = None
    sound_file_name: str | None = None
    variations: list[Variant] = field(default_factory=list)
