"""SpanishDict parser output, before folding into a WordModel."""

from dataclasses import dataclass, field

from domain.model.word import Example, placeholder_examples


@dataclass(frozen=True)
class SpanishDictMeaning:
    original: str
    alphabetical_position: str
    image_url: str | None = None
    examples: list[Example] = field(default_factory=placeholder_examples)


@dataclass(frozen=True)
class SpanishDictContext:
    context_en: str
    position: int
    meanings: list[SpanishDictMeaning] = field(default_factory=list)


@dataclass(frozen=True)
class SpanishDictDefinition:
    """One neodict group: a word form (e.g. "afeitarse") with its senses."""
    word_es: str
    part_of_speech: str
    contexts: list[SpanishDictContext] = field(default_factory=list)
