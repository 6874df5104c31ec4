"""DDO (Den Danske Ordbog) parser output."""

from dataclasses import dataclass, field

from domain.model.word import Example, placeholder_examples


@dataclass(frozen=True)
class DDODefinition:
    """One numbered definition from a DDO page, before folding into a WordModel."""
    meaning: str
    tag: str | None = None
    examples: list[Example] = field(default_factory=placeholder_examples)
