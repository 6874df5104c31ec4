"""Translation request/response models exchanged with a TranslationPort.

Ids are 1-based and positional: definition ``id`` N is the N-th definition
of the word model, context ``id`` N the N-th context of that definition,
and so on. Output is merged back into the word model by those ids.
"""

from dataclasses import dataclass, field
from typing import Any

TRANSLATION_INPUT_VERSION = "2"


@dataclass(frozen=True)
class HeadwordInput:
    text: str
    part_of_speech: str
    meaning: str
    examples: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MeaningInput:
    id: int
    text: str
    part_of_speech: str
    examples: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ContextInput:
    id: int
    context_string: str
    meanings: list[MeaningInput] = field(default_factory=list)


@dataclass(frozen=True)
class DefinitionInput:
    id: int
    headword: HeadwordInput
    contexts: list[ContextInput] = field(default_factory=list)


@dataclass(frozen=True)
class TranslationInput:
    source_language: str
    destination_language: str
    definitions: list[DefinitionInput]
    version: str = TRANSLATION_INPUT_VERSION


@dataclass(frozen=True)
class MeaningOutput:
    id: int
    meaning_translation: str | None = None


@dataclass(frozen=True)
class ContextOutput:
    id: int
    meanings: list[MeaningOutput] = field(default_factory=list)


@dataclass(frozen=True)
class DefinitionOutput:
    id: int
    headword_translation: str | None = None
    headword_translation_english: str | None = None
    contexts: list[ContextOutput] = field(default_factory=list)


@dataclass(frozen=True)
class TranslationOutput:
    definitions: list[DefinitionOutput] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationOutput":
        """Build from a decoded JSON object, tolerating missing or null lists.

        Raises:
            KeyError, TypeError, ValueError: If an id is missing or not an integer.
        """
        definitions = []
        for raw_definition in data.get("definitions") or []:
            contexts = []
            for raw_context in raw_definition.get("contexts") or []:
                meanings = [
                    MeaningOutput(
                        id=int(raw_meaning["id"]),
                        meaning_translation=raw_meaning.get("meaning_translation"),
                    )
                    for raw_meaning in raw_context.get("meanings") or []
                ]
                contexts.append(ContextOutput(id=int(raw_context["id"]), meanings=meanings))
            definitions.append(DefinitionOutput(
                id=int(raw_definition["id"]),
                headword_translation=raw_definition.get("headword_translation"),
                headword_translation_english=raw_definition.get("headword_translation_english"),
                contexts=contexts,
            ))
        return cls(definitions=definitions)

    def find_definition(self, definition_id: int) -> DefinitionOutput | None:
        return next((d for d in self.definitions if d.id == definition_id), None)
