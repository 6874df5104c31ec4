"""Pydantic models for API request/response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.model.language import SourceLanguage
from domain.model.translation import (
    TRANSLATION_INPUT_VERSION,
    ContextInput,
    DefinitionInput,
    HeadwordInput,
    MeaningInput,
    TranslationInput,
)
from services.translation_service import SUPPORTED_DESTINATION_LANGUAGES

LOOKUP_REQUEST_VERSION = "1"


class LookUpWordRequest(BaseModel):
    """Request model for looking up a word."""
    text: str = Field(..., min_length=1, description="Word, phrase or dictionary URL to look up")
    source_language: str = Field(..., min_length=1, description="Danish or Spanish (case-insensitive)")
    destination_language: str = Field(..., min_length=1, description="Language to translate into")
    version: str = Field(LOOKUP_REQUEST_VERSION, description="Request format version, only \"1\" is accepted")
    translate: bool = Field(True, description="Fill translations after the lookup")

    @field_validator('text')
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("'text' must not be empty")
        return v

    @field_validator('destination_language')
    @classmethod
    def normalize_destination_language(cls, v: str) -> str:
        v = v.strip()
        for supported in SUPPORTED_DESTINATION_LANGUAGES:
            if supported.lower() == v.lower():
                return supported
        raise ValueError(
            f"'destination_language' must be one of the following: {', '.join(SUPPORTED_DESTINATION_LANGUAGES)}"
        )


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ExampleResponse(_FromDomain):
    original: str
    translation: Optional[str] = None


class MeaningResponse(_FromDomain):
    original: str
    translation: Optional[str] = None
    alphabetical_position: str
    tag: Optional[str] = None
    image_url: Optional[str] = None
    examples: list[ExampleResponse]


class ContextResponse(_FromDomain):
    context_en: str
    position: str
    meanings: list[MeaningResponse]


class HeadwordResponse(_FromDomain):
    original: str
    english: Optional[str] = None
    russian: Optional[str] = None


class DefinitionResponse(_FromDomain):
    headword: HeadwordResponse
    part_of_speech: str
    endings: str
    contexts: list[ContextResponse]


class VariantResponse(_FromDomain):
    word: str
    url: str


class WordModelResponse(_FromDomain):
    """Response model for a looked-up word."""
    word: str
    source_language: SourceLanguage
    sound_url: Optional[str] = Field(None, description="Pronunciation file, absent when the page has none")
    sound_file_name: Optional[str] = None
    definitions: list[DefinitionResponse]
    variations: list[VariantResponse] = Field(default_factory=list)


# ── Direct translation ───────────────────────────────────────


class HeadwordTranslationRequest(BaseModel):
    text: str = Field(..., min_length=1)
    part_of_speech: str = ""
    meaning: str = ""
    examples: list[str] = Field(default_factory=list)


class MeaningTranslationRequest(BaseModel):
    id: int = Field(..., gt=0)
    text: str
    part_of_speech: str = ""
    examples: list[str]


class ContextTranslationRequest(BaseModel):
    id: int = Field(..., gt=0)
    context_string: str = ""
    meanings: list[MeaningTranslationRequest]


class DefinitionTranslationRequest(BaseModel):
    id: int = Field(..., gt=0)
    headword: HeadwordTranslationRequest
    contexts: list[ContextTranslationRequest]


class TranslateRequest(BaseModel):
    """Request model for translating headwords and meanings directly."""
    source_language: str = Field(..., min_length=1)
    destination_language: str = Field(..., min_length=1)
    definitions: list[DefinitionTranslationRequest]
    version: str = Field(TRANSLATION_INPUT_VERSION, description="Request format version, only \"2\" is accepted")

    def to_domain(self) -> TranslationInput:
        return TranslationInput(
            source_language=self.source_language,
            destination_language=self.destination_language,
            version=self.version,
            definitions=[
                DefinitionInput(
                    id=definition.id,
                    headword=HeadwordInput(**definition.headword.model_dump()),
                    contexts=[
                        ContextInput(
                            id=context.id,
                            context_string=context.context_string,
                            meanings=[MeaningInput(**meaning.model_dump()) for meaning in context.meanings],
                        )
                        for context in definition.contexts
                    ],
                )
                for definition in self.definitions
            ],
        )


class MeaningTranslationResponse(_FromDomain):
    id: int
    meaning_translation: Optional[str] = None


class ContextTranslationResponse(_FromDomain):
    id: int
    meanings: list[MeaningTranslationResponse]


class DefinitionTranslationResponse(_FromDomain):
    id: int
    headword_translation: Optional[str] = None
    headword_translation_english: Optional[str] = None
    contexts: list[ContextTranslationResponse]


class TranslateResponse(_FromDomain):
    """Response model for a direct translation."""
    definitions: list[DefinitionTranslationResponse]
