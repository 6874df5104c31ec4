"""Pydantic models for the JSON SpanishDict embeds in its translate pages.

Only the fields the parser reads are declared; everything else in the
blob is ignored. Field names are snake_case and map to the site's
camelCase keys through the alias generator.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class _SpanishDictModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # The site sends null for empty lists; fall back to field defaults
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Pronunciation(_SpanishDictModel):
    id: int
    region: str | None = None
    has_video: int = 0
    speaker_id: int | None = None
    version: int | None = None


class Headword(_SpanishDictModel):
    display_text: str
    pronunciations: list[Pronunciation] = []


class HeadwordAndQuickdefsProps(_SpanishDictModel):
    headword: Headword


class ResultCardHeaderProps(_SpanishDictModel):
    headword_and_quickdefs_props: HeadwordAndQuickdefsProps


class NamedLabel(_SpanishDictModel):
    name_en: str | None = None


class PosDisplay(_SpanishDictModel):
    name: str = ""


class Example(_SpanishDictModel):
    text_es: str = ""
    text_en: str | None = None


class Translation(_SpanishDictModel):
    translation: str
    context_en: str | None = None
    image_path: str | None = None
    register_labels: list[NamedLabel] = []
    examples: list[Example] = []


class Sense(_SpanishDictModel):
    subheadword: str | None = None
    context: str | None = None
    register_labels: list[NamedLabel] = []
    regions: list[NamedLabel] = []
    translations: list[Translation] = []


class PosGroup(_SpanishDictModel):
    pos_display: PosDisplay = PosDisplay()
    senses: list[Sense] = []


class Neodict(_SpanishDictModel):
    subheadword: str = ""
    pos_groups: list[PosGroup] = []


class Entry(_SpanishDictModel):
    neodict: list[Neodict] | None = None


class SdDictionaryResultsProps(_SpanishDictModel):
    entry: Entry | None = None


class WordJsonModel(_SpanishDictModel):
    """Root of ``window.SD_COMPONENT_DATA``."""

    lang_to: str | None = None
    site_url_base: str | None = None
    result_card_header_props: ResultCardHeaderProps | None = None
    sd_dictionary_results_props: SdDictionaryResultsProps | None = None
