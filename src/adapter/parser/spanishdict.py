"""SpanishDict (spanishdict.com) page parser.

SpanishDict renders its dictionary results client-side from a JSON blob
assigned to ``window.SD_COMPONENT_DATA`` in one of the page's scripts.
The parser recovers that blob, validates it into a WordJsonModel and
projects it to definitions, sound URL and variants.

The parser holds no document state: every method takes the model it
works on, so one instance can serve concurrent requests.
"""

import logging
from urllib.parse import quote_plus, unquote_plus

from pydantic import ValidationError as PydanticValidationError

from adapter.parser.page_parser_base import PageDocument
from adapter.parser.spanishdict_json import NamedLabel, Sense, Translation, WordJsonModel
from domain.model.errors import InvalidInputError, SpanishDictParserError
from domain.model.spanishdict import SpanishDictContext, SpanishDictDefinition, SpanishDictMeaning
from domain.model.word import Example, Variant, placeholder_examples

logger = logging.getLogger(__name__)

SPANISHDICT_BASE_URL = "https://www.spanishdict.com/translate/"
SOUND_BASE_URL = "https://d10gt6izjc94x0.cloudfront.net/desktop/"
IMAGE_BASE_URL = "https://d25rq8gxcq0p71.cloudfront.net/dictionary-images/300/"

COMPONENT_DATA_MARKER = "window.SD_COMPONENT_DATA"

# Regions in order of preference; entries without video use a synthetic voice
_SOUND_REGIONS = ("SPAIN", "LATAM")

# Applied in order, "%" last
_IMAGE_ESCAPES = (
    (",", "%2C"),
    (";", "%3B"),
    ("'", "%27"),
    ("(", "%28"),
    (")", "%29"),
    (" ", "%20"),
    ("%", "%25"),
)


class SpanishDictPageParser:
    """Parser for SpanishDict translate pages."""

    def parse_word_json(self, html: str | None) -> WordJsonModel | None:
        """Extract the embedded component data from a translate page.

        Returns:
            The parsed model, or None when the page carries no dictionary
            result (SpanishDict shows its machine translator instead).

        Raises:
            InvalidInputError: If ``html`` is empty.
            SpanishDictParserError: If the script is missing or its JSON is invalid.
        """
        document = PageDocument.load(html)

        raw_json = None
        for script in document.find_all("script"):
            if len(script.contents) != 1:
                continue
            text = str(script.contents[0]).lstrip()
            if text.startswith(COMPONENT_DATA_MARKER):
                raw_json = _strip_assignment(text)
                break

        if raw_json is None:
            raise SpanishDictParserError(
                f"Cannot find script with '{COMPONENT_DATA_MARKER}'",
                selector="script",
            )

        try:
            word_obj = WordJsonModel.model_validate_json(raw_json)
        except PydanticValidationError as e:
            raise SpanishDictParserError(
                f"Cannot parse '{COMPONENT_DATA_MARKER}' JSON: {e.error_count()} error(s)",
                selector="script",
            ) from e

        if word_obj.result_card_header_props is None:
            logger.debug("SpanishDict page has no dictionary result")
            return None
        return word_obj

    def parse_headword(self, word_obj: WordJsonModel | None) -> str:
        header = _require(word_obj).result_card_header_props
        if header is None:
            raise SpanishDictParserError("Word model has no header props", selector="resultCardHeaderProps")
        return header.headword_and_quickdefs_props.headword.display_text

    def parse_sound_url(self, word_obj: WordJsonModel | None) -> str | None:
        """MP4 pronunciation video, preferring a Spain speaker over Latin America."""
        header = _require(word_obj).result_card_header_props
        if header is None:
            return None
        pronunciations = header.headword_and_quickdefs_props.headword.pronunciations

        for region in _SOUND_REGIONS:
            pronunciation = next(
                (p for p in pronunciations if p.region == region and p.has_video == 1),
                None,
            )
            if pronunciation is not None:
                return (
                    f"{SOUND_BASE_URL}lang_es_pron_{pronunciation.id}"
                    f"_speaker_{pronunciation.speaker_id}"
                    f"_syllable_all_version_{pronunciation.version}.mp4"
                )
        return None

    def parse_definitions(self, word_obj: WordJsonModel | None) -> list[SpanishDictDefinition]:
        """One definition per neodict group, senses of all its POS groups flattened.

        Raises:
            InvalidInputError: If ``word_obj`` is None.
            SpanishDictParserError: If the model has no neodict entries.
        """
        neodicts = _neodicts(_require(word_obj))
        if neodicts is None:
            raise SpanishDictParserError(
                "No 'neodict' entries found in the word model",
                selector="sdDictionaryResultsProps.entry.neodict",
            )

        definitions = []
        for neodict in neodicts:
            parts_of_speech: list[str] = []
            contexts: list[SpanishDictContext] = []
            for pos_group in neodict.pos_groups:
                name = pos_group.pos_display.name
                if name and name not in parts_of_speech:
                    parts_of_speech.append(name)
                for sense in pos_group.senses:
                    contexts.append(SpanishDictContext(
                        context_en=format_context(sense),
                        position=len(contexts) + 1,
                        meanings=_parse_meanings(sense),
                    ))

            definitions.append(SpanishDictDefinition(
                word_es=neodict.subheadword,
                part_of_speech=", ".join(parts_of_speech),
                contexts=contexts,
            ))
        return definitions

    def parse_variants(self, word_obj: WordJsonModel | None) -> list[Variant]:
        """One variant per part-of-speech group, linking back to the same headword."""
        if word_obj is None:
            return []
        neodicts = _neodicts(word_obj)
        if neodicts is None:
            return []

        base_url = word_obj.site_url_base or SPANISHDICT_BASE_URL.removesuffix("/translate/")
        search_term = quote_plus(self.parse_headword(word_obj))

        variants = []
        for neodict_index, neodict in enumerate(neodicts):
            for group_index, pos_group in enumerate(neodict.pos_groups):
                word_es = pos_group.senses[0].subheadword if pos_group.senses else None
                variants.append(Variant(
                    word=f"{word_es or neodict.subheadword} ({pos_group.pos_display.name})",
                    url=f"{base_url}/translate/{search_term}?n={neodict_index}&p={group_index}",
                ))
        return variants


# ── Projection helpers ───────────────────────────────────────


def format_context(sense: Sense) -> str:
    """Context label, e.g. "(colloquial) (used to express approval) (Spain)".

    Empty parts are left out, so a bare sense gives "".
    """
    parts = [_first_name(sense.register_labels), sense.context, _first_name(sense.regions)]
    return " ".join(f"({part})" for part in parts if part)


def format_translation(translation: Translation) -> str:
    """Display text, e.g. "cool (colloquial)"."""
    text = translation.translation
    label = _first_name(translation.register_labels)
    if label:
        text = f"{text} ({label})"
    if translation.context_en:
        text = f"{text} ({translation.context_en})"
    return text


def encode_image_file_name(image_path: str) -> str:
    """Re-encode the file name of an image path the way the image CDN expects.

    The site mixes encoded and decoded file names, so the name is always
    decoded first and then escaped with a fixed table. Applying this to
    its own output returns the same string.
    """
    file_name = unquote_plus(image_path.rstrip("/").split("/")[-1])
    for char, code in _IMAGE_ESCAPES:
        file_name = file_name.replace(char, code)
    return file_name


def _parse_meanings(sense: Sense) -> list[SpanishDictMeaning]:
    meanings = []
    for index, translation in enumerate(sense.translations):
        image_url = None
        if translation.image_path:
            image_url = IMAGE_BASE_URL + encode_image_file_name(translation.image_path)

        examples = [
            Example(original=example.text_es, translation=example.text_en)
            for example in translation.examples
        ]
        meanings.append(SpanishDictMeaning(
            original=format_translation(translation),
            alphabetical_position=chr(ord("a") + index),
            image_url=image_url,
            examples=examples or placeholder_examples(),
        ))
    return meanings


def _first_name(labels: list[NamedLabel]) -> str | None:
    return labels[0].name_en if labels else None


def _neodicts(word_obj: WordJsonModel):
    results = word_obj.sd_dictionary_results_props
    if results is None or results.entry is None:
        return None
    return results.entry.neodict


def _require(word_obj: WordJsonModel | None) -> WordJsonModel:
    if word_obj is None:
        raise InvalidInputError("word_obj must not be None")
    return word_obj


def _strip_assignment(script_text: str) -> str:
    text = script_text[len(COMPONENT_DATA_MARKER):].strip()
    text = text.removeprefix("=").strip()
    return text.removesuffix(";").rstrip()
