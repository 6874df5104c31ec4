"""Translation service: augments a WordModel with translations.

Builds a TranslationInput from the word model, sends it through the
TranslationPort, and merges the output back into a new WordModel by the
positional ids of definitions, contexts and meanings.
"""

import logging
from dataclasses import replace

from domain.model.translation import (
    ContextInput,
    ContextOutput,
    DefinitionInput,
    DefinitionOutput,
    HeadwordInput,
    MeaningInput,
    TranslationInput,
    TranslationOutput,
)
from domain.model.word import Context, Definition, Headword, WordModel
from port.translation import TranslationError, TranslationPort

logger = logging.getLogger(__name__)

DEFAULT_DESTINATION_LANGUAGE = "Russian"

# Destination languages with a headword slot in the word model
SUPPORTED_DESTINATION_LANGUAGES = ("Russian", "English")


class TranslationService:
    """Fills headword and meaning translations of a WordModel."""

    def __init__(self, translation_port: TranslationPort):
        self.translation_port = translation_port

    async def translate(
        self,
        word_model: WordModel,
        destination_language: str = DEFAULT_DESTINATION_LANGUAGE,
    ) -> WordModel:
        """Return a translated copy of ``word_model``.

        The input model is returned unchanged when the provider has nothing.

        Raises:
            TranslationError: If the translation provider fails.
        """
        translation_input = build_translation_input(word_model, destination_language)
        translation_output = await self.translation_port.translate(translation_input)

        if translation_output is None:
            logger.warning("Translation provider returned no output", extra={
                "word": word_model.word,
                "source_language": word_model.source_language.value,
                "destination_language": destination_language,
            })
            return word_model

        logger.info("Word model translated", extra={
            "word": word_model.word,
            "destination_language": destination_language,
            "definitions": len(translation_output.definitions),
        })
        return merge_translation_output(word_model, translation_output, destination_language)

    async def translate_input(self, translation_input: TranslationInput) -> TranslationOutput:
        """Translate a caller-built TranslationInput as is.

        Raises:
            TranslationError: If the provider fails or has nothing to return.
        """
        headwords = list(dict.fromkeys(d.headword.text for d in translation_input.definitions))
        logger.info("Translating headwords", extra={
            "headwords": headwords,
            "source_language": translation_input.source_language,
            "destination_language": translation_input.destination_language,
        })

        translation_output = await self.translation_port.translate(translation_input)
        if translation_output is None:
            raise TranslationError("Translation provider returned no output")
        return translation_output


def build_translation_input(word_model: WordModel, destination_language: str) -> TranslationInput:
    definitions = []
    for definition_id, definition in enumerate(word_model.definitions, start=1):
        first_meaning = next(
            (meaning for context in definition.contexts[:1] for meaning in context.meanings[:1]),
            None,
        )
        headword = HeadwordInput(
            text=definition.headword.original,
            part_of_speech=definition.part_of_speech,
            meaning=first_meaning.original if first_meaning else "",
            examples=[example.original for example in first_meaning.examples] if first_meaning else [],
        )

        contexts = [
            ContextInput(
                id=context_id,
                context_string=context.context_en,
                meanings=[
                    MeaningInput(
                        id=meaning_id,
                        text=meaning.original,
                        part_of_speech=definition.part_of_speech,
                        examples=[example.original for example in meaning.examples],
                    )
                    for meaning_id, meaning in enumerate(context.meanings, start=1)
                ],
            )
            for context_id, context in enumerate(definition.contexts, start=1)
        ]

        definitions.append(DefinitionInput(id=definition_id, headword=headword, contexts=contexts))

    return TranslationInput(
        source_language=word_model.source_language.value,
        destination_language=destination_language,
        definitions=definitions,
    )


def merge_translation_output(
    word_model: WordModel,
    translation_output: TranslationOutput,
    destination_language: str = DEFAULT_DESTINATION_LANGUAGE,
) -> WordModel:
    definitions = []
    for definition_id, definition in enumerate(word_model.definitions, start=1):
        translated = translation_output.find_definition(definition_id)
        if translated is None:
            definitions.append(definition)
            continue
        definitions.append(_merge_definition(definition, translated, destination_language))
    return replace(word_model, definitions=definitions)


def _merge_definition(
    definition: Definition,
    translated: DefinitionOutput,
    destination_language: str,
) -> Definition:
    contexts = []
    for context_id, context in enumerate(definition.contexts, start=1):
        # Providers sometimes drop the contexts of entries without meanings
        translated_context = next(
            (c for c in translated.contexts if c.id == context_id),
            ContextOutput(id=context_id),
        )
        contexts.append(_merge_context(context, translated_context))

    return replace(
        definition,
        headword=_merge_headword(definition.headword, translated, destination_language),
        contexts=contexts,
    )


def _merge_context(context: Context, translated: ContextOutput) -> Context:
    translations = {meaning.id: meaning.meaning_translation for meaning in translated.meanings}
    meanings = [
        replace(meaning, translation=translations.get(meaning_id))
        for meaning_id, meaning in enumerate(context.meanings, start=1)
    ]
    return replace(context, meanings=meanings)


def _merge_headword(
    headword: Headword,
    translated: DefinitionOutput,
    destination_language: str,
) -> Headword:
    english = translated.headword_translation_english
    russian = None
    if destination_language.lower() == "english":
        english = translated.headword_translation or english
    else:
        russian = translated.headword_translation
    return replace(headword, english=english, russian=russian)
