"""In-memory implementation of TranslationPort for testing."""

from domain.model.translation import TranslationInput, TranslationOutput


class FakeTranslationAdapter:
    """Fake translator that returns a preconfigured output or raises."""

    def __init__(self, output: TranslationOutput | None = None, error: Exception | None = None):
        self.output = output
        self.error = error
        self.inputs: list[TranslationInput] = []

    async def translate(self, translation_input: TranslationInput) -> TranslationOutput | None:
        self.inputs.append(translation_input)
        if self.error is not None:
            raise self.error
        return self.output


class EchoTranslationAdapter(FakeTranslationAdapter):
    """Translates every text to "<text> [<destination language>]"."""

    async def translate(self, translation_input: TranslationInput) -> TranslationOutput | None:
        self.inputs.append(translation_input)
        suffix = f"[{translation_input.destination_language}]"
        return TranslationOutput.from_dict({
            "definitions": [
                {
                    "id": definition.id,
                    "headword_translation": f"{definition.headword.text} {suffix}",
                    "headword_translation_english": f"{definition.headword.text} [English]",
                    "contexts": [
                        {
                            "id": context.id,
                            "meanings": [
                                {"id": meaning.id, "meaning_translation": f"{meaning.text} {suffix}"}
                                for meaning in context.meanings
                            ],
                        }
                        for context in definition.contexts
                    ],
                }
                for definition in translation_input.definitions
            ]
        })
