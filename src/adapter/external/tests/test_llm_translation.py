"""Tests for LLMTranslationAdapter."""

import json
import unittest

from adapter.external.llm_translation import TRANSLATION_MAX_TOKENS, LLMTranslationAdapter
from adapter.fake.llm import FakeLLMAdapter
from domain.model.translation import (
    ContextInput,
    DefinitionInput,
    HeadwordInput,
    MeaningInput,
    TranslationInput,
)
from port.llm import LLMTimeoutError
from port.translation import TranslationError


def make_input() -> TranslationInput:
    return TranslationInput(
        source_language="Spanish",
        destination_language="Russian",
        definitions=[DefinitionInput(
            id=1,
            headword=HeadwordInput(
                text="afeitar", part_of_speech="transitive verb",
                meaning="to shave", examples=["Para el verano, papá decidió afeitar al perro."],
            ),
            contexts=[ContextInput(id=1, context_string="(to remove hair)", meanings=[
                MeaningInput(id=1, text="to shave", part_of_speech="transitive verb"),
            ])],
        )],
    )


ANSWER = {
    "definitions": [{
        "id": 1,
        "headword_translation": "брить",
        "headword_translation_english": "to shave",
        "contexts": [{"id": 1, "meanings": [{"id": 1, "meaning_translation": "брить"}]}],
    }]
}


class TestLLMTranslationAdapter(unittest.IsolatedAsyncioTestCase):

    async def test_translate(self):
        llm = FakeLLMAdapter(response=json.dumps(ANSWER, ensure_ascii=False))
        adapter = LLMTranslationAdapter(llm, model="openai/test-model", timeout=12)

        output = await adapter.translate(make_input())

        definition = output.find_definition(1)
        self.assertEqual(definition.headword_translation, "брить")
        self.assertEqual(definition.headword_translation_english, "to shave")
        self.assertEqual(definition.contexts[0].meanings[0].meaning_translation, "брить")

        call = llm.calls[0]
        self.assertEqual(call["model"], "openai/test-model")
        self.assertEqual(call["timeout"], 12)
        self.assertEqual(call["max_tokens"], TRANSLATION_MAX_TOKENS)
        prompt = call["messages"][0]["content"]
        self.assertIn("from Spanish to Russian", prompt)
        self.assertIn('"context_string": "(to remove hair)"', prompt)
        self.assertIn("papá", prompt)

    async def test_markdown_wrapped_answer(self):
        content = "Here you go:\n```json\n" + json.dumps(ANSWER) + "\n```"
        adapter = LLMTranslationAdapter(FakeLLMAdapter(response=content))

        output = await adapter.translate(make_input())

        self.assertEqual(output.find_definition(1).headword_translation, "брить")

    async def test_unusable_answer_returns_none(self):
        adapter = LLMTranslationAdapter(FakeLLMAdapter(response="I cannot translate this."))

        with self.assertLogs("adapter.external.llm_translation", level="WARNING"):
            self.assertIsNone(await adapter.translate(make_input()))

    async def test_missing_ids_return_none(self):
        adapter = LLMTranslationAdapter(FakeLLMAdapter(response='{"definitions": [{"contexts": []}]}'))

        with self.assertLogs("adapter.external.llm_translation", level="WARNING"):
            self.assertIsNone(await adapter.translate(make_input()))

    async def test_llm_error_becomes_translation_error(self):
        adapter = LLMTranslationAdapter(FakeLLMAdapter(error=LLMTimeoutError("timed out")))

        with self.assertLogs("adapter.external.llm_translation", level="ERROR"):
            with self.assertRaises(TranslationError):
                await adapter.translate(make_input())


if __name__ == '__main__':
    unittest.main()
