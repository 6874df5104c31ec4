"""Tests for lookup request validation and response serialization."""

import unittest

from pydantic import ValidationError

from api.models import LookUpWordRequest, WordModelResponse
from domain.model.language import SourceLanguage
from domain.model.word import Context, Definition, Headword, Meaning, Variant, WordModel


class TestLookUpWordRequest(unittest.TestCase):

    def test_normalizes_fields(self):
        request = LookUpWordRequest(text="  haj ", source_language="danish", destination_language="english")

        self.assertEqual(request.text, "haj")
        self.assertEqual(request.destination_language, "English")
        self.assertEqual(request.version, "1")
        self.assertTrue(request.translate)

    def test_blank_text_rejected(self):
        with self.assertRaises(ValidationError):
            LookUpWordRequest(text="  ", source_language="Danish", destination_language="Russian")

    def test_unknown_destination_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            LookUpWordRequest(text="haj", source_language="Danish", destination_language="German")

        self.assertIn("Russian, English", str(ctx.exception))


class TestWordModelResponse(unittest.TestCase):

    def test_from_domain_model(self):
        word_model = WordModel(
            word="haj",
            source_language=SourceLanguage.DANISH,
            definitions=[Definition(
                headword=Headword(original="haj", russian="акула"),
                part_of_speech="substantiv, fælleskøn",
                endings="-en, -er, -erne",
                contexts=[Context(context_en="", position="1", meanings=[
                    Meaning(original="stor rovfisk", alphabetical_position="1"),
                ])],
            )],
            variations=[Variant("haj sb.", "https://ordnet.dk/ddo/ordbog?select=haj&query=haj")],
        )

        data = WordModelResponse.model_validate(word_model).model_dump(mode="json")

        self.assertEqual(data["source_language"], "Danish")
        self.assertIsNone(data["sound_url"])
        self.assertEqual(data["definitions"][0]["headword"]["russian"], "акула")
        meaning = data["definitions"][0]["contexts"][0]["meanings"][0]
        self.assertEqual(meaning["examples"], [{"original": "-", "translation": None}])
        self.assertEqual(data["variations"][0]["word"], "haj sb.")


if __name__ == '__main__':
    unittest.main()
