"""Tests for SpanishDictPageParser and its JSON projection helpers."""

import unittest
from pathlib import Path

from adapter.parser.spanishdict import (
    IMAGE_BASE_URL,
    SpanishDictPageParser,
    encode_image_file_name,
    format_context,
    format_translation,
)
from adapter.parser.spanishdict_json import Sense, Translation
from domain.model.errors import InvalidInputError, SpanishDictParserError
from domain.model.word import EMPTY_EXAMPLE_TEXT, Example, Variant

FIXTURES = Path(__file__).parent / "fixtures"


def load_page(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class TestParseWordJson(unittest.TestCase):

    def setUp(self):
        self.parser = SpanishDictPageParser()

    def test_finds_component_data_script(self):
        """Test the component data script is found among other scripts."""
        word_obj = self.parser.parse_word_json(load_page("Afeitar.html"))

        self.assertIsNotNone(word_obj)
        self.assertEqual(word_obj.lang_to, "en")
        self.assertEqual(self.parser.parse_headword(word_obj), "afeitar")

    def test_translator_page_returns_none(self):
        """Test page without a dictionary result."""
        self.assertIsNone(self.parser.parse_word_json(load_page("SpanishDictNotFound.html")))

    def test_missing_script_raises(self):
        with self.assertRaises(SpanishDictParserError) as ctx:
            self.parser.parse_word_json("<html><body><script>var x = 1;</script></body></html>")

        self.assertEqual(ctx.exception.selector, "script")

    def test_invalid_json_raises(self):
        html = "<html><script>window.SD_COMPONENT_DATA = {not json};</script></html>"

        with self.assertRaises(SpanishDictParserError):
            self.parser.parse_word_json(html)

    def test_empty_html_raises(self):
        with self.assertRaises(InvalidInputError):
            self.parser.parse_word_json("")

    def test_none_model_raises(self):
        with self.assertRaises(InvalidInputError):
            self.parser.parse_headword(None)
        with self.assertRaises(InvalidInputError):
            self.parser.parse_definitions(None)


class TestSoundUrl(unittest.TestCase):

    def setUp(self):
        self.parser = SpanishDictPageParser()

    def test_prefers_spain_speaker(self):
        word_obj = self.parser.parse_word_json(load_page("Afeitar.html"))

        self.assertEqual(
            self.parser.parse_sound_url(word_obj),
            "https://d10gt6izjc94x0.cloudfront.net/desktop/"
            "lang_es_pron_4189_speaker_7_syllable_all_version_50.mp4",
        )

    def test_falls_back_to_latin_america(self):
        """Test Spain entry without video is skipped."""
        word_obj = self.parser.parse_word_json(load_page("Guay.html"))

        self.assertEqual(
            self.parser.parse_sound_url(word_obj),
            "https://d10gt6izjc94x0.cloudfront.net/desktop/"
            "lang_es_pron_21741_speaker_5_syllable_all_version_3.mp4",
        )

    def test_no_video_returns_none(self):
        html = (
            '<script>window.SD_COMPONENT_DATA = {"resultCardHeaderProps": {"headwordAndQuickdefsProps": '
            '{"headword": {"displayText": "casa", "pronunciations": [{"id": 1, "region": "SPAIN", "hasVideo": 0}]}}}};'
            '</script>'
        )
        word_obj = self.parser.parse_word_json(html)

        self.assertIsNone(self.parser.parse_sound_url(word_obj))


class TestDefinitions(unittest.TestCase):

    def setUp(self):
        self.parser = SpanishDictPageParser()

    def test_one_definition_per_neodict(self):
        word_obj = self.parser.parse_word_json(load_page("Afeitar.html"))

        definitions = self.parser.parse_definitions(word_obj)

        self.assertEqual([d.word_es for d in definitions], ["afeitar", "afeitarse"])
        self.assertEqual([d.part_of_speech for d in definitions], ["transitive verb", "reflexive verb"])

        context = definitions[0].contexts[0]
        self.assertEqual(context.context_en, "(to remove hair)")
        self.assertEqual(context.position, 1)
        self.assertEqual(context.meanings[0].original, "to shave")
        self.assertEqual(context.meanings[0].alphabetical_position, "a")
        self.assertEqual(context.meanings[0].examples, [Example(
            "Para el verano, papá decidió afeitar al perro.",
            "For the summer, dad decided to shave the dog.",
        )])

        reflexive = definitions[1].contexts[0]
        self.assertEqual(reflexive.context_en, "(to shave oneself)")
        self.assertEqual(reflexive.meanings[0].examples[0].original, "¿Con qué frecuencia te afeitas la barba?")

    def test_senses_of_all_pos_groups_are_flattened(self):
        """Test contexts numbered across part-of-speech groups."""
        word_obj = self.parser.parse_word_json(load_page("Guay.html"))

        definitions = self.parser.parse_definitions(word_obj)

        self.assertEqual(len(definitions), 1)
        self.assertEqual(definitions[0].part_of_speech, "interjection, adjective")
        contexts = definitions[0].contexts
        self.assertEqual([c.position for c in contexts], [1, 2])
        self.assertEqual(contexts[0].context_en, "(colloquial) (used to express approval) (Spain)")
        self.assertEqual(contexts[1].context_en, "(colloquial) (excellent)")

    def test_meanings(self):
        word_obj = self.parser.parse_word_json(load_page("Guay.html"))

        meanings = self.parser.parse_definitions(word_obj)[0].contexts[0].meanings

        self.assertEqual([m.original for m in meanings], ["cool (colloquial)", "great (excellent)"])
        self.assertEqual([m.alphabetical_position for m in meanings], ["a", "b"])
        self.assertIsNone(meanings[0].image_url)
        self.assertEqual(meanings[1].image_url, IMAGE_BASE_URL + "thumbs%2520up%252C%2520cool.jpg")
        self.assertEqual(meanings[1].examples, [Example(EMPTY_EXAMPLE_TEXT)])

    def test_missing_neodict_raises(self):
        html = (
            '<script>window.SD_COMPONENT_DATA = {"resultCardHeaderProps": {"headwordAndQuickdefsProps": '
            '{"headword": {"displayText": "casa"}}}, "sdDictionaryResultsProps": {"entry": {}}};</script>'
        )
        word_obj = self.parser.parse_word_json(html)

        with self.assertRaises(SpanishDictParserError):
            self.parser.parse_definitions(word_obj)


class TestVariants(unittest.TestCase):

    def setUp(self):
        self.parser = SpanishDictPageParser()

    def test_variant_per_pos_group(self):
        word_obj = self.parser.parse_word_json(load_page("Afeitar.html"))

        self.assertEqual(self.parser.parse_variants(word_obj), [
            Variant("afeitar (transitive verb)", "https://www.spanishdict.com/translate/afeitar?n=0&p=0"),
            Variant("afeitarse (reflexive verb)", "https://www.spanishdict.com/translate/afeitar?n=1&p=0"),
        ])

    def test_none_model_has_no_variants(self):
        self.assertEqual(self.parser.parse_variants(None), [])


class TestFormatting(unittest.TestCase):

    def test_format_context_without_labels(self):
        self.assertEqual(format_context(Sense(context="to remove hair")), "(to remove hair)")

    def test_format_context_with_label_and_region(self):
        sense = Sense.model_validate({
            "context": "used to express approval",
            "registerLabels": [{"nameEn": "colloquial"}],
            "regions": [{"nameEn": "Spain"}],
        })

        self.assertEqual(format_context(sense), "(colloquial) (used to express approval) (Spain)")

    def test_format_context_without_context_phrase(self):
        self.assertEqual(format_context(Sense()), "")
        sense = Sense.model_validate({"registerLabels": [{"nameEn": "colloquial"}]})
        self.assertEqual(format_context(sense), "(colloquial)")

    def test_format_translation(self):
        translation = Translation.model_validate({
            "translation": "cool",
            "registerLabels": [{"nameEn": "colloquial"}],
            "contextEn": "approving",
        })

        self.assertEqual(format_translation(translation), "cool (colloquial) (approving)")

    def test_encode_image_file_name(self):
        self.assertEqual(
            encode_image_file_name("/dictionary-images/native, indigenous.jpg"),
            "native%252C%2520indigenous.jpg",
        )
        self.assertEqual(encode_image_file_name("dog's (bed);1.jpg"), "dog%2527s%2520%2528bed%2529%253B1.jpg")

    def test_encode_image_file_name_is_idempotent(self):
        """Test already encoded names come back unchanged."""
        for name in ("native%252C%2520indigenous.jpg", "native%2C%20indigenous.jpg", "native, indigenous.jpg"):
            with self.subTest(name=name):
                self.assertEqual(encode_image_file_name(name), "native%252C%2520indigenous.jpg")


if __name__ == '__main__':
    unittest.main()
