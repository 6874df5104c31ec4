"""Tests for the direct translation route using fakes through dependency overrides."""

import unittest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient
from api.main import app
from api.dependencies import get_translation_port
from adapter.fake.translation import EchoTranslationAdapter, FakeTranslationAdapter
from port.translation import TranslationError


def make_body(**overrides) -> dict:
    body = {
        "source_language": "Danish",
        "destination_language": "Russian",
        "version": "2",
        "definitions": [{
            "id": 1,
            "headword": {
                "text": "haj",
                "part_of_speech": "substantiv",
                "meaning": "stor rovfisk",
                "examples": ["hajen svømmede rundt"],
            },
            "contexts": [{
                "id": 1,
                "context_string": "",
                "meanings": [
                    {"id": 1, "text": "stor rovfisk", "part_of_speech": "substantiv", "examples": []},
                    {"id": 2, "text": "grisk person", "part_of_speech": "substantiv", "examples": ["-"]},
                ],
            }],
        }],
    }
    body.update(overrides)
    return body


class TestTranslate(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.translator = EchoTranslationAdapter()
        app.dependency_overrides[get_translation_port] = lambda: self.translator

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_translates_input(self):
        response = self.client.post("/api/translate", json=make_body())

        self.assertEqual(response.status_code, 200)
        definition = response.json()["definitions"][0]
        self.assertEqual(definition["id"], 1)
        self.assertEqual(definition["headword_translation"], "haj [Russian]")
        self.assertEqual(definition["headword_translation_english"], "haj [English]")
        self.assertEqual(definition["contexts"][0]["meanings"], [
            {"id": 1, "meaning_translation": "stor rovfisk [Russian]"},
            {"id": 2, "meaning_translation": "grisk person [Russian]"},
        ])

        translation_input = self.translator.inputs[0]
        self.assertEqual(translation_input.source_language, "Danish")
        self.assertEqual(translation_input.definitions[0].headword.examples, ["hajen svømmede rundt"])
        self.assertEqual(translation_input.definitions[0].contexts[0].meanings[1].examples, ["-"])

    def test_version_defaults_to_2(self):
        body = make_body()
        del body["version"]

        response = self.client.post("/api/translate", json=body)

        self.assertEqual(response.status_code, 200)

    def test_unsupported_version(self):
        response = self.client.post("/api/translate", json=make_body(version="1"))

        self.assertEqual(response.status_code, 400)
        self.assertIn("version 2", response.json()["detail"])
        self.assertEqual(self.translator.inputs, [])

    def test_provider_error_returns_502(self):
        app.dependency_overrides[get_translation_port] = lambda: FakeTranslationAdapter(
            error=TranslationError("provider down"),
        )

        response = self.client.post("/api/translate", json=make_body())

        self.assertEqual(response.status_code, 502)

    def test_no_output_returns_502(self):
        app.dependency_overrides[get_translation_port] = lambda: FakeTranslationAdapter(output=None)

        response = self.client.post("/api/translate", json=make_body())

        self.assertEqual(response.status_code, 502)

    def test_translation_disabled(self):
        app.dependency_overrides[get_translation_port] = lambda: None

        response = self.client.post("/api/translate", json=make_body())

        self.assertEqual(response.status_code, 503)


class TestTranslateValidation(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        app.dependency_overrides[get_translation_port] = lambda: EchoTranslationAdapter()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_empty_source_language(self):
        response = self.client.post("/api/translate", json=make_body(source_language=""))

        self.assertEqual(response.status_code, 422)

    def test_non_positive_id(self):
        body = make_body()
        body["definitions"][0]["contexts"][0]["meanings"][0]["id"] = 0

        response = self.client.post("/api/translate", json=body)

        self.assertEqual(response.status_code, 422)

    def test_empty_headword(self):
        body = make_body()
        body["definitions"][0]["headword"]["text"] = ""

        response = self.client.post("/api/translate", json=body)

        self.assertEqual(response.status_code, 422)

    def test_missing_definitions(self):
        body = make_body()
        del body["definitions"]

        response = self.client.post("/api/translate", json=body)

        self.assertEqual(response.status_code, 422)


if __name__ == '__main__':
    unittest.main()
