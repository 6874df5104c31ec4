"""Prompt templates for LLM interactions."""


def build_translation_prompt(
    source_language: str,
    destination_language: str,
    input_json: str,
) -> str:
    """Prompt for translating the headwords and meanings of a word model."""
    return f"""Translate the following JSON data from {source_language} to {destination_language}.

For each item in "definitions" translate "headword.text":
    - Keep the part of speech given in "headword.part_of_speech".
    - Use "headword.meaning" to pick the right sense.
    - Read "headword.examples" to understand the context.

For each item in "definitions", go through "contexts" and their "meanings" and translate "text":
    - Use "part_of_speech" and the context's "context_string" to pick the right sense.
    - Read "examples" to understand the context.
    - Keep the same part of speech in the translation.

Output requirements:
    - "headword_translation": 1 to 3 {destination_language} translations of "headword.text", separated by commas.
    - "headword_translation_english": 1 to 3 English translations of "headword.text", separated by commas.
    - If the part of speech is a verb, start each English translation with the infinitive marker "to".
    - "meaning_translation": the {destination_language} translation of the meaning "text".
    - Keep every "id" from the input so translations can be matched back.

Respond with JSON only, no explanation:
{{"definitions": [{{"id": 1, "headword_translation": "...", "headword_translation_english": "...", "contexts": [{{"id": 1, "meanings": [{{"id": 1, "meaning_translation": "..."}}]}}]}}]}}

Input JSON:
{input_json}
"""
