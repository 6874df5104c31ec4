"""Translation port — outbound interface for translating a word model's texts."""

from typing import Protocol

from domain.model.translation import TranslationInput, TranslationOutput


class TranslationError(Exception):
    """Translation provider failed or returned an unusable response."""


class TranslationPort(Protocol):
    """Port for machine translation of headwords and meanings.

    Returns None when the provider answered but produced nothing usable.
    """

    async def translate(self, translation_input: TranslationInput) -> TranslationOutput | None: ...
