"""Azure Translator adapter implementing TranslationPort with the Translator v3 REST API.

API Documentation: https://learn.microsoft.com/azure/ai-services/translator/reference/v3-0-translate

All headwords and meanings of a word model go out in one request, with
English always requested next to the destination language so the
headword's English slot is filled as well.
"""

import logging
import os

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.language import get_language
from domain.model.translation import (
    ContextOutput,
    DefinitionOutput,
    MeaningOutput,
    TranslationInput,
    TranslationOutput,
)
from port.translation import TranslationError

logger = logging.getLogger(__name__)

AZURE_TRANSLATOR_ENDPOINT = os.getenv(
    "AZURE_TRANSLATOR_ENDPOINT", "https://api.cognitive.microsofttranslator.com",
)
AZURE_TRANSLATOR_KEY = os.getenv("AZURE_TRANSLATOR_KEY", "")
AZURE_TRANSLATOR_REGION = os.getenv("AZURE_TRANSLATOR_REGION", "")
API_TIMEOUT_SECONDS = 10.0

DESTINATION_CODES = {"russian": "ru", "english": "en"}


class AzureTranslatorAdapter:
    """Adapter that translates word model texts with Azure Translator."""

    def __init__(
        self,
        key: str = AZURE_TRANSLATOR_KEY,
        region: str = AZURE_TRANSLATOR_REGION,
        endpoint: str = AZURE_TRANSLATOR_ENDPOINT,
    ):
        self.key = key
        self.region = region
        self.endpoint = endpoint.rstrip("/")

    async def translate(self, translation_input: TranslationInput) -> TranslationOutput | None:
        """Translate headwords and meanings.

        Raises:
            TranslationError: On missing configuration, unsupported languages or API failure.
        """
        if not self.key:
            raise TranslationError("AZURE_TRANSLATOR_KEY is not configured")

        source = get_language(translation_input.source_language)
        destination_code = DESTINATION_CODES.get(translation_input.destination_language.lower())
        if source is None or destination_code is None:
            raise TranslationError(
                f"Cannot translate from {translation_input.source_language} "
                f"to {translation_input.destination_language}"
            )

        texts = _collect_texts(translation_input)
        if not texts:
            return None

        targets = [destination_code] if destination_code == "en" else [destination_code, "en"]
        translated = await self._translate_texts(texts, source.code, targets)
        return _build_output(translation_input, translated, destination_code)

    async def _translate_texts(
        self, texts: list[str], source_code: str, targets: list[str],
    ) -> list[dict[str, str]]:
        """Translate texts; returns one {language code: text} dict per input text."""
        params = [("api-version", "3.0"), ("from", source_code)] + [("to", code) for code in targets]
        headers = {"Ocp-Apim-Subscription-Key": self.key}
        if self.region:
            headers["Ocp-Apim-Subscription-Region"] = self.region

        try:
            async with httpx.AsyncClient(timeout=API_TIMEOUT_SECONDS) as client:
                response = await _post_with_retry(
                    client,
                    f"{self.endpoint}/translate",
                    params=params,
                    headers=headers,
                    json=[{"Text": text} for text in texts],
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Azure Translator HTTP error", extra={
                "status_code": e.response.status_code,
            })
            raise TranslationError(f"Azure Translator returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning("Azure Translator request error", extra={
                "error_type": type(e).__name__,
            })
            raise TranslationError(f"Azure Translator request failed: {type(e).__name__}") from e

        try:
            translated = [
                {t["to"]: t["text"] for t in item.get("translations") or []}
                for item in response.json()
            ]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Azure Translator response has unexpected shape", extra={
                "error_type": type(e).__name__,
                "content_preview": response.text[:200],
            })
            raise TranslationError("Azure Translator returned an unreadable response") from e

        logger.debug("Azure Translator call completed", extra={
            "texts": len(texts), "targets": targets,
        })
        return translated


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _post_with_retry(client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
    """POST with automatic retry on transient failures."""
    return await client.post(url, **kwargs)


# ── Request/response mapping ─────────────────────────────────


def _collect_texts(translation_input: TranslationInput) -> list[str]:
    """Headword then meanings of each definition, in input order."""
    texts = []
    for definition in translation_input.definitions:
        texts.append(definition.headword.text)
        for context in definition.contexts:
            texts.extend(meaning.text for meaning in context.meanings)
    return texts


def _build_output(
    translation_input: TranslationInput,
    translated: list[dict[str, str]],
    destination_code: str,
) -> TranslationOutput:
    remaining = iter(translated)

    def next_translation() -> dict[str, str]:
        return next(remaining, {})

    definitions = []
    for definition in translation_input.definitions:
        headword = next_translation()
        contexts = [
            ContextOutput(
                id=context.id,
                meanings=[
                    MeaningOutput(id=meaning.id, meaning_translation=next_translation().get(destination_code))
                    for meaning in context.meanings
                ],
            )
            for context in definition.contexts
        ]
        definitions.append(DefinitionOutput(
            id=definition.id,
            headword_translation=headword.get(destination_code),
            headword_translation_english=headword.get("en"),
            contexts=contexts,
        ))
    return TranslationOutput(definitions=definitions)
