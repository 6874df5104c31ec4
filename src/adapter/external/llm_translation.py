"""LLM translation adapter implementing TranslationPort with an LLMPort."""

import json
import logging
import os
from dataclasses import asdict

from domain.model.translation import TranslationInput, TranslationOutput
from port.llm import LLMError, LLMPort
from port.translation import TranslationError
from utils.llm import parse_json_from_content
from utils.prompts import build_translation_prompt

logger = logging.getLogger(__name__)

TRANSLATION_MODEL = os.getenv("TRANSLATION_MODEL", "openai/gpt-4.1-mini")
TRANSLATION_TIMEOUT_SECONDS = float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "60"))
TRANSLATION_MAX_TOKENS = 4000


class LLMTranslationAdapter:
    """Translates word model texts by prompting an LLM for a JSON answer."""

    def __init__(
        self,
        llm: LLMPort,
        model: str = TRANSLATION_MODEL,
        timeout: float = TRANSLATION_TIMEOUT_SECONDS,
    ):
        self.llm = llm
        self.model = model
        self.timeout = timeout

    async def translate(self, translation_input: TranslationInput) -> TranslationOutput | None:
        """Translate headwords and meanings.

        Returns:
            TranslationOutput, or None if the answer is not usable JSON.

        Raises:
            TranslationError: If the LLM call fails.
        """
        prompt = build_translation_prompt(
            source_language=translation_input.source_language,
            destination_language=translation_input.destination_language,
            input_json=json.dumps(asdict(translation_input), ensure_ascii=False, indent=2),
        )

        try:
            content = await self.llm.complete(
                messages=[{"role": "user", "content": prompt}],
                model=self.model,
                timeout=self.timeout,
                max_tokens=TRANSLATION_MAX_TOKENS,
                temperature=0,
            )
        except LLMError as e:
            logger.error("LLM translation failed", extra={
                "model": self.model,
                "error_type": type(e).__name__,
                "error": str(e),
            })
            raise TranslationError(f"LLM translation failed: {e}") from e

        result = parse_json_from_content(content)
        if result is None:
            logger.warning("LLM translation is not valid JSON", extra={
                "model": self.model, "content_preview": content[:200],
            })
            return None

        try:
            return TranslationOutput.from_dict(result)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("LLM translation has unexpected shape", extra={
                "model": self.model, "error": str(e), "content_preview": content[:200],
            })
            return None
