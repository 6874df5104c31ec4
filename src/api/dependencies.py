import logging
import os

from fastapi import Depends

from adapter.external.azure_translator import AzureTranslatorAdapter
from adapter.external.ffmpeg import FFmpegTranscoder
from adapter.external.http_page_fetcher import HttpxPageFetcher
from adapter.external.litellm import LiteLLMAdapter
from adapter.external.llm_translation import LLMTranslationAdapter
from port.audio import AudioTranscoderPort
from port.llm import LLMPort
from port.page_fetcher import PageFetcherPort
from port.translation import TranslationPort
from services.lookup_service import LookupService
from services.sound_service import SoundService
from services.translation_service import TranslationService

logger = logging.getLogger(__name__)

# "llm", "azure" or "none"
TRANSLATION_PROVIDER = os.getenv("TRANSLATION_PROVIDER", "llm").strip().lower()


def get_page_fetcher() -> PageFetcherPort:
    return HttpxPageFetcher()


def get_llm_port() -> LLMPort:
    return LiteLLMAdapter()


def get_audio_transcoder() -> AudioTranscoderPort:
    return FFmpegTranscoder()


def get_translation_port(llm: LLMPort = Depends(get_llm_port)) -> TranslationPort | None:
    """Translation adapter selected by TRANSLATION_PROVIDER; None disables translation."""
    if TRANSLATION_PROVIDER == "none":
        return None
    if TRANSLATION_PROVIDER == "azure":
        return AzureTranslatorAdapter()
    if TRANSLATION_PROVIDER != "llm":
        logger.warning("Unknown TRANSLATION_PROVIDER, using llm", extra={
            "provider": TRANSLATION_PROVIDER,
        })
    return LLMTranslationAdapter(llm)


def get_lookup_service(
    page_fetcher: PageFetcherPort = Depends(get_page_fetcher),
) -> LookupService:
    return LookupService(page_fetcher)


def get_translation_service(
    translation_port: TranslationPort | None = Depends(get_translation_port),
) -> TranslationService | None:
    if translation_port is None:
        return None
    return TranslationService(translation_port)


def get_sound_service(
    page_fetcher: PageFetcherPort = Depends(get_page_fetcher),
    transcoder: AudioTranscoderPort = Depends(get_audio_transcoder),
) -> SoundService:
    return SoundService(page_fetcher, transcoder)
