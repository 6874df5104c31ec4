"""Downloads pronunciation files and normalizes them to MP3."""

import logging
from urllib.parse import urlsplit

from domain.model.errors import NotFoundError
from port.audio import AudioTranscoderPort
from port.page_fetcher import PageFetcherPort

logger = logging.getLogger(__name__)

# Containers whose audio has to be extracted; everything else is served as is
TRANSCODED_SUFFIXES = (".mp4",)


class SoundService:

    def __init__(self, page_fetcher: PageFetcherPort, transcoder: AudioTranscoderPort):
        self.page_fetcher = page_fetcher
        self.transcoder = transcoder

    async def download_sound(self, sound_url: str, word: str) -> bytes:
        """Download a sound file and return it as MP3 bytes.

        Raises:
            NotFoundError: If the file does not exist upstream.
            PageFetchError: If the download fails.
            AudioTranscodeError: If an MP4 file cannot be converted.
        """
        logger.info("Downloading sound file", extra={"sound_url": sound_url, "word": word})

        content = await self.page_fetcher.fetch_bytes(sound_url)
        if content is None:
            raise NotFoundError(f"Sound file '{sound_url}' not found")

        suffix = _suffix(sound_url)
        if suffix in TRANSCODED_SUFFIXES:
            content = await self.transcoder.extract_audio(content, input_suffix=suffix)
            logger.info("Sound file transcoded to MP3", extra={
                "sound_url": sound_url, "word": word, "size": len(content),
            })
        return content


def _suffix(url: str) -> str:
    path = urlsplit(url).path.lower()
    dot = path.rfind(".")
    return path[dot:] if dot > path.rfind("/") else ""
