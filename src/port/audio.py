"""Audio port — outbound interface for turning downloaded media into MP3."""

from typing import Protocol


class AudioTranscodeError(Exception):
    """Transcoder could not produce audio from the input."""


class AudioTranscoderPort(Protocol):

    async def extract_audio(self, media: bytes, input_suffix: str = ".mp4") -> bytes:
        """Return the MP3-encoded audio track of ``media``."""
        ...

    def is_available(self) -> bool: ...
