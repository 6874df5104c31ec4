"""In-memory implementation of AudioTranscoderPort for testing."""

from port.audio import AudioTranscodeError


class FakeAudioTranscoder:
    """Fake transcoder that tags its input instead of converting it."""

    def __init__(self, available: bool = True, fail: bool = False):
        self.available = available
        self.fail = fail
        self.inputs: list[tuple[bytes, str]] = []

    async def extract_audio(self, media: bytes, input_suffix: str = ".mp4") -> bytes:
        self.inputs.append((media, input_suffix))
        if self.fail:
            raise AudioTranscodeError("fake transcoder failure")
        return b"MP3:" + media

    def is_available(self) -> bool:
        return self.available
