"""FFmpeg adapter implementing AudioTranscoderPort by running the ffmpeg binary.

ffmpeg needs a seekable input for MP4 (the index may sit at the end of
the file), so media goes through temporary files instead of pipes.
"""

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path

from port.audio import AudioTranscodeError

logger = logging.getLogger(__name__)

FFMPEG_PATH = os.getenv("FFMPEG_PATH", "ffmpeg")


class FFmpegTranscoder:
    """Extracts the audio track of a media file as MP3."""

    def __init__(self, ffmpeg_path: str = FFMPEG_PATH):
        self.ffmpeg_path = ffmpeg_path

    def is_available(self) -> bool:
        return shutil.which(self.ffmpeg_path) is not None

    async def extract_audio(self, media: bytes, input_suffix: str = ".mp4") -> bytes:
        """Return the audio of ``media`` encoded as MP3, video stream dropped.

        Raises:
            AudioTranscodeError: If ffmpeg is missing or fails.
        """
        with tempfile.TemporaryDirectory(prefix="sound-") as workdir:
            input_path = Path(workdir) / f"input{input_suffix}"
            output_path = Path(workdir) / "output.mp3"
            input_path.write_bytes(media)

            try:
                process = await asyncio.create_subprocess_exec(
                    self.ffmpeg_path,
                    "-hide_banner", "-loglevel", "error", "-y",
                    "-i", str(input_path),
                    "-vn",
                    "-f", "mp3",
                    str(output_path),
                    stdout=asyncio.subprocess.DEVNULL,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError as e:
                raise AudioTranscodeError(f"ffmpeg not found at '{self.ffmpeg_path}'") from e

            try:
                _, stderr = await process.communicate()
            except asyncio.CancelledError:
                process.kill()
                await process.wait()
                raise

            if process.returncode != 0 or not output_path.exists():
                message = stderr.decode(errors="replace").strip()[:500]
                logger.error("ffmpeg failed to extract audio", extra={
                    "returncode": process.returncode, "stderr": message,
                })
                raise AudioTranscodeError(f"ffmpeg exited with code {process.returncode}: {message}")

            audio = output_path.read_bytes()

        logger.debug("Audio extracted", extra={
            "input_size": len(media), "output_size": len(audio),
        })
        return audio
