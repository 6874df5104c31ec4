"""Tests for FFmpegTranscoder with a mocked subprocess."""

import asyncio
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from adapter.external.ffmpeg import FFmpegTranscoder
from port.audio import AudioTranscodeError


def fake_process(returncode: int, stderr: bytes = b"", write_output: bool = True):
    """Build a create_subprocess_exec replacement that writes the output file like ffmpeg."""
    calls = []

    async def create_subprocess_exec(*args, **kwargs):
        calls.append(args)
        if write_output and returncode == 0:
            Path(args[-1]).write_bytes(b"ID3" + Path(args[args.index("-i") + 1]).read_bytes())
        process = MagicMock()
        process.returncode = returncode
        process.communicate = AsyncMock(return_value=(b"", stderr))
        return process

    return create_subprocess_exec, calls


class TestFFmpegTranscoder(unittest.IsolatedAsyncioTestCase):

    async def test_extract_audio(self):
        create, calls = fake_process(0)

        with patch("adapter.external.ffmpeg.asyncio.create_subprocess_exec", side_effect=create):
            audio = await FFmpegTranscoder(ffmpeg_path="/usr/bin/ffmpeg").extract_audio(b"video")

        self.assertEqual(audio, b"ID3video")
        args = calls[0]
        self.assertEqual(args[0], "/usr/bin/ffmpeg")
        self.assertIn("-vn", args)
        self.assertTrue(args[args.index("-i") + 1].endswith("input.mp4"))
        self.assertEqual(args[args.index("-f") + 1], "mp3")

    async def test_nonzero_exit_raises(self):
        create, _ = fake_process(1, stderr=b"moov atom not found")

        with patch("adapter.external.ffmpeg.asyncio.create_subprocess_exec", side_effect=create):
            with self.assertLogs("adapter.external.ffmpeg", level="ERROR"):
                with self.assertRaises(AudioTranscodeError) as ctx:
                    await FFmpegTranscoder().extract_audio(b"broken")

        self.assertIn("moov atom not found", str(ctx.exception))

    async def test_missing_output_raises(self):
        create, _ = fake_process(0, write_output=False)

        with patch("adapter.external.ffmpeg.asyncio.create_subprocess_exec", side_effect=create):
            with self.assertLogs("adapter.external.ffmpeg", level="ERROR"):
                with self.assertRaises(AudioTranscodeError):
                    await FFmpegTranscoder().extract_audio(b"video")

    async def test_missing_binary_raises(self):
        with patch(
            "adapter.external.ffmpeg.asyncio.create_subprocess_exec",
            side_effect=FileNotFoundError("ffmpeg"),
        ):
            with self.assertRaises(AudioTranscodeError):
                await FFmpegTranscoder(ffmpeg_path="/missing/ffmpeg").extract_audio(b"video")

    async def test_cancellation_kills_process(self):
        process = MagicMock()
        process.communicate = AsyncMock(side_effect=asyncio.CancelledError())
        process.wait = AsyncMock(return_value=-9)

        with patch("adapter.external.ffmpeg.asyncio.create_subprocess_exec", AsyncMock(return_value=process)):
            with self.assertRaises(asyncio.CancelledError):
                await FFmpegTranscoder().extract_audio(b"video")

        process.kill.assert_called_once()

    def test_is_available(self):
        with patch("adapter.external.ffmpeg.shutil.which", return_value="/usr/bin/ffmpeg"):
            self.assertTrue(FFmpegTranscoder().is_available())
        with patch("adapter.external.ffmpeg.shutil.which", return_value=None):
            self.assertFalse(FFmpegTranscoder().is_available())


if __name__ == '__main__':
    unittest.main()
