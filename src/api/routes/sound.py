"""Sound download API routes.

Endpoints:
- GET /api/sound/download: Proxy a pronunciation file, always answering with MP3
"""

import asyncio
import logging
import os
from urllib.parse import quote, urlsplit

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from api.dependencies import get_sound_service
from domain.model.errors import NotFoundError
from port.audio import AudioTranscodeError
from port.page_fetcher import PageFetchError
from services.sound_service import SoundService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sound", tags=["sound"])

SOUND_DOWNLOAD_TIMEOUT_SECONDS = float(os.getenv("SOUND_DOWNLOAD_TIMEOUT_SECONDS", "20"))


def _is_http_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _content_disposition(word: str) -> str:
    fallback = word.encode("ascii", "ignore").decode().replace('"', "") or "sound"
    return f"attachment; filename=\"{fallback}.mp3\"; filename*=UTF-8''{quote(word)}.mp3"


@router.get("/download")
async def download_sound(
    sound_url: str = Query(..., min_length=1),
    word: str = Query(..., min_length=1),
    sound_service: SoundService = Depends(get_sound_service),
):
    """Download a sound file and return it as "<word>.mp3"."""
    word = word.strip()
    if not _is_http_url(sound_url):
        raise HTTPException(status_code=400, detail="'sound_url' must be an absolute http(s) URL")
    if not word:
        raise HTTPException(status_code=400, detail="'word' must not be empty")

    try:
        content = await asyncio.wait_for(
            sound_service.download_sound(sound_url, word),
            timeout=SOUND_DOWNLOAD_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        logger.warning("Sound download timed out", extra={
            "sound_url": sound_url, "timeout": SOUND_DOWNLOAD_TIMEOUT_SECONDS,
        })
        raise HTTPException(status_code=504, detail="Sound download timed out")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (PageFetchError, AudioTranscodeError) as e:
        logger.error("Cannot download sound", extra={
            "sound_url": sound_url, "error": str(e),
        })
        raise HTTPException(status_code=502, detail=f"Cannot download sound: {e}")

    return Response(
        content=content,
        media_type="audio/mpeg",
        headers={"Content-Disposition": _content_disposition(word)},
    )
