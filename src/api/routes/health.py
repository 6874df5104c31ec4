"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from api.dependencies import TRANSLATION_PROVIDER, get_audio_transcoder
from port.audio import AudioTranscoderPort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    transcoder: AudioTranscoderPort = Depends(get_audio_transcoder),
):
    """Health check endpoint with dependency status.

    The service stays usable without ffmpeg (only SpanishDict sounds
    need it), so a missing binary reports "degraded" with status 200.
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {
            "translation": {
                "status": "disabled" if TRANSLATION_PROVIDER == "none" else "configured",
                "provider": TRANSLATION_PROVIDER,
            },
        },
    }

    if transcoder.is_available():
        health_status["services"]["ffmpeg"] = {
            "status": "healthy",
            "message": "Binary found",
        }
    else:
        health_status["services"]["ffmpeg"] = {
            "status": "unhealthy",
            "message": "Binary not found, MP4 sounds cannot be converted",
        }
        health_status["status"] = "degraded"
        logger.warning("ffmpeg binary not found")

    return health_status
