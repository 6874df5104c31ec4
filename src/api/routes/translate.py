"""Direct translation API routes.

Endpoints:
- POST /api/translate: Translate caller-built headwords and meanings
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_translation_service
from api.models import TranslateRequest, TranslateResponse
from domain.model.translation import TRANSLATION_INPUT_VERSION
from port.translation import TranslationError
from services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["translate"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    translation_service: TranslationService | None = Depends(get_translation_service),
):
    """Translate headwords and meanings without looking anything up.

    Returns 400 for a request version other than "2", 503 when translation
    is disabled and 502 when the provider fails.
    """
    if request.version != TRANSLATION_INPUT_VERSION:
        raise HTTPException(
            status_code=400, detail=f"Only protocol version {TRANSLATION_INPUT_VERSION} is supported",
        )
    if translation_service is None:
        raise HTTPException(status_code=503, detail="Translation is disabled")

    try:
        translation_output = await translation_service.translate_input(request.to_domain())
    except TranslationError as e:
        logger.error("Translation failed", extra={
            "source_language": request.source_language,
            "destination_language": request.destination_language,
            "error": str(e),
        })
        raise HTTPException(status_code=502, detail=f"Translation failed: {e}")

    return TranslateResponse.model_validate(translation_output)
