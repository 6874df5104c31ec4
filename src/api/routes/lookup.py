"""Word lookup API routes.

Endpoints:
- POST /api/lookup: Look up a word in DDO or SpanishDict and translate it
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_lookup_service, get_translation_service
from api.models import LOOKUP_REQUEST_VERSION, LookUpWordRequest, WordModelResponse
from domain.model.errors import PageParserError, UnsupportedLanguageError
from port.page_fetcher import PageFetchError
from port.translation import TranslationError
from services.lookup_service import LookupService
from services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lookup"])


@router.post("/lookup", response_model=WordModelResponse)
async def look_up_word(
    request: LookUpWordRequest,
    lookup_service: LookupService = Depends(get_lookup_service),
    translation_service: TranslationService | None = Depends(get_translation_service),
):
    """Look up a word, falling back to the other dictionary, then translate it.

    Returns 400 for an unknown source language or request version, 404
    when no dictionary knows the word and 502 when a page cannot be
    downloaded or parsed. A failed translation still returns the
    untranslated word.
    """
    if request.version != LOOKUP_REQUEST_VERSION:
        raise HTTPException(status_code=400, detail=f"Only protocol version {LOOKUP_REQUEST_VERSION} is supported")

    try:
        word_model = await lookup_service.look_up_with_fallback(request.text, request.source_language)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PageParserError as e:
        logger.error("Dictionary page format not recognized", extra={
            "text": request.text, "url": e.url, "selector": e.selector,
        })
        raise HTTPException(status_code=502, detail=f"Cannot parse dictionary page: {e}")
    except PageFetchError as e:
        raise HTTPException(status_code=502, detail=f"Cannot download dictionary page: {e}")

    if word_model is None:
        logger.info("Word not found", extra={
            "text": request.text, "source_language": request.source_language,
        })
        raise HTTPException(status_code=404, detail=f"Word '{request.text}' not found")

    if request.translate and translation_service is not None:
        try:
            word_model = await translation_service.translate(word_model, request.destination_language)
        except TranslationError as e:
            logger.warning("Translation failed, returning untranslated word", extra={
                "word": word_model.word, "error": str(e),
            })

    logger.info("Word looked up", extra={
        "text": request.text,
        "word": word_model.word,
        "source_language": word_model.source_language.value,
        "definitions": len(word_model.definitions),
    })
    return WordModelResponse.model_validate(word_model)
