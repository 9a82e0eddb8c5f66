import logging
from typing import Any

import httpx
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from .. import config
from ..errors import TranslationError
from ..prompts import build_translation_prompt
from ..schemas import ErrorResponse, Language, TranslateRequest, TranslationResponse
from ..services import (
    LANGUAGES,
    build_completion_payload,
    build_upstream_headers,
    extract_json_payload,
    extract_reply_content,
    read_error_body,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translate"])


@router.get("/languages", response_model=list[Language])
def list_languages() -> list[Language]:
    return LANGUAGES


@router.post(
    "/translate",
    responses={
        status.HTTP_200_OK: {"model": TranslationResponse},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate(payload: TranslateRequest, request: Request) -> JSONResponse:
    api_key = config.get_openrouter_api_key()
    if not api_key:
        raise TranslationError(status.HTTP_500_INTERNAL_SERVER_ERROR, "OpenRouter API key not configured")

    prompt = build_translation_prompt(payload.text, payload.target_language, payload.source_language)
    headers = build_upstream_headers(api_key, referer=request.headers.get("referer", ""))

    try:
        async with httpx.AsyncClient(timeout=config.TRANSLATION_TIMEOUT_SECONDS) as client:
            upstream_response = await client.post(
                config.OPENROUTER_API_URL,
                headers=headers,
                json=build_completion_payload(prompt),
            )
    except httpx.HTTPError as exc:
        logger.error("Translation request failed: %s", exc)
        raise TranslationError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc)) from exc

    if not upstream_response.is_success:
        error_data = read_error_body(upstream_response)
        logger.error("OpenRouter API error (HTTP %s): %s", upstream_response.status_code, error_data)
        raise TranslationError(upstream_response.status_code, "Translation service error", error_data)

    try:
        data = upstream_response.json()
    except ValueError as exc:
        logger.error("OpenRouter returned a non-JSON body: %s", upstream_response.text)
        raise TranslationError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc)) from exc

    content = extract_reply_content(data)
    if content is None:
        logger.error("OpenRouter reply had no content")
        raise TranslationError(status.HTTP_500_INTERNAL_SERVER_ERROR, "No response from translation service")

    try:
        translation: Any = extract_json_payload(content)
    except ValueError as exc:
        logger.error("Failed to parse response: %s", content)
        raise TranslationError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to parse translation response",
            content,
        ) from exc

    word_units = translation.get("wordAnalysis") if isinstance(translation, dict) else None
    logger.info(
        "Translated %d characters to %s (%d word units)",
        len(payload.text),
        payload.target_language,
        len(word_units) if isinstance(word_units, list) else 0,
    )
    return JSONResponse(content=translation)
