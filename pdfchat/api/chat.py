"""Completion relay endpoint.

The chat page posts its turn history here; this process adds the API key and
forwards it to Gemini. Upstream failures come back as 502 with an
``{"error": {"message": ...}}`` body.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from pdfchat.llm.gemini_client import CompletionError, GeminiClient, get_gemini_client
from pdfchat.models.schemas import CompletionResponse, GenerateContentRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def get_client() -> GeminiClient:
    """Resolve the Gemini client, reporting missing configuration as 503."""
    try:
        return get_gemini_client()
    except ValueError as e:
        logger.error(f"Completion relay is not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Completion service is not configured",
        ) from e


async def completion_error_handler(request: Request, exc: CompletionError) -> JSONResponse:
    """Render CompletionError in the same shape the Gemini API uses."""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": {"message": str(exc)}},
    )


@router.post("", response_model=CompletionResponse)
async def create_completion(
    payload: GenerateContentRequest,
    client: GeminiClient = Depends(get_client),
) -> CompletionResponse:
    """Request one completion for the posted turn history.

    Args:
        payload: Full conversation as role-tagged turns, newest last.
        client: Injected Gemini client.

    Returns:
        CompletionResponse with the first candidate's text, or null text when
        the upstream response had none.

    Raises:
        422: Invalid request body.
        502: Upstream request failed.
        503: GEMINI_API_KEY is not configured.
    """
    text = await client.generate(payload.contents)
    return CompletionResponse(text=text)
