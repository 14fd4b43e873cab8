"""Client the chat page uses to reach the completion relay.

The page never talks to Gemini directly and never holds the API key.
"""

import os

import httpx

from pdfchat.llm.gemini_client import CompletionError, extract_error_message
from pdfchat.models.schemas import CompletionResponse, GenerateContentRequest

DEFAULT_TIMEOUT = 120.0


def default_base_url() -> str:
    """Relay address: API_BASE_URL, else this host on PORT."""
    return os.getenv("API_BASE_URL") or f"http://localhost:{os.getenv('PORT', '8000')}"


def default_timeout() -> float:
    """Same REQUEST_TIMEOUT the server applies to the upstream call."""
    return float(os.getenv("REQUEST_TIMEOUT", DEFAULT_TIMEOUT))


class RelayClient:
    """Posts turn histories to ``POST /chat`` and returns the completion text."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or default_base_url()).rstrip("/")
        self._timeout = timeout if timeout is not None else default_timeout()
        self._transport = transport

    async def complete(self, request: GenerateContentRequest) -> str | None:
        """Request one completion through the relay.

        Raises:
            CompletionError: With a readable message for any failure.
        """
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    f"{self._base_url}/chat",
                    json=request.model_dump(mode="json"),
                )
            except httpx.RequestError as e:
                raise CompletionError(f"Connection failed: {e}") from e

        if response.is_error:
            raise CompletionError(f"API request failed: {extract_error_message(response)}")

        try:
            return CompletionResponse.model_validate_json(response.content).text
        except ValueError as e:
            raise CompletionError("Malformed response from relay") from e
