"""Gemini completion client used behind the relay endpoint.

Core module for talking to the generative-language API.

Design notes:

1. **Stateless calls** - The remote end keeps no session. Every call carries the
   full turn history; there is no session id to track.

2. **Header-only credential** - The key goes in ``x-goog-api-key`` only, never in
   the query string.

3. **One error type** - Transport failures, non-success statuses and malformed
   bodies all surface as ``CompletionError``.

4. **Missing text is not an error** - A response without
   ``candidates[0].content.parts[0].text`` returns None; the caller decides what
   placeholder to show.
"""

import logging
from typing import Any

import httpx

from pdfchat.llm.config import GeminiConfig, get_gemini_config
from pdfchat.models.schemas import Content, GenerateContentRequest

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Raised when a completion request fails."""

    pass


def extract_completion_text(data: Any) -> str | None:
    """Read ``candidates[0].content.parts[0].text`` from a response body.

    Args:
        data: Decoded JSON body.

    Returns:
        The text, or None when any level of the path is missing.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def extract_error_message(response: httpx.Response) -> str:
    """Build a readable message for a non-success response.

    Uses ``error.message`` from the body when present, then a FastAPI-style
    ``detail`` string, else the status code.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    message = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
        elif isinstance(body.get("detail"), str):
            message = body["detail"]

    if isinstance(message, str) and message:
        return message
    return f"Status {response.status_code}"


class GeminiClient:
    """Async client for the ``generateContent`` endpoint.

    Owns one ``httpx.AsyncClient`` for the life of the process.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or get_gemini_config()
        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": self._config.api_key,
            },
            transport=transport,
        )

    @property
    def model(self) -> str:
        return self._config.model_name

    async def generate(self, contents: list[Content]) -> str | None:
        """Request one completion for the given turn history.

        Args:
            contents: Full conversation as role-tagged turns.

        Returns:
            The first candidate's text, or None if the response carried none.

        Raises:
            CompletionError: On network failure, non-success status or a body
                that is not JSON.
        """
        payload = GenerateContentRequest(contents=contents)

        try:
            response = await self._http.post(
                f"/models/{self.model}:generateContent",
                json=payload.model_dump(mode="json"),
            )
        except httpx.RequestError as e:
            logger.error(f"Gemini request failed: {e!r}")
            raise CompletionError(f"Connection failed: {e}") from e

        if response.is_error:
            message = extract_error_message(response)
            logger.warning(f"Gemini returned {response.status_code}: {message}")
            raise CompletionError(message)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Gemini returned a body that is not JSON")
            raise CompletionError("Malformed response from completion API") from e

        text = extract_completion_text(data)
        if text is None:
            logger.warning("Gemini response had no candidate text")
        return text

    async def aclose(self) -> None:
        await self._http.aclose()


# Module-level singleton instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client.

    Returns:
        The GeminiClient instance.

    Raises:
        ValueError: If GEMINI_API_KEY is not configured.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client


async def close_gemini_client() -> None:
    """Close and forget the global client, if one was created."""
    global _gemini_client
    if _gemini_client is not None:
        await _gemini_client.aclose()
        _gemini_client = None
