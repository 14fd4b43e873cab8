"""Completion backend for the chat relay.

Holds the Gemini API key and performs the generateContent call on behalf of
the chat page. Nothing in this package runs in the browser.
"""

from pdfchat.llm.config import GeminiConfig, get_gemini_config
from pdfchat.llm.gemini_client import (
    CompletionError,
    GeminiClient,
    close_gemini_client,
    get_gemini_client,
)

__all__ = [
    "CompletionError",
    "GeminiClient",
    "GeminiConfig",
    "close_gemini_client",
    "get_gemini_client",
    "get_gemini_config",
]
