"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Part / Content: One role-tagged turn of the completion payload
    - GenerateContentRequest: Full turn history sent per completion
    - CompletionResponse: Relay answer with the completion text
    - PDFUploadResponse: Extracted PDF text and page count
"""

from pdfchat.models.schemas import (
    CompletionResponse,
    Content,
    GenerateContentRequest,
    Part,
    PDFUploadResponse,
    TurnRole,
)

__all__ = [
    "CompletionResponse",
    "Content",
    "GenerateContentRequest",
    "PDFUploadResponse",
    "Part",
    "TurnRole",
]
