from enum import Enum

from pydantic import BaseModel, Field


class TurnRole(str, Enum):
    """Role vocabulary of the generative-language API."""

    USER = "user"
    MODEL = "model"


class Part(BaseModel):
    """A single text part of a turn."""

    text: str


class Content(BaseModel):
    """One role-tagged turn sent to the completion endpoint.

    Attributes:
        role: Either ``user`` or ``model``.
        parts: Text parts making up the turn.
    """

    role: TurnRole
    parts: list[Part] = Field(..., min_length=1)


class GenerateContentRequest(BaseModel):
    """Request body for ``models/{model}:generateContent``.

    The full turn history is sent on every call; the remote end keeps no session.
    """

    contents: list[Content] = Field(..., min_length=1)


class CompletionResponse(BaseModel):
    """Relay response carrying the first candidate's text.

    Attributes:
        text: Completion text, or None when the upstream response had none.
    """

    text: str | None = None


class PDFUploadResponse(BaseModel):
    """Response after PDF text extraction.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        text: Extracted text with page separators.
    """

    filename: str
    pages: int
    text: str
