"""Builds the generateContent payload from the conversation."""

from collections.abc import Sequence

from pdfchat.chat.store import Message, Role
from pdfchat.models.schemas import Content, GenerateContentRequest, Part, TurnRole

ATTACHMENT_LABEL = "\n\n[Uploaded PDF Content]:\n"

_ROLE_MAP = {
    Role.USER: TurnRole.USER,
    Role.ASSISTANT: TurnRole.MODEL,
}


def augment_input(text: str, pdf_text: str | None = None) -> str:
    """Append extracted PDF text to the typed input under a fixed label."""
    if not pdf_text:
        return text
    return f"{text}{ATTACHMENT_LABEL}{pdf_text}"


def to_content(message: Message) -> Content:
    return Content(role=_ROLE_MAP[message.role], parts=[Part(text=message.content)])


def compose_request(
    history: Sequence[Message],
    text: str,
    pdf_text: str | None = None,
) -> GenerateContentRequest:
    """Map prior turns plus the latest input into a request payload.

    Args:
        history: Messages sent before the latest input, oldest first.
        text: The latest user input.
        pdf_text: Extracted PDF text to attach to this turn, if any.

    Returns:
        Request carrying the whole history with the augmented turn last.

    Raises:
        ValueError: If ``text`` is empty or whitespace only.
    """
    if not text.strip():
        raise ValueError("Cannot compose a request from empty input")

    contents = [to_content(message) for message in history]
    contents.append(
        Content(role=TurnRole.USER, parts=[Part(text=augment_input(text, pdf_text))])
    )
    return GenerateContentRequest(contents=contents)
