"""Conversation state for one chat page."""

import time
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created.

    Attributes:
        id: Monotonic, time-derived identifier (epoch milliseconds).
        role: Who wrote it.
        content: Message text; markdown for assistant messages.
        created_at: Local creation time, shown under the bubble.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    role: Role
    content: str
    created_at: datetime

    @property
    def time(self) -> str:
        return self.created_at.strftime("%I:%M %p")


class ConversationStore:
    """Append-only message list plus the transient UI state around it.

    One instance per page; owned by the controller and read by the renderer.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._last_id = 0
        self.attachment_version = 0
        self.input_text: str = ""
        self.is_typing: bool = False
        self.is_extracting: bool = False
        self.file_name: str | None = None
        self.extracted_text: str | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def can_send(self) -> bool:
        return not (self.is_typing or self.is_extracting)

    @property
    def pending_text(self) -> str | None:
        """Extracted PDF text waiting for the next send, if any."""
        return self.extracted_text or None

    def _next_id(self) -> int:
        # two messages in the same millisecond still get distinct, ordered ids
        self._last_id = max(time.time_ns() // 1_000_000, self._last_id + 1)
        return self._last_id

    def append_message(self, role: Role | str, content: str) -> tuple[Message, ...]:
        """Append a message and return the updated sequence."""
        message = Message(
            id=self._next_id(),
            role=Role(role),
            content=content,
            created_at=datetime.now(),
        )
        self._messages.append(message)
        return self.messages

    def set_attachment(self, file_name: str, extracted_text: str | None = None) -> None:
        self.file_name = file_name
        self.extracted_text = extracted_text
        self.attachment_version += 1

    def clear_attachment(self, version: int | None = None) -> bool:
        """Reset the pending attachment.

        With ``version``, only clears if no attachment was set since that version
        was read. Returns True if the attachment was cleared.
        """
        if version is not None and version != self.attachment_version:
            return False
        self.file_name = None
        self.extracted_text = None
        self.attachment_version += 1
        return True
