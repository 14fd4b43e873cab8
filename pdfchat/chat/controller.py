"""Chat controller: send and upload flows over a ConversationStore.

Every failure on these paths ends up as an assistant message in the store.
Nothing raised by the completion backend or the PDF parser reaches the page.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from pdfchat.chat.composer import compose_request
from pdfchat.chat.store import ConversationStore, Role
from pdfchat.llm.gemini_client import CompletionError
from pdfchat.models.schemas import GenerateContentRequest
from pdfchat.parsing.pdf_parser import PDFParseError, is_pdf, parse_pdf

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "⚠️ No valid response."

CompletionFn = Callable[[GenerateContentRequest], Awaitable[str | None]]


class ChatController:
    """Owns one conversation and drives it.

    Args:
        complete: Async callable returning the completion text for a request,
            or None when the backend answered without text. Raises
            CompletionError on failure.
        store: Conversation to drive. A fresh one is created if omitted.
        on_change: Called after every state change so the view can refresh.
    """

    def __init__(
        self,
        complete: CompletionFn,
        store: ConversationStore | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.store = store or ConversationStore()
        self._complete = complete
        self._on_change = on_change

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def send(self) -> bool:
        """Send the input buffer as the next user turn.

        Blank input, or a send while a request is outstanding, is a no-op.

        Returns:
            True if a request was issued.
        """
        store = self.store
        text = store.input_text
        if not text.strip():
            return False
        if store.is_typing:
            logger.debug("Send ignored: a request is already in flight")
            return False

        history = store.messages
        store.append_message(Role.USER, text)
        store.input_text = ""
        store.is_typing = True
        self._notify()

        # an upload that lands while this request is pending belongs to the next send
        attachment_version = store.attachment_version
        request = compose_request(history, text, store.pending_text)
        try:
            reply = await self._complete(request)
            content = reply or NO_RESPONSE_TEXT
        except CompletionError as e:
            logger.error(f"Completion request failed: {e}")
            content = f"⚠️ API Error: {e}"
        except Exception as e:
            logger.exception("Unexpected error while requesting a completion")
            content = f"⚠️ API Error: {e}"
        finally:
            store.is_typing = False
            store.clear_attachment(attachment_version)

        store.append_message(Role.ASSISTANT, content)
        self._notify()
        return True

    async def attach_pdf(
        self,
        file_name: str,
        content_type: str | None,
        data: bytes,
    ) -> bool:
        """Extract text from an uploaded file into the pending attachment.

        Files not declared as PDF are ignored without a message. The file name
        is shown right away; the text lands once extraction finishes.

        Returns:
            True if text was extracted and is pending.
        """
        if not is_pdf(content_type):
            logger.debug(f"Ignoring upload {file_name!r} of type {content_type!r}")
            return False

        store = self.store
        store.set_attachment(file_name)
        store.is_extracting = True
        self._notify()

        try:
            content = await asyncio.to_thread(parse_pdf, data)
        except PDFParseError as e:
            logger.error(f"Error parsing PDF {file_name}: {e}")
            store.clear_attachment()
            store.append_message(Role.ASSISTANT, f"⚠️ PDF Error: {e}")
            extracted = False
        else:
            logger.info(f"Parsed PDF {file_name} ({content.pages} pages)")
            store.set_attachment(file_name, content.text)
            extracted = True
        finally:
            store.is_extracting = False

        self._notify()
        return extracted
