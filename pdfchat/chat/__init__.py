"""Conversation state and the send/upload flows that drive it."""

from pdfchat.chat.composer import compose_request
from pdfchat.chat.controller import NO_RESPONSE_TEXT, ChatController
from pdfchat.chat.store import ConversationStore, Message, Role

__all__ = [
    "NO_RESPONSE_TEXT",
    "ChatController",
    "ConversationStore",
    "Message",
    "Role",
    "compose_request",
]
