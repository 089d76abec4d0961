"""Chat handlers."""

from apps.chat.handlers.send_message import send_message
from apps.chat.handlers.simplify_text import simplify_text
from apps.chat.handlers.summarize_document import summarize_document

__all__ = [
    "send_message",
    "summarize_document",
    "simplify_text",
]
