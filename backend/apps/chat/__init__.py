"""Chat module - questions, summaries and simplification."""

from apps.chat.routes import router

__all__ = ["router"]
