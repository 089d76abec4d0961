"""Documents module - upload, export and deletion."""

from apps.documents.routes import router

__all__ = ["router"]
