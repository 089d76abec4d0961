"""Document handlers."""

from apps.documents.handlers.delete_document import delete_document
from apps.documents.handlers.export_notes import export_notes
from apps.documents.handlers.upload_document import upload_document

__all__ = [
    "upload_document",
    "export_notes",
    "delete_document",
]
