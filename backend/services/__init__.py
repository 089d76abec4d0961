"""Services module for the document Q&A pipeline.

Contains:
- Document validation and text extraction
- Upload blob storage
- In-memory session store
- Answer/citation parsing
- Q&A orchestration (ask, summarize, simplify)
- Markdown transcript export

Note: Service instances are managed via dependencies.py using FastAPI DI.
"""

from services.answer_formatter import parse_answer
from services.document import DocumentParser
from services.export import TranscriptExporter
from services.qa import DocumentQAService
from services.session_store import SessionStore
from services.storage import FileStorage
from services.types import (
    ChatResult,
    ConversationTurn,
    ExportedNotes,
    ExtractionErrorKind,
    ExtractionResult,
    QAResult,
    Session,
)

__all__ = [
    # Core services
    "DocumentParser",
    "DocumentQAService",
    "FileStorage",
    "SessionStore",
    "TranscriptExporter",
    "parse_answer",
    # Types
    "ChatResult",
    "ConversationTurn",
    "ExportedNotes",
    "ExtractionErrorKind",
    "ExtractionResult",
    "QAResult",
    "Session",
]
