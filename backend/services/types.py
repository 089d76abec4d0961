"""Shared types and dataclasses for services.

Provides typed alternatives to dict[str, Any] for better type safety.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

Role = Literal["user", "model"]


@dataclass(frozen=True)
class ConversationTurn:
    """One message in a document conversation."""

    role: Role
    content: str


@dataclass
class Session:
    """One uploaded document and its conversation.

    Only SessionStore mutates ``history``; everything else reads snapshots.
    """

    session_id: str
    filename: str
    content_type: str
    storage_path: Path | None
    text: str
    created_at: datetime
    history: list[ConversationTurn] = field(default_factory=list)


class ExtractionErrorKind(str, Enum):
    """Why text extraction failed."""

    UNSUPPORTED_TYPE = "unsupported_type"
    EMPTY_DOCUMENT = "empty_document"
    PARSE_FAILED = "parse_failed"
    FILE_NOT_FOUND = "file_not_found"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting text from a document.

    A success always carries non-empty text; a failure always carries an
    empty text and an error message.
    """

    success: bool
    text: str = ""
    error: str | None = None
    error_kind: ExtractionErrorKind | None = None

    @classmethod
    def ok(cls, text: str) -> "ExtractionResult":
        return cls(success=True, text=text)

    @classmethod
    def failed(cls, kind: ExtractionErrorKind, error: str) -> "ExtractionResult":
        return cls(success=False, text="", error=error, error_kind=kind)


@dataclass(frozen=True)
class QAResult:
    """Answer text and the citation labels found in a model completion."""

    answer: str
    citations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChatResult:
    """Result of asking a question, with the post-append history."""

    answer: str
    citations: list[str]
    history: tuple[ConversationTurn, ...]


@dataclass(frozen=True)
class ExportedNotes:
    """Rendered markdown transcript and its download filename."""

    markdown: str
    filename: str
