"""FastAPI dependency injection for services.

Services are cached with @lru_cache() to avoid recreation per request.
Tests swap any of them through ``app.dependency_overrides``.
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Request

from config import get_settings
from llm import BaseLLMService, LLMService
from services.document import DocumentParser
from services.export import TranscriptExporter
from services.qa import DocumentQAService
from services.session_store import SessionStore
from services.storage import FileStorage

# --- Cached Singletons ---
# These are created once and reused across all requests


@lru_cache
def get_file_storage() -> FileStorage:
    """Get cached upload storage."""
    return FileStorage(get_settings().upload_dir)


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    ttl_minutes = get_settings().session_ttl_minutes
    return SessionStore(
        file_storage=get_file_storage(),
        ttl=timedelta(minutes=ttl_minutes) if ttl_minutes else None,
    )


@lru_cache
def get_llm_service() -> BaseLLMService:
    """Get cached LLM service (expensive - has API client)."""
    return LLMService()


# --- Lightweight Services (per-request is fine) ---


def get_document_parser() -> DocumentParser:
    """Get document parser (stateless, cheap to create)."""
    return DocumentParser()


def get_transcript_exporter() -> TranscriptExporter:
    """Get transcript exporter (stateless)."""
    return TranscriptExporter()


# --- Composed Services ---
# Use Depends() for proper FastAPI DI chaining


def get_qa_service(
    session_store: SessionStore = Depends(get_session_store),
    llm: BaseLLMService = Depends(get_llm_service),
) -> DocumentQAService:
    """Get Q&A service with injected dependencies."""
    return DocumentQAService(session_store=session_store, llm=llm)


# --- Request context ---


def get_request_id(request: Request) -> str:
    """Request ID assigned by the tracing middleware in main.py."""
    return getattr(request.state, "request_id", "-")
