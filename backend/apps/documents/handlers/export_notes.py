"""GET /export/{session_id} - Export the Q&A transcript as markdown."""

import logging

from fastapi import Depends

from dependencies import get_request_id, get_session_store, get_transcript_exporter
from services import SessionStore, TranscriptExporter

logger = logging.getLogger(__name__)


async def export_notes(
    session_id: str,
    request_id: str = Depends(get_request_id),
    session_store: SessionStore = Depends(get_session_store),
    exporter: TranscriptExporter = Depends(get_transcript_exporter),
) -> dict[str, str]:
    """Render the session's questions and answers as markdown notes.

    Unknown sessions raise SessionNotFoundError, answered with a 404 by the
    application error handler.
    """
    session = session_store.get(session_id)
    notes = exporter.render(session)

    logger.info("[%s] Exported %s (%d turns)", request_id, session_id, len(session.history))
    return {"markdown": notes.markdown, "filename": notes.filename}
