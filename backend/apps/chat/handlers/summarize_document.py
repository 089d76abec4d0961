"""POST /summarize - Summarize the uploaded document."""

import logging

from fastapi import Depends

from apps.chat.schemas import SessionRequest, SummarizeResponse
from dependencies import get_qa_service, get_request_id
from services import DocumentQAService

logger = logging.getLogger(__name__)


async def summarize_document(
    request: SessionRequest,
    request_id: str = Depends(get_request_id),
    qa_service: DocumentQAService = Depends(get_qa_service),
) -> SummarizeResponse:
    """Generate a concise summary of the document."""
    logger.info("[%s] Summarize request (%s)", request_id, request.session_id)
    summary = await qa_service.summarize(request.session_id)
    return SummarizeResponse(summary=summary)
