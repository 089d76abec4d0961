"""POST /simplify - Explain a document excerpt in plain language."""

import logging

from fastapi import Depends

from apps.chat.schemas import SimplifyRequest, SimplifyResponse
from dependencies import get_qa_service, get_request_id
from services import DocumentQAService

logger = logging.getLogger(__name__)


async def simplify_text(
    request: SimplifyRequest,
    request_id: str = Depends(get_request_id),
    qa_service: DocumentQAService = Depends(get_qa_service),
) -> SimplifyResponse:
    """Simplify a text section using the full document as context."""
    logger.info(
        "[%s] Simplify request (%s, %d chars)",
        request_id,
        request.session_id,
        len(request.text),
    )
    simplified = await qa_service.simplify(request.session_id, request.text)
    return SimplifyResponse(simplified=simplified)
