"""POST /chat - Ask a question about the uploaded document."""

import logging

from fastapi import Depends

from apps.chat.schemas import ChatRequest, ChatResponse, ConversationMessage
from dependencies import get_qa_service, get_request_id
from services import DocumentQAService

logger = logging.getLogger(__name__)


async def send_message(
    request: ChatRequest,
    request_id: str = Depends(get_request_id),
    qa_service: DocumentQAService = Depends(get_qa_service),
) -> ChatResponse:
    """Answer a question with citations and return the updated conversation."""
    logger.info(
        "[%s] Chat request (%s): %s",
        request_id,
        request.session_id,
        request.question[:100],
    )

    result = await qa_service.ask(request.session_id, request.question)

    return ChatResponse(
        answer=result.answer,
        citations=result.citations,
        conversation_history=[
            ConversationMessage(role=turn.role, content=turn.content)
            for turn in result.history
        ],
    )
