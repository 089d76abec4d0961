"""DELETE /document/{file_id} - Delete a document and its session."""

import logging

from fastapi import Depends
from fastapi.responses import JSONResponse

from dependencies import get_request_id, get_session_store
from errors import SessionNotFoundError
from responses import ResponseCode, error_response, get_message, success_response
from services import SessionStore

logger = logging.getLogger(__name__)


async def delete_document(
    file_id: str,
    request_id: str = Depends(get_request_id),
    session_store: SessionStore = Depends(get_session_store),
) -> JSONResponse:
    """Delete a document's session state and its stored file."""
    logger.info("[%s] Delete request for doc: %s", request_id, file_id)

    try:
        session_store.delete(file_id)
    except SessionNotFoundError:
        logger.info("[%s] Delete: unknown doc %s", request_id, file_id)
        return error_response(ResponseCode.DOCUMENT_NOT_FOUND)

    return success_response(
        ResponseCode.DOCUMENT_DELETED,
        {"message": get_message(ResponseCode.DOCUMENT_DELETED)},
    )
