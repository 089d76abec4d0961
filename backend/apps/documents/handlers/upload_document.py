"""POST /upload - Upload a document and open a Q&A session."""

import logging

from fastapi import Depends, File, UploadFile
from fastapi.responses import JSONResponse

from config import get_settings
from dependencies import (
    get_document_parser,
    get_file_storage,
    get_request_id,
    get_session_store,
)
from errors import FileValidationError
from responses import ResponseCode, error_response, success_response
from services import DocumentParser, FileStorage, SessionStore

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


def build_preview(text: str) -> str:
    """First 200 characters, with an ellipsis when truncated."""
    return text[:PREVIEW_LENGTH] + ("..." if len(text) > PREVIEW_LENGTH else "")


# --- Handler ---


async def upload_document(
    file: UploadFile | None = File(default=None),
    request_id: str = Depends(get_request_id),
    document_parser: DocumentParser = Depends(get_document_parser),
    file_storage: FileStorage = Depends(get_file_storage),
    session_store: SessionStore = Depends(get_session_store),
) -> JSONResponse:
    """Upload and process a document (PDF, DOCX, TXT).

    Flow:
    1. Validate file (type, size)
    2. Store the raw file
    3. Extract text (stored file is removed again on failure)
    4. Open a session
    """
    if file is None or not file.filename:
        return error_response(ResponseCode.NO_FILE)

    stored_path = None
    filename = file.filename
    logger.info("[%s] Upload: %s (%s)", request_id, filename, file.content_type)

    try:
        # 1. Validate file. Read one byte past the limit to detect oversize.
        max_bytes = document_parser.settings.max_file_size_bytes
        content = await file.read(max_bytes + 1)
        document_parser.validate_upload(filename, file.content_type, len(content))

        # 2. Store
        stored_path = await file_storage.save(content, filename)

        # 3. Extract
        result = await document_parser.extract(stored_path, file.content_type)
        if not result.success:
            file_storage.delete(stored_path)
            logger.warning("[%s] Extraction failed: %s", request_id, result.error)
            return error_response(ResponseCode.DOCUMENT_PROCESSING_FAILED, result.error)

        # 4. Open session
        session_id = session_store.create(
            filename=filename,
            content_type=file.content_type,
            text=result.text,
            storage_path=stored_path,
        )

        logger.info(
            "[%s] Processed: %s (%d chars)", request_id, session_id, len(result.text)
        )
        return success_response(
            ResponseCode.DOCUMENT_UPLOADED,
            {
                "sessionId": session_id,
                "filename": filename,
                "preview": build_preview(result.text),
                "message": "Document uploaded and processed successfully",
            },
        )

    except FileValidationError as e:
        logger.warning("[%s] %s: %s", request_id, type(e).__name__, e)
        return error_response(e.code, str(e))

    except Exception as e:
        logger.exception("[%s] Unexpected error during upload", request_id)
        if stored_path is not None:
            file_storage.delete(stored_path)
        message = None if get_settings().is_production else str(e)
        return error_response(ResponseCode.INTERNAL_ERROR, message)

    finally:
        await file.close()
