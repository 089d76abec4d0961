"""Standardized response infrastructure for API endpoints.

Every error leaves the API as the same two-field body:

    {"error": "<short label>", "message": "<human readable detail>"}

Success payloads are endpoint specific and returned as-is.
"""

from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse


class ResponseCode(str, Enum):
    """Response codes for API responses.

    Ranges: 0xxx=Success, 1xxx=Client Error, 2xxx=Server Error, 3xxx=External Service
    """

    # Success codes
    DOCUMENT_UPLOADED = "0002"
    DOCUMENT_DELETED = "0003"

    # Client errors
    INVALID_REQUEST = "1000"
    INVALID_FILE_TYPE = "1001"
    FILE_TOO_LARGE = "1002"
    SESSION_NOT_FOUND = "1003"
    DOCUMENT_PROCESSING_FAILED = "1004"
    NO_FILE = "1005"
    DOCUMENT_NOT_FOUND = "1006"
    ENDPOINT_NOT_FOUND = "1007"

    # Server errors
    INTERNAL_ERROR = "2000"
    CONFIGURATION_ERROR = "2001"

    # External service errors
    AI_SERVICE_ERROR = "3000"


# Short error labels returned in the "error" field
RESPONSE_LABELS: dict[ResponseCode, str] = {
    ResponseCode.INVALID_REQUEST: "Invalid request",
    ResponseCode.INVALID_FILE_TYPE: "File validation error",
    ResponseCode.FILE_TOO_LARGE: "File too large",
    ResponseCode.SESSION_NOT_FOUND: "Session not found",
    ResponseCode.DOCUMENT_PROCESSING_FAILED: "Document processing failed",
    ResponseCode.NO_FILE: "No file uploaded",
    ResponseCode.DOCUMENT_NOT_FOUND: "Document not found",
    ResponseCode.ENDPOINT_NOT_FOUND: "Not Found",
    ResponseCode.INTERNAL_ERROR: "Server error",
    ResponseCode.CONFIGURATION_ERROR: "AI service error",
    ResponseCode.AI_SERVICE_ERROR: "AI service error",
}

# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.DOCUMENT_UPLOADED: "Document uploaded and processed successfully",
    ResponseCode.DOCUMENT_DELETED: "Document deleted successfully",
    ResponseCode.INVALID_REQUEST: "Request validation failed",
    ResponseCode.INVALID_FILE_TYPE: "Invalid file type. File must be PDF, DOCX, or TXT.",
    ResponseCode.FILE_TOO_LARGE: "File exceeds maximum allowed size",
    ResponseCode.SESSION_NOT_FOUND: "Invalid sessionId or session expired",
    ResponseCode.DOCUMENT_PROCESSING_FAILED: "Failed to extract text from document",
    ResponseCode.NO_FILE: "Please upload a file",
    ResponseCode.DOCUMENT_NOT_FOUND: "Invalid fileId or document already deleted",
    ResponseCode.ENDPOINT_NOT_FOUND: "The requested endpoint does not exist",
    ResponseCode.INTERNAL_ERROR: "An unexpected error occurred",
    ResponseCode.CONFIGURATION_ERROR: "ANTHROPIC_API_KEY is not configured",
    ResponseCode.AI_SERVICE_ERROR: "Failed to generate response",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.DOCUMENT_UPLOADED: 200,
    ResponseCode.DOCUMENT_DELETED: 200,
    ResponseCode.INVALID_REQUEST: 400,
    ResponseCode.INVALID_FILE_TYPE: 400,
    ResponseCode.FILE_TOO_LARGE: 400,
    ResponseCode.SESSION_NOT_FOUND: 404,
    ResponseCode.DOCUMENT_PROCESSING_FAILED: 400,
    ResponseCode.NO_FILE: 400,
    ResponseCode.DOCUMENT_NOT_FOUND: 404,
    ResponseCode.ENDPOINT_NOT_FOUND: 404,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.CONFIGURATION_ERROR: 500,
    ResponseCode.AI_SERVICE_ERROR: 500,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_label(code: ResponseCode) -> str:
    """Get the short error label for a response code."""
    return RESPONSE_LABELS.get(code, "Server error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
) -> dict[str, str]:
    """Build a standardized error response dictionary."""
    return {
        "error": get_label(code),
        "message": custom_message or get_message(code),
    }


# --- JSONResponse helpers ---


def success_response(
    code: ResponseCode,
    data: dict[str, Any],
) -> JSONResponse:
    """Create a JSONResponse carrying an endpoint payload."""
    return JSONResponse(content=data, status_code=get_http_status(code))


def error_response(
    code: ResponseCode,
    custom_message: str | None = None,
) -> JSONResponse:
    """Create a JSONResponse with error format."""
    return JSONResponse(
        content=error_dict(code, custom_message),
        status_code=get_http_status(code),
    )
