"""Closed set of domain errors.

Each error carries the ResponseCode it surfaces as, so handlers map errors
by type instead of matching on messages.
"""

from responses import ResponseCode


class DocumentAssistantError(Exception):
    """Base class for all expected DocQA failures."""

    code: ResponseCode = ResponseCode.INTERNAL_ERROR


class EmptyInputError(DocumentAssistantError):
    """Raised when a required text field is blank."""

    code = ResponseCode.INVALID_REQUEST


class SessionNotFoundError(DocumentAssistantError):
    """Raised when a session id is unknown or expired."""

    code = ResponseCode.SESSION_NOT_FOUND


class UnsupportedFileTypeError(DocumentAssistantError):
    """Raised when a declared content type has no decoder."""

    code = ResponseCode.DOCUMENT_PROCESSING_FAILED


class EmptyDocumentError(DocumentAssistantError):
    """Raised when a document contains no extractable text."""

    code = ResponseCode.DOCUMENT_PROCESSING_FAILED


class DocumentParseError(DocumentAssistantError):
    """Raised when a decoder fails on a corrupt or unreadable file."""

    code = ResponseCode.DOCUMENT_PROCESSING_FAILED


class ConfigurationError(DocumentAssistantError):
    """Raised when the model credential is missing."""

    code = ResponseCode.CONFIGURATION_ERROR


class UpstreamError(DocumentAssistantError):
    """Raised when the model call fails, times out or returns nothing."""

    code = ResponseCode.AI_SERVICE_ERROR


class FileValidationError(DocumentAssistantError):
    """Raised when an upload is rejected before extraction."""

    code = ResponseCode.INVALID_FILE_TYPE


class InvalidFileTypeError(FileValidationError):
    """Raised when extension or MIME type is not accepted."""

    code = ResponseCode.INVALID_FILE_TYPE


class FileTooLargeError(FileValidationError):
    """Raised when an upload exceeds the size ceiling."""

    code = ResponseCode.FILE_TOO_LARGE
