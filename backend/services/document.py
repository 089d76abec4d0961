"""Document parsing service for PDF, Word, and text files.

Handles:
- Upload validation (extension, declared MIME type, size)
- Text extraction from PDF (PyMuPDF), DOCX (python-docx), and TXT files

Extraction never raises: every failure comes back as an ExtractionResult
so the upload handler can turn it into a client error.

All blocking I/O operations are wrapped with asyncio.to_thread for proper async handling.
"""

import asyncio
import io
import logging
from pathlib import Path

import fitz  # PyMuPDF
from docx import Document as DocxDocument

from config import Settings, get_settings
from errors import (
    DocumentAssistantError,
    DocumentParseError,
    EmptyDocumentError,
    FileTooLargeError,
    InvalidFileTypeError,
    UnsupportedFileTypeError,
)
from services.types import ExtractionErrorKind, ExtractionResult

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
TXT_MIME_TYPE = "text/plain"

# Supported file types and their MIME types
MIME_TYPES_BY_EXTENSION: dict[str, str] = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
    ".txt": TXT_MIME_TYPE,
}
SUPPORTED_EXTENSIONS = frozenset(MIME_TYPES_BY_EXTENSION)

ERROR_KINDS: dict[type[DocumentAssistantError], ExtractionErrorKind] = {
    UnsupportedFileTypeError: ExtractionErrorKind.UNSUPPORTED_TYPE,
    EmptyDocumentError: ExtractionErrorKind.EMPTY_DOCUMENT,
    DocumentParseError: ExtractionErrorKind.PARSE_FAILED,
}

DocumentSource = str | Path | bytes


class DocumentParser:
    """Service for validating uploads and extracting document text.

    All file I/O operations are non-blocking, using asyncio.to_thread
    to avoid blocking the event loop.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize document parser."""
        self.settings = settings or get_settings()

    def validate_upload(
        self,
        filename: str,
        content_type: str | None,
        file_size: int,
    ) -> str:
        """Validate an upload before extraction and return its extension.

        Type is checked before size, so a wrong-typed oversized file reports
        the type problem.

        Raises:
            InvalidFileTypeError: Extension or declared MIME type not accepted.
            FileTooLargeError: File exceeds the configured size ceiling.
        """
        ext = Path(filename or "").suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise InvalidFileTypeError(
                f"Invalid file type. Only {', '.join(MIME_TYPES_BY_EXTENSION)} "
                "files are allowed."
            )

        # Declared type must be the one standard type for the extension
        if content_type != MIME_TYPES_BY_EXTENSION[ext]:
            raise InvalidFileTypeError(
                "Invalid MIME type. File must be PDF, DOCX, or TXT."
            )

        if file_size > self.settings.max_file_size_bytes:
            raise FileTooLargeError(
                f"File size must not exceed {self.settings.max_file_size_mb}MB"
            )

        return ext

    async def extract(
        self, source: DocumentSource, content_type: str | None
    ) -> ExtractionResult:
        """Extract trimmed plain text from a document.

        Args:
            source: Path to the stored file, or its raw bytes.
            content_type: Declared MIME type; selects the decoder.

        Returns:
            ExtractionResult; never raises.
        """
        if not isinstance(source, bytes) and not Path(source).exists():
            return ExtractionResult.failed(
                ExtractionErrorKind.FILE_NOT_FOUND, "File not found"
            )

        try:
            if content_type == PDF_MIME_TYPE:
                text = await asyncio.to_thread(self._parse_pdf_sync, source)
            elif content_type == DOCX_MIME_TYPE:
                text = await asyncio.to_thread(self._parse_docx_sync, source)
            elif content_type == TXT_MIME_TYPE:
                text = await asyncio.to_thread(self._parse_txt_sync, source)
            else:
                raise UnsupportedFileTypeError(f"Unsupported file type: {content_type}")

            text = text.strip()
            if not text:
                raise EmptyDocumentError("Document contains no extractable text")

            return ExtractionResult.ok(text)

        except DocumentAssistantError as e:
            kind = ERROR_KINDS.get(type(e), ExtractionErrorKind.PARSE_FAILED)
            logger.warning("Extraction failed (%s): %s", kind.value, e)
            return ExtractionResult.failed(kind, str(e))
        except Exception as e:
            logger.error("Failed to parse document: %s", e)
            return ExtractionResult.failed(
                ExtractionErrorKind.PARSE_FAILED, f"Failed to parse document: {e}"
            )

    def _parse_pdf_sync(self, source: DocumentSource) -> str:
        """Parse PDF file using PyMuPDF (synchronous)."""
        doc = None
        try:
            if isinstance(source, bytes):
                doc = fitz.open(stream=source, filetype="pdf")
            else:
                doc = fitz.open(str(source))

            text_parts = []
            for page_num, page in enumerate(doc, start=1):
                try:
                    page_text = page.get_text()
                    if page_text:
                        text_parts.append(page_text)
                except Exception as e:
                    logger.warning(
                        "Failed to extract text from page %d: %s", page_num, e
                    )

            return "\n\n".join(text_parts)

        except Exception as e:
            raise DocumentParseError(f"Failed to extract text from PDF: {e}") from e
        finally:
            if doc is not None:
                doc.close()

    def _parse_docx_sync(self, source: DocumentSource) -> str:
        """Parse Word document using python-docx (synchronous)."""
        try:
            target = io.BytesIO(source) if isinstance(source, bytes) else str(source)
            doc = DocxDocument(target)
            text_parts = []

            # Extract paragraphs
            for p in doc.paragraphs:
                if p.text.strip():
                    text_parts.append(p.text)

            # Extract tables
            for table in doc.tables:
                for row in table.rows:
                    row_text = " | ".join(cell.text.strip() for cell in row.cells)
                    if row_text.strip(" |"):
                        text_parts.append(row_text)

            return "\n\n".join(text_parts)

        except Exception as e:
            raise DocumentParseError(f"Failed to extract text from DOCX: {e}") from e

    def _parse_txt_sync(self, source: DocumentSource) -> str:
        """Parse plain text file (synchronous)."""
        try:
            raw = source if isinstance(source, bytes) else Path(source).read_bytes()
        except OSError as e:
            raise DocumentParseError(f"Failed to read TXT file: {e}") from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return raw.decode("latin-1")
