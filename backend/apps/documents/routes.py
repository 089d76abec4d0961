"""Document routes - registers all document endpoints."""

from fastapi import APIRouter

from apps.documents.handlers import delete_document, export_notes, upload_document

router = APIRouter(tags=["Documents"])

# POST /upload - Upload document
router.post("/upload")(upload_document)

# GET /export/{session_id} - Export Q&A notes
router.get("/export/{session_id}")(export_notes)

# DELETE /document/{file_id} - Delete document
router.delete("/document/{file_id}")(delete_document)
