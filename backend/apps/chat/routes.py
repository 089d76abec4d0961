"""Chat routes - registers all model-backed document endpoints."""

from fastapi import APIRouter

from apps.chat.handlers import send_message, simplify_text, summarize_document
from apps.chat.schemas import ChatResponse, SimplifyResponse, SummarizeResponse

router = APIRouter(tags=["Chat"])

# POST /chat - Ask a question
router.post("/chat", response_model=ChatResponse)(send_message)

# POST /summarize - Summarize the document
router.post("/summarize", response_model=SummarizeResponse)(summarize_document)

# POST /simplify - Simplify a text section
router.post("/simplify", response_model=SimplifyResponse)(simplify_text)
