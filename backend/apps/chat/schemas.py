"""Request/response schemas for the chat endpoints.

Wire names are camelCase; Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionRequest(CamelModel):
    """Request body naming an existing session."""

    session_id: str = Field(..., min_length=1, description="Session ID from upload")


class ChatRequest(SessionRequest):
    """Request body for the chat endpoint."""

    question: str = Field(
        ..., min_length=1, description="Natural language question about the document"
    )


class SimplifyRequest(SessionRequest):
    """Request body for the simplify endpoint."""

    text: str = Field(..., min_length=1, description="Excerpt to explain")


class ConversationMessage(CamelModel):
    """One turn of the stored conversation."""

    role: str = Field(..., description="'user' or 'model'")
    content: str


class ChatResponse(CamelModel):
    """Answer with citations and the updated conversation."""

    answer: str
    citations: list[str]
    conversation_history: list[ConversationMessage]


class SummarizeResponse(CamelModel):
    summary: str


class SimplifyResponse(CamelModel):
    simplified: str
