"""GET /health - Report service status."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import get_app_config, get_settings
from dependencies import get_llm_service, get_session_store
from llm import BaseLLMService
from services import SessionStore

# --- Response Schemas ---


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy or degraded")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    active_sessions: int = Field(
        ..., serialization_alias="activeSessions", description="Live document sessions"
    )
    llm_configured: bool = Field(
        ..., serialization_alias="llmConfigured", description="Model credential present"
    )
    timestamp: datetime


# --- Handler ---


async def check_health(
    session_store: SessionStore = Depends(get_session_store),
    llm: BaseLLMService = Depends(get_llm_service),
) -> HealthResponse:
    """Check health of the service.

    Without a model credential uploads still work but every model-backed
    endpoint fails, so the service reports itself as degraded.
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy" if llm.is_configured else "degraded",
        version=get_app_config()["version"],
        environment=settings.environment,
        active_sessions=len(session_store),
        llm_configured=llm.is_configured,
        timestamp=datetime.now(UTC),
    )
