"""Configuration and settings for DocQA application.

Uses Pydantic Settings so every value can come from the environment or a
.env file. The model credential is deliberately optional at startup: its
absence surfaces as a ConfigurationError on the first model-calling request.
"""

import logging
import sys
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys (checked per request, not at startup)
    anthropic_api_key: str = Field(default="", description="Anthropic API key for Claude")

    # Application Settings
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # LLM Settings
    llm_model: str = Field(
        default="claude-sonnet-4-20250514", description="Claude model for generation"
    )
    llm_timeout_seconds: float = Field(
        default=60.0, description="Total timeout for a single model call"
    )
    llm_max_tokens: int = Field(default=1500, description="Max tokens for generation")

    # Document Processing Limits
    max_file_size_mb: int = Field(default=10, description="Max upload size in MB")
    upload_dir: str = Field(
        default="uploads", description="Directory holding uploaded document blobs"
    )

    # Session Settings
    session_ttl_minutes: int = Field(
        default=0, description="Session lifetime in minutes after upload (0 = never expire)"
    )

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )

    @field_validator("anthropic_api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Treat whitespace-only keys as missing."""
        return v.strip()

    @field_validator("session_ttl_minutes", "max_file_size_mb")
    @classmethod
    def validate_non_negative(cls, v: int, info) -> int:
        """Reject negative limits."""
        if v < 0:
            raise ValueError(f"{info.field_name} cannot be negative")
        return v

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def is_production(self) -> bool:
        """Whether error details must be hidden from clients."""
        return self.environment.lower() == "production"

    @property
    def llm_configured(self) -> bool:
        """Whether a model credential is present."""
        return bool(self.anthropic_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# FastAPI App Configuration
APP_CONFIG: dict[str, Any] = {
    "title": "DocQA",
    "description": (
        "AI document assistant. Upload a PDF, DOCX or TXT file, ask questions "
        "with cited answers, summarize, simplify and export your notes."
    ),
    "version": "1.0.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
    "openapi_url": "/api/openapi.json",
    "openapi_tags": [
        {
            "name": "Health",
            "description": "Health check and service status",
        },
        {
            "name": "Documents",
            "description": "Document upload, export and deletion",
        },
        {
            "name": "Chat",
            "description": "Document Q&A, summaries and simplification",
        },
    ],
}


def get_app_config() -> dict[str, Any]:
    """Get FastAPI application configuration."""
    return APP_CONFIG.copy()


def get_cors_config() -> dict[str, Any]:
    """Get CORS middleware configuration."""
    return {
        "allow_origins": get_settings().cors_origins,
        "allow_credentials": True,
        "allow_methods": ["GET", "POST", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
