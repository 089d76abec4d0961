"""Pytest configuration and fixtures for DocQA tests."""

import os
import sys
import tempfile

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault("ANTHROPIC_API_KEY", "test-anthropic-key")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="docqa-uploads-"))

from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from llm import BaseLLMService  # noqa: E402
from services.session_store import SessionStore  # noqa: E402
from services.storage import FileStorage  # noqa: E402


@pytest.fixture
def mock_settings():
    """Mock application settings."""
    settings = MagicMock()
    settings.anthropic_api_key = "test-anthropic-key"
    settings.llm_configured = True
    settings.environment = "test"
    settings.is_production = False
    settings.max_file_size_mb = 10
    settings.max_file_size_bytes = 10 * 1024 * 1024
    settings.llm_model = "claude-sonnet-4-20250514"
    settings.llm_timeout_seconds = 60.0
    settings.llm_max_tokens = 1500
    settings.session_ttl_minutes = 0
    return settings


@pytest.fixture
def mock_llm():
    """Mock LLM service returning a well-formed cited answer."""
    service = AsyncMock(spec=BaseLLMService)
    service.is_configured = True
    service.generate.return_value = (
        "ANSWER: The contract runs for two years [Section 3].\n"
        "CITATIONS: [Section 3] [Paragraph 7]"
    )
    return service


@pytest.fixture
def file_storage(tmp_path):
    """Upload storage rooted in a per-test directory."""
    return FileStorage(tmp_path / "uploads")


@pytest.fixture
def session_store(file_storage):
    """Isolated session store."""
    return SessionStore(file_storage=file_storage)


@pytest.fixture
def sample_document_text():
    """Sample document text for testing."""
    return """Section 1: Parties

    This agreement is made between Acme Corp and Globex Ltd.

    Section 2: Services

    Acme Corp will provide document review services.

    Section 3: Term

    The contract runs for two years from the signing date."""
