"""Anthropic Claude LLM implementation."""

import logging
from collections.abc import Sequence

import httpx
from anthropic import APIError, APITimeoutError, AsyncAnthropic, RateLimitError

from config import Settings, get_settings
from errors import ConfigurationError

from .base import BaseLLMService, ChatMessage, LLMError

logger = logging.getLogger(__name__)


class AnthropicService(BaseLLMService):
    """Claude LLM service via Anthropic API.

    The client is built on first use so a missing key never reaches the SDK.
    """

    def __init__(self, settings: Settings | None = None, model: str | None = None) -> None:
        self.settings = settings or get_settings()
        self.model = model or self.settings.llm_model
        self._client: AsyncAnthropic | None = None

    @property
    def is_configured(self) -> bool:
        return self.settings.llm_configured

    def _get_client(self) -> AsyncAnthropic:
        if not self.is_configured:
            raise ConfigurationError("ANTHROPIC_API_KEY is not configured")

        if self._client is None:
            self._client = AsyncAnthropic(
                api_key=self.settings.anthropic_api_key,
                timeout=httpx.Timeout(
                    timeout=self.settings.llm_timeout_seconds, connect=10.0
                ),
                max_retries=1,
            )
        return self._client

    async def generate(
        self,
        prompt: str,
        system: str,
        *,
        history: Sequence[ChatMessage] = (),
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a response using Claude."""
        client = self._get_client()
        messages = [{"role": m.role, "content": m.content} for m in history]
        messages.append({"role": "user", "content": prompt})

        try:
            response = await client.messages.create(
                model=self.model,
                max_tokens=max_tokens or self.settings.llm_max_tokens,
                temperature=temperature if temperature is not None else 0.7,
                system=system,
                messages=messages,
            )
        except RateLimitError as e:
            logger.warning("Rate limit: %s", e)
            raise LLMError("Rate limit exceeded. Please try again.") from e
        except APITimeoutError as e:
            logger.error("Claude request timed out: %s", e)
            raise LLMError("Request to the language model timed out") from e
        except APIError as e:
            logger.error("API error: %s", e)
            raise LLMError(f"LLM error: {e}") from e

        return "".join(
            block.text for block in response.content if block.type == "text"
        )
