"""Base LLM service interface.

Defines the contract that all LLM providers must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal


class LLMError(Exception):
    """Raised when LLM generation fails."""


@dataclass(frozen=True)
class ChatMessage:
    """A prior message replayed to the model, in provider role vocabulary."""

    role: Literal["user", "assistant"]
    content: str


class BaseLLMService(ABC):
    """Abstract base class for LLM services.

    All LLM providers (Anthropic, OpenAI, etc.) must implement these methods.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether a credential is available, checked before any network call."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system: str,
        *,
        history: Sequence[ChatMessage] = (),
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a single response.

        Args:
            prompt: Final user message.
            system: System instructions.
            history: Earlier messages, oldest first, sent before the prompt.
            temperature: Sampling temperature (0-1).
            max_tokens: Maximum tokens to generate.

        Returns:
            Generated text (may be empty if the model produced no text).

        Raises:
            LLMError: If the call fails or times out.
        """
