"""Document Q&A orchestration.

Composes the session store, prompt templates, the LLM service and the
answer formatter into the three model-backed document operations:

1. ask: cited answer with the session's conversation replayed
2. summarize: summary of the whole document
3. simplify: plain-language explanation of an excerpt

History is only appended after a completion has been received and parsed,
so a failed or timed-out model call leaves the session untouched.
"""

import logging

from errors import ConfigurationError, EmptyInputError, UpstreamError
from llm import BaseLLMService, ChatMessage, LLMError
from llm.prompts import (
    DOCUMENT_QA_SYSTEM_PROMPT,
    SIMPLIFY_PROMPT,
    SIMPLIFY_SYSTEM_PROMPT,
    SUMMARY_PROMPT,
    SUMMARY_SYSTEM_PROMPT,
)
from services.answer_formatter import parse_answer
from services.session_store import SessionStore
from services.types import ChatResult, ConversationTurn, Session

logger = logging.getLogger(__name__)

# Provider role for each stored conversation role
ROLE_MAP = {"user": "user", "model": "assistant"}


def to_chat_messages(history: tuple[ConversationTurn, ...]) -> list[ChatMessage]:
    """Map stored turns onto the model's role vocabulary."""
    return [ChatMessage(role=ROLE_MAP[t.role], content=t.content) for t in history]


class DocumentQAService:
    """Ask, summarize and simplify against an uploaded document."""

    def __init__(self, session_store: SessionStore, llm: BaseLLMService) -> None:
        self.session_store = session_store
        self.llm = llm

    async def ask(self, session_id: str, question: str) -> ChatResult:
        """Answer a question about the session's document.

        Raises:
            EmptyInputError: Blank question.
            SessionNotFoundError: Unknown session.
            ConfigurationError: Model credential missing.
            UpstreamError: Model call failed or returned nothing.
        """
        if not question or not question.strip():
            raise EmptyInputError("Question cannot be empty")

        session = self._resolve(session_id)
        history = self.session_store.history(session_id)

        raw = await self._complete(
            "answer question",
            prompt=question,
            system=DOCUMENT_QA_SYSTEM_PROMPT.format(document_text=session.text),
            history=to_chat_messages(history),
            temperature=0.7,
            max_tokens=1500,
        )

        result = parse_answer(raw)
        # An empty turn would be rejected by the provider on every later ask
        if not result.answer.strip():
            logger.error("Failed to answer question: completion has no answer text")
            raise UpstreamError("Failed to answer question: model returned no answer")

        updated = self.session_store.append_turns(session_id, question, result.answer)
        logger.info(
            "Answered question for session %s (%d citations, %d turns)",
            session_id,
            len(result.citations),
            len(updated),
        )
        return ChatResult(
            answer=result.answer, citations=result.citations, history=updated
        )

    async def summarize(self, session_id: str) -> str:
        """Summarize the session's document. No history is used."""
        session = self._resolve(session_id)
        return await self._complete(
            "generate summary",
            prompt=SUMMARY_PROMPT.format(document_text=session.text),
            system=SUMMARY_SYSTEM_PROMPT,
            temperature=0.5,
            max_tokens=1000,
        )

    async def simplify(self, session_id: str, text: str) -> str:
        """Explain an excerpt in plain language, with the document as context."""
        if not text or not text.strip():
            raise EmptyInputError("Text to simplify cannot be empty")

        session = self._resolve(session_id)
        return await self._complete(
            "simplify text",
            prompt=SIMPLIFY_PROMPT.format(document_text=session.text, text=text),
            system=SIMPLIFY_SYSTEM_PROMPT,
            temperature=0.7,
            max_tokens=1000,
        )

    def _resolve(self, session_id: str) -> Session:
        session = self.session_store.get(session_id)
        if not self.llm.is_configured:
            raise ConfigurationError("ANTHROPIC_API_KEY is not configured")
        return session

    async def _complete(
        self,
        operation: str,
        *,
        prompt: str,
        system: str,
        history: list[ChatMessage] | None = None,
        temperature: float,
        max_tokens: int,
    ) -> str:
        try:
            raw = await self.llm.generate(
                prompt,
                system,
                history=history or (),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except LLMError as e:
            logger.error("Failed to %s: %s", operation, e)
            raise UpstreamError(f"Failed to {operation}: {e}") from e

        if not raw or not raw.strip():
            logger.error("Failed to %s: empty completion", operation)
            raise UpstreamError(f"Failed to {operation}: model returned no content")

        return raw
