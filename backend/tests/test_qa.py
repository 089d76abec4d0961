"""Tests for the Q&A orchestration service."""

import asyncio

import pytest

from errors import (
    ConfigurationError,
    EmptyInputError,
    SessionNotFoundError,
    UpstreamError,
)
from llm import ChatMessage, LLMError
from services.qa import DocumentQAService


class TestDocumentQAService:
    """Tests for DocumentQAService."""

    @pytest.fixture(autouse=True)
    def setup(self, session_store, mock_llm, sample_document_text):
        """Set up test fixtures."""
        self.store = session_store
        self.llm = mock_llm
        self.service = DocumentQAService(session_store=session_store, llm=mock_llm)
        self.document_text = sample_document_text
        self.session_id = session_store.create(
            "contract.txt", "text/plain", sample_document_text
        )

    # --- ask ---

    @pytest.mark.asyncio
    async def test_ask_returns_parsed_answer(self):
        """Test the completion is split into answer and citations."""
        result = await self.service.ask(self.session_id, "How long is the term?")

        assert result.answer == "The contract runs for two years [Section 3]."
        assert result.citations == ["Section 3", "Paragraph 7"]
        assert [t.role for t in result.history] == ["user", "model"]
        assert result.history[0].content == "How long is the term?"
        assert result.history[1].content == result.answer

    @pytest.mark.asyncio
    async def test_ask_prompt_contract(self):
        """Test the document is in the system prompt and the question is last."""
        await self.service.ask(self.session_id, "Who are the parties?")

        args, kwargs = self.llm.generate.call_args
        prompt, system = args
        assert prompt == "Who are the parties?"
        assert self.document_text in system
        assert "ANSWER:" in system
        assert "CITATIONS:" in system
        assert list(kwargs["history"]) == []

    @pytest.mark.asyncio
    async def test_ask_replays_history_in_provider_roles(self):
        """Test prior turns are sent with model mapped to assistant."""
        await self.service.ask(self.session_id, "First?")
        self.llm.generate.return_value = "ANSWER: Second answer."
        await self.service.ask(self.session_id, "Second?")

        _, kwargs = self.llm.generate.call_args
        assert list(kwargs["history"]) == [
            ChatMessage(role="user", content="First?"),
            ChatMessage(
                role="assistant",
                content="The contract runs for two years [Section 3].",
            ),
        ]

    @pytest.mark.asyncio
    async def test_history_pairing_over_many_asks(self):
        """Test N asks produce 2N alternating turns."""
        for n in range(5):
            result = await self.service.ask(self.session_id, f"Question {n}")

        history = self.store.history(self.session_id)
        assert len(history) == 10
        assert result.history == history
        for i in range(0, len(history), 2):
            assert history[i].role == "user"
            assert history[i + 1].role == "model"

    @pytest.mark.asyncio
    async def test_concurrent_asks_stay_paired(self):
        """Test racing asks on one session keep their pairs contiguous."""

        async def slow_generate(prompt, system, **kwargs):
            await asyncio.sleep(0.01)
            return f"ANSWER: reply to {prompt}"

        self.llm.generate.side_effect = slow_generate

        await asyncio.gather(
            *(self.service.ask(self.session_id, f"q{n}") for n in range(10))
        )

        history = self.store.history(self.session_id)
        assert len(history) == 20
        for i in range(0, 20, 2):
            assert history[i + 1].content == f"reply to {history[i].content}"

    @pytest.mark.asyncio
    async def test_ask_blank_question(self):
        """Test blank questions fail before any lookup or call."""
        with pytest.raises(EmptyInputError):
            await self.service.ask(self.session_id, "   ")
        self.llm.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_ask_unknown_session(self):
        """Test unknown sessions raise SessionNotFoundError."""
        with pytest.raises(SessionNotFoundError):
            await self.service.ask("fabricated-id", "Anything?")

    @pytest.mark.asyncio
    async def test_ask_without_credential(self):
        """Test a missing credential fails before the model is called."""
        self.llm.is_configured = False

        with pytest.raises(ConfigurationError):
            await self.service.ask(self.session_id, "Anything?")
        self.llm.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_ask_upstream_failure_leaves_history(self):
        """Test model errors are rewrapped and nothing is appended."""
        self.llm.generate.side_effect = LLMError("Request to the language model timed out")

        with pytest.raises(UpstreamError, match="Failed to answer question"):
            await self.service.ask(self.session_id, "Anything?")

        assert self.store.history(self.session_id) == ()

    @pytest.mark.asyncio
    async def test_ask_empty_completion(self):
        """Test an empty completion is an UpstreamError."""
        self.llm.generate.return_value = "  "

        with pytest.raises(UpstreamError):
            await self.service.ask(self.session_id, "Anything?")

        assert self.store.history(self.session_id) == ()

    @pytest.mark.asyncio
    async def test_ask_empty_answer_section(self):
        """Test a completion with citations but no answer text is rejected."""
        self.llm.generate.return_value = "ANSWER: CITATIONS: [Section 1]"

        with pytest.raises(UpstreamError, match="no answer"):
            await self.service.ask(self.session_id, "Anything?")

        assert self.store.history(self.session_id) == ()

    @pytest.mark.asyncio
    async def test_failed_answer_not_replayed(self):
        """Test a later ask sends no empty assistant message."""
        self.llm.generate.return_value = "ANSWER:   \nCITATIONS:"
        with pytest.raises(UpstreamError):
            await self.service.ask(self.session_id, "First?")

        self.llm.generate.return_value = "ANSWER: Two years."
        result = await self.service.ask(self.session_id, "Second?")

        assert result.answer == "Two years."
        assert list(self.llm.generate.call_args.kwargs["history"]) == []

    # --- summarize ---

    @pytest.mark.asyncio
    async def test_summarize_returns_raw_text(self):
        """Test summaries are returned without citation parsing."""
        self.llm.generate.return_value = "ANSWER: not parsed [Section 1]"

        summary = await self.service.summarize(self.session_id)

        assert summary == "ANSWER: not parsed [Section 1]"
        prompt, _system = self.llm.generate.call_args.args
        assert self.document_text in prompt
        assert list(self.llm.generate.call_args.kwargs["history"]) == []
        assert self.store.history(self.session_id) == ()

    @pytest.mark.asyncio
    async def test_summarize_ignores_history(self):
        """Test prior conversation is not sent with a summary request."""
        self.store.append_turns(self.session_id, "Q", "A")

        await self.service.summarize(self.session_id)

        assert list(self.llm.generate.call_args.kwargs["history"]) == []

    @pytest.mark.asyncio
    async def test_summarize_unknown_session(self):
        with pytest.raises(SessionNotFoundError):
            await self.service.summarize("fabricated-id")

    @pytest.mark.asyncio
    async def test_summarize_upstream_failure(self):
        self.llm.generate.side_effect = LLMError("boom")

        with pytest.raises(UpstreamError, match="Failed to generate summary"):
            await self.service.summarize(self.session_id)

    # --- simplify ---

    @pytest.mark.asyncio
    async def test_simplify_includes_document_and_excerpt(self):
        """Test the prompt carries both the document and the excerpt."""
        self.llm.generate.return_value = "It means the deal lasts two years."

        simplified = await self.service.simplify(
            self.session_id, "The contract runs for two years"
        )

        assert simplified == "It means the deal lasts two years."
        prompt, _system = self.llm.generate.call_args.args
        assert self.document_text in prompt
        assert "COMPLEX TEXT TO SIMPLIFY:\nThe contract runs for two years" in prompt

    @pytest.mark.asyncio
    async def test_simplify_blank_text(self):
        with pytest.raises(EmptyInputError):
            await self.service.simplify(self.session_id, "\n\t ")

    @pytest.mark.asyncio
    async def test_simplify_unknown_session(self):
        with pytest.raises(SessionNotFoundError):
            await self.service.simplify("fabricated-id", "Some text")

    @pytest.mark.asyncio
    async def test_simplify_without_credential(self):
        self.llm.is_configured = False

        with pytest.raises(ConfigurationError):
            await self.service.simplify(self.session_id, "Some text")
        self.llm.generate.assert_not_called()
