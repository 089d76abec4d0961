"""Tests for the markdown transcript exporter."""

from datetime import UTC, datetime

from services.export import TranscriptExporter, notes_filename
from services.types import ConversationTurn, Session


def make_session(filename="contract.pdf", history=None) -> Session:
    return Session(
        session_id="abc",
        filename=filename,
        content_type="application/pdf",
        storage_path=None,
        text="Body",
        created_at=datetime(2026, 3, 14, 9, 26, 53, tzinfo=UTC),
        history=list(history or []),
    )


class TestTranscriptExporter:
    """Tests for TranscriptExporter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.exporter = TranscriptExporter()

    def test_empty_history(self):
        """Test a session without questions says so."""
        notes = self.exporter.render(make_session())

        assert notes.markdown.startswith("# Document Q&A Notes\n\n**Document:** contract.pdf\n")
        assert "**Date:** " in notes.markdown
        assert notes.markdown.endswith("---\n\nNo questions asked yet.\n")
        assert "## Q" not in notes.markdown

    def test_pairs_numbered_from_one(self):
        """Test each question/answer pair gets a numbered heading."""
        session = make_session(
            history=[
                ConversationTurn("user", "What is the term?"),
                ConversationTurn("model", "Two years [Section 3]."),
                ConversationTurn("user", "Who signs?"),
                ConversationTurn("model", "Both parties."),
            ]
        )

        markdown = self.exporter.render(session).markdown

        assert "## Q1: What is the term?\n\n**Answer:**\n\nTwo years [Section 3].\n\n---\n\n" in markdown
        assert "## Q2: Who signs?\n\n**Answer:**\n\nBoth parties.\n\n---\n\n" in markdown
        assert markdown.index("## Q1") < markdown.index("## Q2")
        assert "No questions asked yet." not in markdown

    def test_render_is_idempotent_and_read_only(self):
        """Test repeated renders are identical and leave history untouched."""
        history = [
            ConversationTurn("user", "Q"),
            ConversationTurn("model", "A"),
        ]
        session = make_session(history=history)

        first = self.exporter.render(session)
        second = self.exporter.render(session)

        assert first == second
        assert session.history == history

    def test_date_is_rendered_in_local_time(self):
        """Test the upload time uses the local locale format."""
        session = make_session()
        expected = session.created_at.astimezone().strftime("%c")

        assert f"**Date:** {expected}\n" in self.exporter.render(session).markdown

    def test_filename(self):
        assert self.exporter.render(make_session("contract.pdf")).filename == "contract_notes.md"


class TestNotesFilename:
    """Tests for notes_filename."""

    def test_strips_last_extension_only(self):
        assert notes_filename("report.final.docx") == "report.final_notes.md"

    def test_no_extension(self):
        assert notes_filename("README") == "README_notes.md"
