"""Markdown export of a session's Q&A transcript."""

import re

from services.types import ExportedNotes, Session

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def notes_filename(document_filename: str) -> str:
    """``report.final.pdf`` -> ``report.final_notes.md``."""
    return f"{_EXTENSION_RE.sub('', document_filename)}_notes.md"


class TranscriptExporter:
    """Renders a session's history as markdown notes.

    Rendering only reads the session, so repeated calls on an unchanged
    session produce identical output.
    """

    def render(self, session: Session) -> ExportedNotes:
        uploaded = session.created_at.astimezone().strftime("%c")
        parts = [
            "# Document Q&A Notes\n\n",
            f"**Document:** {session.filename}\n",
            f"**Date:** {uploaded}\n\n",
            "---\n\n",
        ]

        history = tuple(session.history)
        if not history:
            parts.append("No questions asked yet.\n")
        else:
            for i in range(0, len(history) - 1, 2):
                question, answer = history[i], history[i + 1]
                parts.append(f"## Q{i // 2 + 1}: {question.content}\n\n")
                parts.append(f"**Answer:**\n\n{answer.content}\n\n")
                parts.append("---\n\n")

        return ExportedNotes(
            markdown="".join(parts), filename=notes_filename(session.filename)
        )
