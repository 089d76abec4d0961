"""Parse free-text model completions into an answer and citation labels.

The model is asked to reply as::

    ANSWER: <answer text>
    CITATIONS: [Section 1] [Paragraph 2]

Models do not always comply, so parsing degrades gracefully: without an
ANSWER: marker the whole completion is the answer, and without bracketed
labels in a CITATIONS: section the labels are recovered from the answer.
"""

import re

from services.types import QAResult

_ANSWER_RE = re.compile(r"ANSWER:\s*(.*?)(?=CITATIONS:|\Z)", re.IGNORECASE | re.DOTALL)
_CITATIONS_RE = re.compile(r"CITATIONS:\s*(.*)\Z", re.IGNORECASE | re.DOTALL)
_BRACKETED_RE = re.compile(r"\[[^\]]+\]")


def extract_bracketed(text: str) -> list[str]:
    """Return bracketed labels in order, trimmed and de-duplicated.

    The first occurrence wins and equality is case-sensitive.
    """
    labels: list[str] = []
    for match in _BRACKETED_RE.findall(text):
        label = match.replace("[", "").replace("]", "").strip()
        if label and label not in labels:
            labels.append(label)
    return labels


def parse_answer(raw: str) -> QAResult:
    """Split a completion into answer text and citation labels."""
    answer_match = _ANSWER_RE.search(raw)
    answer = answer_match.group(1).strip() if answer_match else raw

    citations_match = _CITATIONS_RE.search(raw)
    citations_text = citations_match.group(1).strip() if citations_match else ""

    citations = extract_bracketed(citations_text) if citations_text else []
    if not citations:
        citations = extract_bracketed(answer)

    return QAResult(answer=answer, citations=citations)
