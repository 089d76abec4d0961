"""Tests for answer/citation parsing."""

from services.answer_formatter import extract_bracketed, parse_answer


class TestParseAnswer:
    """Tests for parse_answer."""

    def test_structured_answer_and_citations(self):
        """Test both sections are split and citations keep their order."""
        result = parse_answer(
            "ANSWER: The sky is blue [Section 1]. CITATIONS: [Section 1] [Paragraph 2]"
        )

        assert result.answer == "The sky is blue [Section 1]."
        assert result.citations == ["Section 1", "Paragraph 2"]

    def test_fallback_to_inline_citations(self):
        """Test markerless output is the answer and inline labels are found."""
        result = parse_answer("The answer is here [Exhibit A].")

        assert result.answer == "The answer is here [Exhibit A]."
        assert result.citations == ["Exhibit A"]

    def test_no_citations(self):
        """Test plain text yields no citations."""
        result = parse_answer("Plain answer with no brackets.")

        assert result.answer == "Plain answer with no brackets."
        assert result.citations == []

    def test_markers_case_insensitive(self):
        """Test lowercase markers are recognized."""
        result = parse_answer("answer:  Yes.\ncitations: [Page 4]")

        assert result.answer == "Yes."
        assert result.citations == ["Page 4"]

    def test_multiline_answer(self):
        """Test the answer spans lines up to the CITATIONS marker."""
        raw = "ANSWER:\nFirst point.\n\nSecond point.\n\nCITATIONS:\n[Section 2]\n"
        result = parse_answer(raw)

        assert result.answer == "First point.\n\nSecond point."
        assert result.citations == ["Section 2"]

    def test_citations_section_without_brackets_falls_back(self):
        """Test an unbracketed CITATIONS list falls back to the answer."""
        result = parse_answer(
            "ANSWER: See the term clause [Section 3]. CITATIONS: Section 3, Paragraph 1"
        )

        assert result.answer == "See the term clause [Section 3]."
        assert result.citations == ["Section 3"]

    def test_structured_citations_win_over_inline(self):
        """Test inline labels are ignored when CITATIONS yields labels."""
        result = parse_answer("ANSWER: Inline [Section 9]. CITATIONS: [Section 1]")

        assert result.citations == ["Section 1"]

    def test_citations_deduplicated_first_wins(self):
        """Test duplicates are dropped and case matters."""
        result = parse_answer(
            "ANSWER: x CITATIONS: [Section 2] [ Section 1 ] [Section 2] [section 2]"
        )

        assert result.citations == ["Section 2", "Section 1", "section 2"]

    def test_citations_without_answer_marker(self):
        """Test a CITATIONS section without ANSWER: keeps the raw output as answer."""
        raw = "The fee is $10. CITATIONS: [Paragraph 4]"
        result = parse_answer(raw)

        assert result.answer == raw
        assert result.citations == ["Paragraph 4"]

    def test_empty_answer_section(self):
        """Test an empty ANSWER: section yields an empty answer."""
        result = parse_answer("ANSWER: CITATIONS: [Section 1]")

        assert result.answer == ""
        assert result.citations == ["Section 1"]


class TestExtractBracketed:
    """Tests for extract_bracketed."""

    def test_blank_labels_skipped(self):
        assert extract_bracketed("[ ] [A]") == ["A"]

    def test_empty_brackets_ignored(self):
        assert extract_bracketed("[] and [B]") == ["B"]

    def test_inner_open_bracket_stripped(self):
        assert extract_bracketed("[see [Annex 1]") == ["see Annex 1"]
