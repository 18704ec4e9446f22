"""Tests for text normalization and boundary splitting."""

from vector_bridge.core.document_processing.tasks import (
    normalize_text,
    split_sentences,
    split_words,
)


class TestNormalizeText:
    """Test whitespace, line ending and control character cleanup."""

    def test_empty_input_returns_empty_string(self) -> None:
        """Should return empty output for empty input."""
        assert normalize_text("") == ""

    def test_whitespace_only_input_returns_empty_string(self) -> None:
        """Should trim whitespace-only input to nothing."""
        assert normalize_text(" \t\r\n  \n") == ""

    def test_collapses_horizontal_whitespace(self) -> None:
        """Should collapse tabs and repeated spaces into single spaces."""
        assert normalize_text("one\t\ttwo    three") == "one two three"

    def test_converts_crlf_and_cr_to_lf(self) -> None:
        """Should convert CRLF and lone CR to LF."""
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_collapses_three_or_more_newlines(self) -> None:
        """Should keep a paragraph break as exactly one blank line."""
        assert normalize_text("first\n\n\n\n\nsecond") == "first\n\nsecond"

    def test_drops_spaces_around_line_breaks(self) -> None:
        """Should not leave spaces at line starts or ends."""
        assert normalize_text("first   \n   second") == "first\nsecond"

    def test_removes_control_characters(self) -> None:
        """Should strip control characters but keep newlines."""
        assert normalize_text("bell\x07 and\x00 null\nnext") == "bell and null\nnext"

    def test_trims_result(self) -> None:
        """Should trim leading and trailing whitespace."""
        assert normalize_text("  \n padded text \n ") == "padded text"


class TestSplitSentences:
    """Test boundary pattern selection."""

    def test_splits_on_terminal_punctuation_before_capital(self) -> None:
        """Should split sentences ending in . ! or ? followed by a capital."""
        text = "First one. Second one! Third one? Fourth one."
        assert split_sentences(text) == ["First one.", "Second one!", "Third one?", "Fourth one."]

    def test_does_not_split_before_lowercase(self) -> None:
        """Should keep e.g. abbreviations followed by lowercase together."""
        assert split_sentences("See e.g. this case here") == ["See e.g. this case here"]

    def test_numbered_list_pattern_wins_when_it_yields_more_segments(self) -> None:
        """Should pick the period-digit pattern when it splits more."""
        text = "Steps are 1. 2. 3. 4. Done"
        assert split_sentences(text) == ["Steps are 1.", "2.", "3.", "4. Done"]

    def test_paragraph_pattern_wins_when_it_yields_more_segments(self) -> None:
        """Should split on blank lines when no sentence punctuation exists."""
        text = "alpha beta\n\ngamma delta\n\nepsilon"
        assert split_sentences(text) == ["alpha beta", "gamma delta", "epsilon"]

    def test_tie_prefers_earlier_pattern(self) -> None:
        """Should keep the first pattern's split on a tie."""
        # Sentence and paragraph patterns both produce two segments
        text = "One. Two\n\nthree"
        assert split_sentences(text) == ["One.", "Two\n\nthree"]

    def test_unsplittable_text_is_one_segment(self) -> None:
        """Should return the whole text when no pattern splits it."""
        assert split_sentences("no boundaries at all") == ["no boundaries at all"]


class TestSplitWords:
    """Test word mode splitting."""

    def test_splits_on_any_whitespace(self) -> None:
        """Should split on spaces, tabs and newlines."""
        assert split_words("one two\tthree\n\nfour") == ["one", "two", "three", "four"]

    def test_empty_text_has_no_words(self) -> None:
        """Should return no words for empty text."""
        assert split_words("") == []
