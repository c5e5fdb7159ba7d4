"""Tests for report_parser.normalize — invisible-character cleanup."""

from report_parser.normalize import normalize_text


# ---------------------------------------------------------------------------
# NBSP
# ---------------------------------------------------------------------------


class TestNBSP:
    def test_nbsp_to_space(self):
        assert normalize_text("Glossy\N{NO-BREAK SPACE}Scordite") == "Glossy Scordite"

    def test_double_nbsp_becomes_delimiter_width(self):
        # Two NBSPs become two spaces, which the tokenizer treats as a delimiter
        assert normalize_text("a\N{NO-BREAK SPACE}\N{NO-BREAK SPACE}b") == "a  b"


# ---------------------------------------------------------------------------
# Zero-width characters
# ---------------------------------------------------------------------------


class TestZeroWidth:
    def test_zwsp(self):
        assert normalize_text("Syl\N{ZERO WIDTH SPACE}vite") == "Sylvite"

    def test_zwnj(self):
        assert normalize_text("Syl\N{ZERO WIDTH NON-JOINER}vite") == "Sylvite"

    def test_zwj(self):
        assert normalize_text("Syl\N{ZERO WIDTH JOINER}vite") == "Sylvite"

    def test_bom(self):
        assert normalize_text("\N{ZERO WIDTH NO-BREAK SPACE}Moon\tMoon Product") == "Moon\tMoon Product"

    def test_word_joiner(self):
        assert normalize_text("Syl\N{WORD JOINER}vite") == "Sylvite"


# ---------------------------------------------------------------------------
# Delimiters untouched
# ---------------------------------------------------------------------------


class TestDelimitersPreserved:
    def test_tabs_preserved(self):
        assert normalize_text("\tSylvite\t0.19") == "\tSylvite\t0.19"

    def test_space_runs_preserved(self):
        assert normalize_text("Sylvite    0.19") == "Sylvite    0.19"

    def test_line_breaks_preserved(self):
        assert normalize_text("a\r\nb\nc") == "a\r\nb\nc"

    def test_visible_punctuation_untouched(self):
        assert normalize_text("OP9L-F II - Moon 10") == "OP9L-F II - Moon 10"

    def test_idempotent(self):
        dirty = "\N{ZERO WIDTH NO-BREAK SPACE}OP9L-F\N{NO-BREAK SPACE}II"
        once = normalize_text(dirty)
        assert normalize_text(once) == once

    def test_empty_string(self):
        assert normalize_text("") == ""
