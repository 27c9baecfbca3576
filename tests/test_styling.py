"""Tests for styling module (span styler and match classifier)."""

from __future__ import annotations

import pytest

from sidediff.styling import (
    COMMENT,
    KEYWORD,
    NOVEL_LHS,
    NOVEL_RHS,
    STRING,
    apply_line,
    apply_styles,
    highlight_tag,
)
from sidediff.syntax import (
    Atom,
    AtomKind,
    Delimiter,
    MatchedPos,
    Novel,
    NovelLinePart,
    NovelWord,
    SingleLineSpan,
    UnchangedToken,
)


def span(line: int, start: int, end: int) -> SingleLineSpan:
    return SingleLineSpan(line=line, start_col=start, end_col=end)


class TestApplyLine:
    """Test apply_line function."""

    def test_keyword_and_string_example(self):
        """Test the canonical `let x = 1;` example."""
        styles = [(span(0, 0, 3), ["keyword"]), (span(0, 8, 9), ["string"])]
        result = apply_line("let x = 1;", styles)
        assert result == [
            ("let", ["keyword"]),
            (" x = ", []),
            ("1", ["string"]),
            (";", []),
        ]

    def test_no_styles(self):
        """Test that an unstyled line is a single untagged run."""
        assert apply_line("plain text", []) == [("plain text", [])]

    def test_empty_line_no_styles(self):
        """Test that an empty line yields no runs."""
        assert apply_line("", []) == []

    def test_adjacent_spans_no_empty_gap(self):
        """Test that touching spans do not produce an empty run between them."""
        styles = [(span(0, 0, 2), ["a"]), (span(0, 2, 4), ["b"])]
        assert apply_line("abcd", styles) == [("ab", ["a"]), ("cd", ["b"])]

    def test_span_to_end_no_trailing_run(self):
        """Test that a span ending at the line end leaves no trailing run."""
        styles = [(span(0, 2, 5), ["keyword"])]
        assert apply_line("a bcd", styles) == [("a ", []), ("bcd", ["keyword"])]

    def test_multibyte_text(self):
        """Test that columns are codepoints, not bytes."""
        line = "s = \"héllo wörld\""
        styles = [(span(0, 4, 17), ["string"])]
        result = apply_line(line, styles)
        assert result == [("s = ", []), ("\"héllo wörld\"", ["string"])]

    def test_emoji_columns(self):
        """Test slicing around astral-plane characters."""
        line = "🎉 ok"
        styles = [(span(0, 2, 4), ["keyword"])]
        assert apply_line(line, styles) == [("🎉 ", []), ("ok", ["keyword"])]

    def test_tags_are_copied(self):
        """Test that returned tag lists are not the caller's lists."""
        tags = ["keyword"]
        result = apply_line("let", [(span(0, 0, 3), tags)])
        result[0][1].append("mutated")
        assert tags == ["keyword"]

    @pytest.mark.parametrize(
        ("line", "spans"),
        [
            ("fn main() {}", [(0, 2), (3, 7), (10, 12)]),
            ("x", [(0, 1)]),
            ("  // comment", [(2, 12)]),
            ("a = b", [(4, 5)]),
            ("zero width", [(4, 4)]),
        ],
    )
    def test_runs_cover_line(self, line, spans):
        """Test that concatenated runs give back the original line, in order."""
        styles = [(span(0, s, e), ["t"]) for s, e in spans]
        runs = apply_line(line, styles)
        assert "".join(text for text, _ in runs) == line


class TestHighlightTag:
    """Test highlight_tag table."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (AtomKind.NORMAL, None),
            (AtomKind.STRING, STRING),
            (AtomKind.TYPE, KEYWORD),
            (AtomKind.COMMENT, COMMENT),
            (AtomKind.KEYWORD, KEYWORD),
        ],
    )
    def test_atom_kinds(self, kind, expected):
        assert highlight_tag(Atom(kind)) == expected

    def test_delimiter_has_no_tag(self):
        assert highlight_tag(Delimiter()) is None

    def test_tag_values(self):
        """Test the literal tag names used as CSS classes."""
        assert (STRING, KEYWORD, COMMENT) == ("string", "keyword", "comment")
        assert (NOVEL_LHS, NOVEL_RHS) == ("novel-lhs", "novel-rhs")


class TestApplyStyles:
    """Test apply_styles function."""

    def test_novel_rhs_keyword(self):
        """Test that a novel keyword on the rhs gets novel-rhs then keyword."""
        mps = [MatchedPos(kind=Novel(highlight=Atom(AtomKind.KEYWORD)), pos=span(4, 2, 5))]
        result = apply_styles(False, mps)
        assert result == {4: [(span(4, 2, 5), ["novel-rhs", "keyword"])]}

    def test_novel_lhs(self):
        """Test that the lhs gets the lhs novelty tag."""
        mps = [MatchedPos(kind=Novel(highlight=Atom(AtomKind.NORMAL)), pos=span(0, 0, 1))]
        assert apply_styles(True, mps) == {0: [(span(0, 0, 1), ["novel-lhs"])]}

    def test_novel_word_gets_novelty_tag(self):
        mps = [MatchedPos(kind=NovelWord(highlight=Atom(AtomKind.COMMENT)), pos=span(1, 3, 7))]
        assert apply_styles(True, mps) == {1: [(span(1, 3, 7), ["novel-lhs", "comment"])]}

    def test_novel_line_part_has_no_novelty_tag(self):
        """Test that NovelLinePart is left to its NovelWord parts."""
        mps = [MatchedPos(kind=NovelLinePart(highlight=Atom(AtomKind.COMMENT)), pos=span(2, 0, 12))]
        assert apply_styles(False, mps) == {2: [(span(2, 0, 12), ["comment"])]}

    def test_unchanged_has_no_novelty_tag(self):
        mps = [
            MatchedPos(kind=UnchangedToken(highlight=Atom(AtomKind.STRING)), pos=span(0, 0, 5)),
            MatchedPos(kind=UnchangedToken(highlight=Atom(AtomKind.NORMAL)), pos=span(0, 6, 7)),
        ]
        result = apply_styles(True, mps)
        assert result == {0: [(span(0, 0, 5), ["string"]), (span(0, 6, 7), [])]}

    def test_delimiter_highlight(self):
        mps = [MatchedPos(kind=Novel(highlight=Delimiter()), pos=span(0, 0, 1))]
        assert apply_styles(False, mps) == {0: [(span(0, 0, 1), ["novel-rhs"])]}

    def test_groups_by_line_preserving_order(self):
        """Test grouping keeps caller order within a line and does not sort."""
        mps = [
            MatchedPos(kind=Novel(highlight=Atom(AtomKind.NORMAL)), pos=span(3, 5, 6)),
            MatchedPos(kind=Novel(highlight=Atom(AtomKind.NORMAL)), pos=span(1, 0, 1)),
            MatchedPos(kind=Novel(highlight=Atom(AtomKind.NORMAL)), pos=span(3, 0, 2)),
        ]
        result = apply_styles(True, mps)
        assert [s for s, _ in result[3]] == [span(3, 5, 6), span(3, 0, 2)]
        assert [s for s, _ in result[1]] == [span(1, 0, 1)]

    def test_empty_input(self):
        assert apply_styles(True, []) == {}

    def test_repeatable(self):
        """Test that classifying the same input twice gives equal results."""
        mps = [
            MatchedPos(kind=NovelWord(highlight=Atom(AtomKind.KEYWORD)), pos=span(0, 0, 2)),
            MatchedPos(kind=UnchangedToken(highlight=Atom(AtomKind.TYPE)), pos=span(1, 0, 3)),
        ]
        assert apply_styles(False, mps) == apply_styles(False, mps)
