"""Per-line style spans and styled text runs."""

from __future__ import annotations

from collections.abc import Sequence

from sidediff.lines import LineNumber, codepoint_len
from sidediff.syntax import (
    Atom,
    AtomKind,
    MatchedPos,
    Novel,
    NovelWord,
    SingleLineSpan,
    TokenKind,
)

NOVEL_LHS = "novel-lhs"
NOVEL_RHS = "novel-rhs"
STRING = "string"
KEYWORD = "keyword"
COMMENT = "comment"

ATOM_TAGS: dict[AtomKind, str | None] = {
    AtomKind.NORMAL: None,
    AtomKind.STRING: STRING,
    AtomKind.TYPE: KEYWORD,
    AtomKind.COMMENT: COMMENT,
    AtomKind.KEYWORD: KEYWORD,
}

StyledLine = list[tuple[str, list[str]]]
LineStyles = list[tuple[SingleLineSpan, list[str]]]


def apply_line(line: str, styles: Sequence[tuple[SingleLineSpan, list[str]]]) -> StyledLine:
    """Split ``line`` into runs that exactly cover it.

    ``styles`` must be ascending by ``start_col`` and non-overlapping. Text
    between spans becomes an untagged run.
    """
    offset = 0
    res: StyledLine = []

    for span, tags in styles:
        if offset < span.start_col:
            res.append((line[offset : span.start_col], []))

        res.append((line[span.start_col : span.end_col], list(tags)))
        offset = span.end_col

    if offset < codepoint_len(line):
        res.append((line[offset:], []))

    return res


def highlight_tag(highlight: TokenKind) -> str | None:
    """Style tag for a syntax highlight, or None."""
    if isinstance(highlight, Atom):
        return ATOM_TAGS[highlight.kind]
    return None


def apply_styles(is_lhs: bool, mps: Sequence[MatchedPos]) -> dict[LineNumber, LineStyles]:
    """Group matched positions by line, tagging each span.

    Positions keep their input order within a line; nothing is sorted or merged.
    """
    line_styles: dict[LineNumber, LineStyles] = {}
    for mp in mps:
        tags: list[str] = []
        # NovelLinePart gets no novelty tag: its words arrive separately as NovelWord.
        if isinstance(mp.kind, (Novel, NovelWord)):
            tags.append(NOVEL_LHS if is_lhs else NOVEL_RHS)

        tag = highlight_tag(mp.kind.highlight)
        if tag is not None:
            tags.append(tag)

        line_styles.setdefault(mp.pos.line, []).append((mp.pos, tags))

    return line_styles
