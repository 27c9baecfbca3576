"""Matched token positions produced by the structural differ."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from sidediff.lines import LineNumber


class AtomKind(Enum):
    """Highlight category of a leaf token."""

    NORMAL = "normal"
    STRING = "string"
    TYPE = "type"
    COMMENT = "comment"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class Atom:
    kind: AtomKind = AtomKind.NORMAL


@dataclass(frozen=True)
class Delimiter:
    """Open/close punctuation of a list node. Carries no highlight."""


TokenKind = Union[Atom, Delimiter]


@dataclass(frozen=True)
class SingleLineSpan:
    """Half-open codepoint range ``[start_col, end_col)`` on one line."""

    line: LineNumber
    start_col: int
    end_col: int


@dataclass(frozen=True)
class UnchangedToken:
    highlight: TokenKind
    opposite_pos: SingleLineSpan | None = None


@dataclass(frozen=True)
class Novel:
    highlight: TokenKind


@dataclass(frozen=True)
class NovelLinePart:
    highlight: TokenKind


@dataclass(frozen=True)
class NovelWord:
    highlight: TokenKind


MatchKind = Union[UnchangedToken, Novel, NovelLinePart, NovelWord]


@dataclass(frozen=True)
class MatchedPos:
    kind: MatchKind
    pos: SingleLineSpan


def is_novel(kind: MatchKind) -> bool:
    """True for every kind except ``UnchangedToken``."""
    return isinstance(kind, (Novel, NovelLinePart, NovelWord))
