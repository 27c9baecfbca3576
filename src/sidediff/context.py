"""Whole-file line alignment derived from matched positions."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

from sidediff.hunks import AlignedLine
from sidediff.lines import LineNumber
from sidediff.syntax import MatchedPos, UnchangedToken, is_novel


def _line_count(mps: Sequence[MatchedPos]) -> int:
    return max((mp.pos.line for mp in mps), default=-1) + 1


def _anchors(lhs_mps: Sequence[MatchedPos]) -> list[tuple[LineNumber, LineNumber]]:
    """Unchanged lhs/rhs line pairs, ascending on both sides."""
    pairs = sorted(
        {
            (mp.pos.line, mp.kind.opposite_pos.line)
            for mp in lhs_mps
            if isinstance(mp.kind, UnchangedToken) and mp.kind.opposite_pos is not None
        }
    )
    anchors: list[tuple[LineNumber, LineNumber]] = []
    for lhs, rhs in pairs:
        if anchors and (lhs <= anchors[-1][0] or rhs <= anchors[-1][1]):
            continue
        anchors.append((lhs, rhs))
    return anchors


def _fill_gap(lhs_range: range, rhs_range: range) -> list[AlignedLine]:
    return list(zip_longest(lhs_range, rhs_range))


def all_matched_lines_filled(
    lhs_mps: Sequence[MatchedPos],
    rhs_mps: Sequence[MatchedPos],
    *,
    lhs_line_count: int | None = None,
    rhs_line_count: int | None = None,
) -> list[AlignedLine]:
    """Align every line of both sides.

    Lines tied together by unchanged tokens share a row. Lines between two
    such rows are paired up in order and the leftovers get a row of their own.
    """
    if lhs_line_count is None:
        lhs_line_count = _line_count(lhs_mps)
    if rhs_line_count is None:
        rhs_line_count = _line_count(rhs_mps)

    res: list[AlignedLine] = []
    prev_lhs, prev_rhs = -1, -1
    for lhs, rhs in _anchors(lhs_mps):
        if lhs >= lhs_line_count or rhs >= rhs_line_count:
            break
        res.extend(_fill_gap(range(prev_lhs + 1, lhs), range(prev_rhs + 1, rhs)))
        res.append((lhs, rhs))
        prev_lhs, prev_rhs = lhs, rhs

    res.extend(_fill_gap(range(prev_lhs + 1, lhs_line_count), range(prev_rhs + 1, rhs_line_count)))
    return res


def lines_with_novel(
    lhs_mps: Sequence[MatchedPos],
    rhs_mps: Sequence[MatchedPos],
) -> tuple[set[LineNumber], set[LineNumber]]:
    """Lines on each side holding at least one novel position."""
    lhs_lines = {mp.pos.line for mp in lhs_mps if is_novel(mp.kind)}
    rhs_lines = {mp.pos.line for mp in rhs_mps if is_novel(mp.kind)}
    return lhs_lines, rhs_lines
