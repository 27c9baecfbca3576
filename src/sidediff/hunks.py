"""Hunks and per-hunk line alignment."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sidediff.lines import LineNumber

AlignedLine = tuple[LineNumber | None, LineNumber | None]


@dataclass(frozen=True)
class Hunk:
    """A region of interest: the novel lines it covers on each side."""

    novel_lhs: frozenset[LineNumber] = frozenset()
    novel_rhs: frozenset[LineNumber] = frozenset()

    @classmethod
    def from_lines(cls, lhs: Iterable[LineNumber] = (), rhs: Iterable[LineNumber] = ()) -> Hunk:
        return cls(novel_lhs=frozenset(lhs), novel_rhs=frozenset(rhs))


def matched_lines_for_hunk(
    matched_lines: Sequence[AlignedLine],
    hunk: Hunk,
    context: int = 0,
) -> list[AlignedLine]:
    """Slice of ``matched_lines`` covering ``hunk``, padded by ``context`` rows each side."""
    touching = [
        i
        for i, (lhs, rhs) in enumerate(matched_lines)
        if (lhs is not None and lhs in hunk.novel_lhs) or (rhs is not None and rhs in hunk.novel_rhs)
    ]
    if not touching:
        return []

    start = max(0, touching[0] - context)
    end = min(len(matched_lines), touching[-1] + 1 + context)
    return list(matched_lines[start:end])
