"""Pairs left and right lines per hunk and hands them to a rendering backend."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import IO, Any

from sidediff.context import all_matched_lines_filled, lines_with_novel
from sidediff.hunks import Hunk, matched_lines_for_hunk
from sidediff.lines import LineNumber, split_on_newlines
from sidediff.styling import LineStyles, StyledLine, apply_line, apply_styles
from sidediff.syntax import MatchedPos

logger = logging.getLogger(__name__)

NumberedLine = tuple[LineNumber, StyledLine]
PairedLine = tuple[NumberedLine | None, NumberedLine | None]

OUTPUT_FORMATS = ("html", "terminal")


@dataclass
class SummaryDocument:
    """Everything a backend needs to draw one file pair."""

    display_path: str
    paired_lines: list[PairedLine] = field(default_factory=list)
    lhs_lines_with_novel: set[LineNumber] = field(default_factory=set)
    rhs_lines_with_novel: set[LineNumber] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; absent sides become null."""
        return {
            "display_path": self.display_path,
            "paired_lines": [[_numbered_to_dict(lhs), _numbered_to_dict(rhs)] for lhs, rhs in self.paired_lines],
            "lhs_lines_with_novel": sorted(self.lhs_lines_with_novel),
            "rhs_lines_with_novel": sorted(self.rhs_lines_with_novel),
        }


def _numbered_to_dict(numbered: NumberedLine | None) -> dict[str, Any] | None:
    if numbered is None:
        return None
    line_num, runs = numbered
    return {"line": line_num, "runs": [{"text": text, "tags": tags} for text, tags in runs]}


def _numbered_line(
    line_num: LineNumber | None,
    lines: Sequence[str],
    line_styles: dict[LineNumber, LineStyles],
) -> NumberedLine | None:
    if line_num is None:
        return None
    return line_num, apply_line(lines[line_num], line_styles.get(line_num, []))


def build_summary(
    hunks: Sequence[Hunk],
    display_path: str,
    lhs_src: str,
    rhs_src: str,
    lhs_mps: Sequence[MatchedPos],
    rhs_mps: Sequence[MatchedPos],
    *,
    context_lines: int = 0,
) -> SummaryDocument:
    """Build the paired-line sequence for every hunk, in hunk order."""
    lhs_lines = split_on_newlines(lhs_src)
    rhs_lines = split_on_newlines(rhs_src)
    lhs_line_styles = apply_styles(True, lhs_mps)
    rhs_line_styles = apply_styles(False, rhs_mps)

    lhs_lines_with_novel, rhs_lines_with_novel = lines_with_novel(lhs_mps, rhs_mps)
    matched_lines = all_matched_lines_filled(
        lhs_mps,
        rhs_mps,
        lhs_line_count=len(lhs_lines),
        rhs_line_count=len(rhs_lines),
    )

    paired_lines: list[PairedLine] = []
    for hunk in hunks:
        for lhs_num, rhs_num in matched_lines_for_hunk(matched_lines, hunk, context_lines):
            paired_lines.append(
                (
                    _numbered_line(lhs_num, lhs_lines, lhs_line_styles),
                    _numbered_line(rhs_num, rhs_lines, rhs_line_styles),
                )
            )

    logger.debug("Paired %d lines across %d hunks for %s", len(paired_lines), len(hunks), display_path)
    return SummaryDocument(
        display_path=display_path,
        paired_lines=paired_lines,
        lhs_lines_with_novel=lhs_lines_with_novel,
        rhs_lines_with_novel=rhs_lines_with_novel,
    )


def _check_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unknown output format: {output_format}")


def print_summary(
    hunks: Sequence[Hunk],
    display_path: str,
    lhs_src: str,
    rhs_src: str,
    lhs_mps: Sequence[MatchedPos],
    rhs_mps: Sequence[MatchedPos],
    *,
    output_format: str = "html",
    context_lines: int = 0,
    file: IO[str] | None = None,
) -> None:
    """Render one file pair and write it out in a single call."""
    _check_output_format(output_format)

    doc = build_summary(
        hunks,
        display_path,
        lhs_src,
        rhs_src,
        lhs_mps,
        rhs_mps,
        context_lines=context_lines,
    )
    write_summary(doc, output_format=output_format, file=file)


def write_summary(doc: SummaryDocument, *, output_format: str = "html", file: IO[str] | None = None) -> None:
    """Render ``doc`` with the chosen backend and emit it.

    Raises:
        ValueError: If ``output_format`` is not one of ``OUTPUT_FORMATS``.
    """
    _check_output_format(output_format)
    if output_format == "terminal":
        from rich.console import Console

        from sidediff.formatters.terminal import render_summary_terminal

        render_summary_terminal(doc, console=Console(file=file) if file is not None else None)
        return

    from sidediff.formatters.html import render_summary_html

    out = file if file is not None else sys.stdout
    out.write(render_summary_html(doc) + "\n")
