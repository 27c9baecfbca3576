"""Inspection commands: style spans, novel lines and alignment for a request."""

from __future__ import annotations

from pathlib import Path

import typer

from sidediff._exit_codes import INVALID_INPUT
from sidediff.commands import command_context
from sidediff.context import all_matched_lines_filled, lines_with_novel
from sidediff.hunks import matched_lines_for_hunk
from sidediff.lines import split_on_newlines
from sidediff.styling import apply_styles

app = typer.Typer(no_args_is_help=True)


@app.command("styles")
def inspect_styles(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
    side: str = typer.Option("lhs", "--side", "-s", help="Which side to classify: lhs or rhs."),
) -> None:
    """List the style tags assigned to each matched span."""
    if side not in ("lhs", "rhs"):
        from sidediff.main import state

        state.output.error(f"error: invalid side `{side}`, expected lhs or rhs")
        raise typer.Exit(INVALID_INPUT)

    with command_context(request_path, "inspecting styles") as (request, _config, output):
        is_lhs = side == "lhs"
        line_styles = apply_styles(is_lhs, request.lhs_mps if is_lhs else request.rhs_mps)
        rows = [
            {
                "line": line_num,
                "start": span.start_col,
                "end": span.end_col,
                "tags": " ".join(tags),
            }
            for line_num in sorted(line_styles)
            for span, tags in line_styles[line_num]
        ]
        output.render_table(rows, columns=["line", "start", "end", "tags"])


@app.command("novel")
def inspect_novel(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
) -> None:
    """List the lines holding novel content on each side."""
    with command_context(request_path, "inspecting novel lines") as (request, _config, output):
        lhs_novel, rhs_novel = lines_with_novel(request.lhs_mps, request.rhs_mps)
        rows = [{"side": "lhs", "line": n} for n in sorted(lhs_novel)]
        rows += [{"side": "rhs", "line": n} for n in sorted(rhs_novel)]
        output.render_table(rows, columns=["side", "line"])


@app.command("alignment")
def inspect_alignment(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
    hunk_index: int | None = typer.Option(None, "--hunk", min=0, help="Only show this hunk (zero-based)."),
    context: int | None = typer.Option(None, "--context", "-C", min=0, help="Unchanged lines shown around each hunk."),
) -> None:
    """List aligned line pairs per hunk."""
    with command_context(request_path, "inspecting alignment") as (request, config, output):
        if hunk_index is not None and hunk_index >= len(request.hunks):
            output.error(f"error: hunk {hunk_index} out of range ({len(request.hunks)} hunks)")
            raise typer.Exit(INVALID_INPUT)

        matched_lines = all_matched_lines_filled(
            request.lhs_mps,
            request.rhs_mps,
            lhs_line_count=len(split_on_newlines(request.lhs_src)),
            rhs_line_count=len(split_on_newlines(request.rhs_src)),
        )
        context_lines = config.context_lines if context is None else context

        rows = []
        for i, hunk in enumerate(request.hunks):
            if hunk_index is not None and i != hunk_index:
                continue
            for lhs, rhs in matched_lines_for_hunk(matched_lines, hunk, context_lines):
                rows.append({"hunk": i, "lhs": lhs, "rhs": rhs})
        output.render_table(rows, columns=["hunk", "lhs", "rhs"])
