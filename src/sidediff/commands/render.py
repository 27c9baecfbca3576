"""Render commands: HTML page or terminal view for one request."""

from __future__ import annotations

import io
from pathlib import Path

import typer

from sidediff._tty import success, warning
from sidediff.commands import command_context
from sidediff.summary import build_summary, write_summary

app = typer.Typer(no_args_is_help=True)


def _render(request_path: Path, output_format: str, context: int | None, out: Path | None = None) -> None:
    with command_context(request_path, f"rendering {output_format}", catch_all=True) as (request, config, output):
        doc = build_summary(
            request.hunks,
            request.display_path,
            request.lhs_src,
            request.rhs_src,
            request.lhs_mps,
            request.rhs_mps,
            context_lines=config.context_lines if context is None else context,
        )

        if output.is_json_mode:
            output.render_json(doc.to_dict())
            return

        if not doc.paired_lines:
            output.status(warning(f"{doc.display_path}: no lines to show"))

        if out is None:
            write_summary(doc, output_format=output_format)
            return

        # The target is only touched once the whole page has rendered.
        buf = io.StringIO()
        write_summary(doc, output_format=output_format, file=buf)
        out.write_text(buf.getvalue(), encoding="utf-8")
        output.status(success(f"Wrote {out}"))


@app.command("html")
def render_html(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
    out: Path | None = typer.Option(None, "--out", "-o", help="Write the page to this file instead of stdout."),
    context: int | None = typer.Option(None, "--context", "-C", min=0, help="Unchanged lines shown around each hunk."),
) -> None:
    """Render a request as a standalone HTML page."""
    _render(request_path, "html", context, out)


@app.command("terminal")
def render_terminal(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
    context: int | None = typer.Option(None, "--context", "-C", min=0, help="Unchanged lines shown around each hunk."),
) -> None:
    """Render a request as a side-by-side table in the terminal."""
    _render(request_path, "terminal", context)


@app.command("auto")
def render_auto(
    request_path: Path = typer.Argument(help="Render request (JSON).", dir_okay=False),
    context: int | None = typer.Option(None, "--context", "-C", min=0, help="Unchanged lines shown around each hunk."),
) -> None:
    """Render with the configured format (terminal on a TTY, HTML otherwise)."""
    from sidediff.main import state

    output_format = state.config.output_format
    if output_format == "auto":
        output_format = "terminal" if state.output.is_tty else "html"
    _render(request_path, output_format, context)
