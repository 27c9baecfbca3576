"""Side-by-side summary rendered as a Rich table."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sidediff.lines import LineNumber
from sidediff.summary import NumberedLine, SummaryDocument

# Novelty owns the background, highlights own the foreground.
TAG_STYLES = {
    "novel-lhs": "bold on #5f0000",
    "novel-rhs": "bold on #005f00",
    "keyword": "magenta",
    "string": "yellow",
    "comment": "dim italic",
}


def styled_text(numbered: NumberedLine) -> Text:
    """Build a Text with one styled segment per run."""
    text = Text(no_wrap=False)
    for run, tags in numbered[1]:
        style = " ".join(TAG_STYLES[tag] for tag in tags if tag in TAG_STYLES)
        text.append(run, style=style or None)
    return text


def _cells(numbered: NumberedLine | None, novel_lines: set[LineNumber]) -> tuple[Text, Text]:
    if numbered is None:
        return Text(""), Text("")
    line_num = numbered[0]
    num_style = "bold" if line_num in novel_lines else "dim"
    return Text(str(line_num + 1), style=num_style), styled_text(numbered)


def render_summary_terminal(doc: SummaryDocument, console: Console | None = None) -> None:
    """Print ``doc`` as a four-column table."""
    console = console or Console()

    if not doc.paired_lines:
        console.print(f"[dim]{escape(doc.display_path)}: no changes.[/dim]")
        return

    table = Table(title=Text(doc.display_path), show_header=False, show_edge=False, pad_edge=False, box=None)
    table.add_column("lhs #", justify="right", no_wrap=True)
    table.add_column("lhs", ratio=1)
    table.add_column("rhs #", justify="right", no_wrap=True)
    table.add_column("rhs", ratio=1)

    for lhs, rhs in doc.paired_lines:
        table.add_row(*_cells(lhs, doc.lhs_lines_with_novel), *_cells(rhs, doc.rhs_lines_with_novel))

    console.print(table)
