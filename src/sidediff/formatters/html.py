"""Standalone HTML page for a side-by-side summary."""

from __future__ import annotations

from html import escape

from sidediff.lines import LineNumber
from sidediff.summary import NumberedLine, SummaryDocument

STYLESHEET = """
body { font-family: sans-serif; margin: 1.5em; }
h1 { font-size: 1.1em; font-family: monospace; }
table.summary { border-collapse: collapse; width: 100%; table-layout: fixed; }
table.summary td { font-family: monospace; font-size: 0.9em; white-space: pre-wrap; vertical-align: top; padding: 0 0.5em; }
td.num { width: 3.5em; text-align: right; color: #6e7781; user-select: none; }
td.num.novel { color: #24292f; font-weight: bold; }
td.code.novel { background: #f6f8fa; }
td.empty { background: #eaeef2; }
.novel-lhs { background: #ffd7d5; color: #82071e; }
.novel-rhs { background: #ccffd8; color: #116329; }
.keyword { color: #cf222e; }
.string { color: #0a3069; }
.comment { color: #6e7781; font-style: italic; }
"""

PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{stylesheet}</style>
</head>
<body>
<h1>{title}</h1>
<table class="summary">
<tbody>
{rows}
</tbody>
</table>
</body>
</html>"""


def _render_runs(numbered: NumberedLine) -> str:
    _, runs = numbered
    parts: list[str] = []
    for text, tags in runs:
        if tags:
            parts.append(
                "<span class='{classes}'>{text}</span>".format(
                    classes=escape(" ".join(tags)),
                    text=escape(text),
                )
            )
        else:
            parts.append(escape(text))
    return "".join(parts)


def _render_cells(numbered: NumberedLine | None, novel_lines: set[LineNumber]) -> str:
    if numbered is None:
        return "<td class='num empty'></td><td class='code empty'></td>"
    line_num = numbered[0]
    novel = " novel" if line_num in novel_lines else ""
    return "<td class='num{novel}'>{num}</td><td class='code{novel}'>{code}</td>".format(
        novel=novel,
        num=line_num + 1,
        code=_render_runs(numbered),
    )


def render_summary_html(doc: SummaryDocument) -> str:
    """Render ``doc`` as a complete HTML document."""
    rows = [
        "<tr>{lhs}{rhs}</tr>".format(
            lhs=_render_cells(lhs, doc.lhs_lines_with_novel),
            rhs=_render_cells(rhs, doc.rhs_lines_with_novel),
        )
        for lhs, rhs in doc.paired_lines
    ]
    if not rows:
        rows.append("<tr><td colspan='4'>No changes.</td></tr>")

    return PAGE.format(
        title=escape(doc.display_path),
        stylesheet=STYLESHEET,
        rows="\n".join(rows),
    )
