"""gh-ux output manager: --json, TTY detection, Rich tables, status messages."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any

from sidediff._tty import is_tty, should_use_color


@dataclass
class OutputContext:
    """Manages output rendering based on flags and terminal state.

    Follows gh-ux patterns:
    - TTY: Rich tables with aligned columns
    - Non-TTY: Tab-separated values for piping
    - --json: JSON output
    - --quiet: Suppress status messages, keep errors
    """

    quiet: bool = False
    force_json: bool = False
    _is_tty: bool = field(default_factory=is_tty)
    _use_color: bool = field(default_factory=should_use_color)

    @property
    def is_json_mode(self) -> bool:
        """Check if JSON output is requested."""
        return self.force_json

    @property
    def is_tty(self) -> bool:
        return self._is_tty

    def render_table(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render data as a table (Rich in TTY, TSV in pipe)."""
        if self.is_json_mode:
            self.render_json(rows)
            return

        if not rows:
            self.status("No results found.")
            return

        if self._is_tty:
            self._render_rich_table(rows, columns)
        else:
            self._render_tsv(rows, columns)

    def render_json(self, data: Any) -> None:
        """Render raw JSON output."""
        sys.stdout.write(json.dumps(data, indent=2, default=str) + "\n")

    def status(self, msg: str) -> None:
        """Print a status message (suppressed in --quiet mode)."""
        if not self.quiet:
            sys.stderr.write(f"{msg}\n")

    def error(self, msg: str) -> None:
        """Print an error message (always shown)."""
        sys.stderr.write(f"{msg}\n")

    # ── Private rendering methods ─────────────────────────────────────────

    def _render_rich_table(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render a Rich table for TTY output."""
        from rich.console import Console
        from rich.table import Table

        console = Console(no_color=not self._use_color)
        table = Table(show_edge=False, pad_edge=False)

        for col in columns:
            table.add_column(col.upper(), no_wrap=True)

        for row in rows:
            table.add_row(*[_format_value(row.get(col, "")) for col in columns])

        console.print(table)

    def _render_tsv(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Render tab-separated values for piped output."""
        for row in rows:
            values = [_format_value(row.get(col, "")) for col in columns]
            sys.stdout.write("\t".join(values) + "\n")


def _format_value(value: Any) -> str:
    """Format a value for display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)
