"""Terminal detection and the marks used on status lines."""

from __future__ import annotations

import os
import sys
from typing import IO

# level -> (tty mark, plain mark, ANSI color)
STATUS_MARKS = {
    "success": ("✓", "+", "0;32"),
    "warning": ("!", "!", "0;33"),
}


def is_tty(stream: IO[str] | None = None) -> bool:
    """Check if ``stream`` (stdout by default) is a terminal.

    ``SIDEDIFF_FORCE_TTY=1`` forces a yes, so ``render auto`` can be steered from scripts.
    """
    if os.getenv("SIDEDIFF_FORCE_TTY") == "1":
        return True
    stream = stream if stream is not None else sys.stdout
    return stream.isatty()


def should_use_color(stream: IO[str] | None = None) -> bool:
    """Determine if color output should be used on ``stream``."""
    if os.getenv("NO_COLOR"):
        return False
    if os.getenv("CLICOLOR") == "0":
        return False
    if os.getenv("CLICOLOR_FORCE"):
        return True
    return is_tty(stream)


def status_line(level: str, msg: str) -> str:
    """Prefix ``msg`` with the mark for ``level``, colored when stderr allows it."""
    tty_mark, plain_mark, color = STATUS_MARKS[level]
    mark = tty_mark if is_tty(sys.stderr) else plain_mark
    text = f"{mark} {msg}"
    if not should_use_color(sys.stderr):
        return text
    return f"\033[{color}m{text}\033[0m"


def success(msg: str) -> str:
    return status_line("success", msg)


def warning(msg: str) -> str:
    return status_line("warning", msg)
