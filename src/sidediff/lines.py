"""Line splitting helpers."""

from __future__ import annotations

LineNumber = int


def split_on_newlines(text: str) -> list[str]:
    """Split on ``\\n`` only, so a trailing newline yields a final empty line."""
    return text.split("\n")


def codepoint_len(line: str) -> int:
    return len(line)
