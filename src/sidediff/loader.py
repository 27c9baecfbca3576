"""Render requests: JSON documents carrying sources, matched positions and hunks."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sidediff._exit_codes import INVALID_INPUT
from sidediff.hunks import Hunk
from sidediff.syntax import (
    Atom,
    AtomKind,
    Delimiter,
    MatchedPos,
    MatchKind,
    Novel,
    NovelLinePart,
    NovelWord,
    SingleLineSpan,
    TokenKind,
    UnchangedToken,
)

logger = logging.getLogger(__name__)

NOVEL_KINDS = {
    "novel": Novel,
    "novel_line_part": NovelLinePart,
    "novel_word": NovelWord,
}


class RenderInputError(Exception):
    """Raised when a render request cannot be read or understood."""

    def __init__(self, message: str, exit_code: int = INVALID_INPUT) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass
class RenderRequest:
    """One file pair ready to be rendered."""

    display_path: str
    lhs_src: str
    rhs_src: str
    lhs_mps: list[MatchedPos] = field(default_factory=list)
    rhs_mps: list[MatchedPos] = field(default_factory=list)
    hunks: list[Hunk] = field(default_factory=list)


def load_request(path: Path) -> RenderRequest:
    """Read and parse a request file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RenderInputError(f"cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise RenderInputError(f"{path} is not valid JSON: {e}") from e
    return parse_request(data, base_dir=path.parent, default_path=path.name)


def parse_request(data: Any, base_dir: Path | None = None, default_path: str = "") -> RenderRequest:
    """Build a RenderRequest from decoded JSON.

    Sources come from ``lhs_src``/``rhs_src`` or are read from ``lhs_path``/``rhs_path``
    relative to ``base_dir``. Span geometry is taken as given.
    """
    if not isinstance(data, dict):
        raise RenderInputError("request must be a JSON object")

    base_dir = base_dir or Path.cwd()
    lhs_src = _source(data, "lhs", base_dir)
    rhs_src = _source(data, "rhs", base_dir)
    display_path = data.get("display_path") or data.get("rhs_path") or data.get("lhs_path") or default_path
    if not isinstance(display_path, str):
        raise RenderInputError("`display_path` must be a string")

    request = RenderRequest(
        display_path=display_path,
        lhs_src=lhs_src,
        rhs_src=rhs_src,
        lhs_mps=[_matched_pos(item, f"lhs_positions[{i}]") for i, item in enumerate(_list(data, "lhs_positions"))],
        rhs_mps=[_matched_pos(item, f"rhs_positions[{i}]") for i, item in enumerate(_list(data, "rhs_positions"))],
        hunks=[_hunk(item, f"hunks[{i}]") for i, item in enumerate(_list(data, "hunks"))],
    )
    logger.debug(
        "Loaded request for %s: %d lhs positions, %d rhs positions, %d hunks",
        request.display_path,
        len(request.lhs_mps),
        len(request.rhs_mps),
        len(request.hunks),
    )
    return request


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise RenderInputError(f"`{key}` must be a list")
    return value


def _source(data: dict[str, Any], side: str, base_dir: Path) -> str:
    src = data.get(f"{side}_src")
    if src is not None:
        if not isinstance(src, str):
            raise RenderInputError(f"`{side}_src` must be a string")
        return src

    rel_path = data.get(f"{side}_path")
    if not isinstance(rel_path, str):
        raise RenderInputError(f"missing `{side}_src` or `{side}_path`")
    path = base_dir / rel_path
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise RenderInputError(f"cannot read {path}: {e.strerror or e}") from e


def _int(item: dict[str, Any], key: str, where: str) -> int:
    value = item.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RenderInputError(f"{where}: `{key}` must be an integer")
    return value


def _span(item: Any, where: str) -> SingleLineSpan:
    if not isinstance(item, dict):
        raise RenderInputError(f"{where}: expected an object")
    return SingleLineSpan(
        line=_int(item, "line", where),
        start_col=_int(item, "start_col", where),
        end_col=_int(item, "end_col", where),
    )


def _highlight(value: Any, where: str) -> TokenKind:
    if value == "delimiter":
        return Delimiter()
    try:
        return Atom(AtomKind(value))
    except ValueError:
        raise RenderInputError(f"{where}: unknown highlight {value!r}") from None


def _matched_pos(item: Any, where: str) -> MatchedPos:
    if not isinstance(item, dict):
        raise RenderInputError(f"{where}: expected an object")

    highlight = _highlight(item.get("highlight", "normal"), where)
    kind_name = item.get("kind")
    kind: MatchKind
    if kind_name == "unchanged":
        opposite = item.get("opposite")
        kind = UnchangedToken(
            highlight=highlight,
            opposite_pos=_span(opposite, f"{where}.opposite") if opposite is not None else None,
        )
    elif kind_name in NOVEL_KINDS:
        kind = NOVEL_KINDS[kind_name](highlight=highlight)
    else:
        raise RenderInputError(f"{where}: unknown kind {kind_name!r}")

    return MatchedPos(kind=kind, pos=_span(item, where))


def _hunk(item: Any, where: str) -> Hunk:
    if not isinstance(item, dict):
        raise RenderInputError(f"{where}: expected an object")
    sides = []
    for key in ("lhs_lines", "rhs_lines"):
        lines = item.get(key, [])
        if not isinstance(lines, list) or not all(isinstance(n, int) and not isinstance(n, bool) for n in lines):
            raise RenderInputError(f"{where}: `{key}` must be a list of integers")
        sides.append(lines)
    return Hunk.from_lines(lhs=sides[0], rhs=sides[1])
