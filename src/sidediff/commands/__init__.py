"""Shared command infrastructure."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from sidediff._exit_codes import ERROR
from sidediff.loader import RenderInputError, RenderRequest, load_request

if TYPE_CHECKING:
    from sidediff.config import SidediffConfig
    from sidediff.output import OutputContext


@contextmanager
def command_context(
    request_path: Path,
    operation: str = "",
    *,
    catch_all: bool = False,
) -> Generator[tuple[RenderRequest, SidediffConfig, OutputContext], None, None]:
    """Shared context for all commands: request loading + error handling.

    Args:
        request_path: Render request file to load.
        operation: Human-readable label for error messages (e.g. "rendering html").
        catch_all: Also catch generic Exception (rendering failures on malformed positions).
    """
    from sidediff.main import state

    output = state.output
    prefix = f"{operation}: " if operation else ""
    try:
        yield load_request(request_path), state.config, output
    except RenderInputError as e:
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(e.exit_code) from None
    except typer.Exit:
        raise
    except Exception as e:
        if not catch_all:
            raise
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(ERROR) from None
