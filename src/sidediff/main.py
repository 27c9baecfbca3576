"""sidediff CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from sidediff import __version__
from sidediff.config import SidediffConfig, resolve_config
from sidediff.output import OutputContext

app = typer.Typer(
    name="sidediff",
    help="Render precomputed structural diffs as side-by-side views.",
    no_args_is_help=True,
)


class State:
    """Global state shared across commands."""

    config: SidediffConfig
    output: OutputContext


state = State()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sidediff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    profile: str | None = typer.Option(None, "--profile", envvar="SIDEDIFF_PROFILE", help="Config profile name."),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format for `render auto`: auto, html or terminal."
    ),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status messages."),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug messages to stderr."),
) -> None:
    """sidediff - side-by-side views of structural diff results."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    state.config = resolve_config(output_format=output_format, profile=profile)
    state.output = OutputContext(quiet=quiet, force_json=output_json)


# Import and register command groups
from sidediff.commands import inspect, render  # noqa: E402

app.add_typer(render.app, name="render", help="Render a request as HTML or in the terminal.")
app.add_typer(inspect.app, name="inspect", help="Show intermediate styling and alignment data.")

if __name__ == "__main__":
    app()
