"""Typer application.

Every command loads both lists at startup; mutating commands write the
touched list back immediately. Running without a sub-command opens the
interactive menu.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_lists_json
from adapters.text_store import PipeFileStore
from cli import doctor
from cli.menu import run_menu
from cli.prompts import prompt_description, prompt_duration, prompt_title
from cli.ui_components import build_movie_panel, print_movies
from core.config import AppSettings
from core.domain.models import MovieList
from core.domain.validation import validate_description, validate_duration, validate_title
from core.errors import MovieValidationError, StorageError
from core.services.tracker import MovieTracker, TrackerHooks, session

app = typer.Typer(help="Keep track of the movies you watched and the ones you want to watch.")
app.add_typer(doctor.app, name="doctor")

T = TypeVar("T")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.ensure_object(AppSettings)


def _hooks() -> TrackerHooks:
    return TrackerHooks(warning=lambda message: _console.print(f"[yellow]{escape(message)}[/yellow]"))


def _open_tracker(ctx: typer.Context) -> MovieTracker:
    tracker = MovieTracker(PipeFileStore(_settings(ctx)), _hooks())
    tracker.load_all()
    return tracker


def _checked(validator: Callable[[T], T], value: T) -> T:
    try:
        return validator(value)
    except MovieValidationError as exc:
        raise typer.BadParameter(exc.message, param_hint=f"--{exc.field}") from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        file_okay=False,
        help="Directory holding the list files (overrides MOVIE_TRACKER_DATA_DIR).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    if data_dir is not None:
        settings.data_dir = data_dir
    ctx.obj = settings
    configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand is None:
        menu(ctx)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Open the interactive menu."""

    with session(PipeFileStore(_settings(ctx)), _hooks()) as tracker:
        run_menu(_console, tracker)


@app.command()
def add(
    ctx: typer.Context,
    kind: MovieList = typer.Argument(..., metavar="LIST", help="watched or to-watch"),
    title: Optional[str] = typer.Option(None, "--title", "-t"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    duration: Optional[int] = typer.Option(None, "--duration", "-m", help="Minutes (1-600)."),
) -> None:
    """Add a movie to a list (missing fields are prompted for)."""

    title = _checked(validate_title, title) if title is not None else prompt_title(_console)
    if description is not None:
        description = _checked(validate_description, description)
    else:
        description = prompt_description(_console)
    if duration is not None:
        duration = _checked(validate_duration, duration)
    else:
        duration = prompt_duration(_console)

    tracker = _open_tracker(ctx)
    tracker.add(kind, title, description, duration)
    _console.print("[green]Movie successfully added![/green]")


@app.command()
def remove(
    ctx: typer.Context,
    kind: MovieList = typer.Argument(..., metavar="LIST", help="watched or to-watch"),
    title: str = typer.Argument(...),
) -> None:
    """Remove the first movie with this exact title from a list."""

    tracker = _open_tracker(ctx)
    if tracker.remove(kind, title) is None:
        _console.print("[red]Movie not found![/red]")
        raise typer.Exit(code=1)
    _console.print("[green]Movie successfully removed![/green]")


@app.command()
def search(ctx: typer.Context, title: str = typer.Argument(...)) -> None:
    """Find a movie by exact title (Watched first, then To Watch)."""

    hit = _open_tracker(ctx).search(title)
    if hit is None:
        _console.print("[red]Movie not found in either list.[/red]")
        raise typer.Exit(code=1)
    _console.print(build_movie_panel(hit))


@app.command(name="list")
def list_movies(
    ctx: typer.Context,
    kind: MovieList = typer.Argument(..., metavar="LIST", help="watched or to-watch"),
) -> None:
    """Display a list in insertion order."""

    print_movies(_console, kind, _open_tracker(ctx).list(kind))


@app.command()
def export(ctx: typer.Context, output: Path = typer.Argument(..., dir_okay=False)) -> None:
    """Export both lists to a JSON file."""

    try:
        path = export_lists_json(tracker=_open_tracker(ctx), output_path=output)
    except StorageError as exc:
        _console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    _console.print(f"[green]Exported lists to:[/green] {escape(str(path))}")


def run() -> None:
    app()
