"""Interactive menu.

Main menu: 1 Watched, 2 To Watch, 3 Search, 4 Exit. Each list has its own
sub-menu: 1 Add, 2 Remove, 3 Display, 4 Return. Running out of input
behaves like choosing Exit. Saving is left to the `session` wrapping the
loop.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from cli.prompts import prompt_description, prompt_duration, prompt_title
from cli.ui_components import build_movie_panel, print_banner, print_heading, print_movies
from core.domain.models import MovieList
from core.services.tracker import MovieTracker

logger = logging.getLogger(__name__)

MAIN_MENU: tuple[tuple[str, str], ...] = (
    ("Watched Movies Menu", "cyan"),
    ("To Watch Movies Menu", "cyan"),
    ("Search Movie", "cyan"),
    ("Exit", "red"),
)

INVALID_CHOICE = "[red]Invalid choice! Please enter a number between 1 and 4.[/red]"


def _read_choice() -> int | None:
    raw = typer.prompt("Enter your choice (1-4)", default="", show_default=False)
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _print_options(console: Console, heading: str, style: str, options: tuple[tuple[str, str], ...]) -> None:
    print_heading(console, heading, style)
    for number, (label, color) in enumerate(options, start=1):
        console.print(f"{number}. [{color}]{label}[/{color}]")


def _list_options(kind: MovieList) -> tuple[tuple[str, str], ...]:
    label = kind.label()
    return (
        (f"Add Movie to '{label}'", "cyan"),
        (f"Remove Movie from '{label}'", "cyan"),
        (f"Display '{label}' List", "cyan"),
        ("Return to Main Menu", "yellow"),
    )


def add_movie(console: Console, tracker: MovieTracker, kind: MovieList) -> None:
    print_heading(console, f"ADD MOVIE TO {kind.label().upper()}", kind.color())
    title = prompt_title(console)
    description = prompt_description(console)
    duration = prompt_duration(console)
    tracker.add(kind, title, description, duration)
    console.print("[green]Movie successfully added![/green]")


def remove_movie(console: Console, tracker: MovieTracker, kind: MovieList) -> None:
    print_heading(console, f"REMOVE MOVIE FROM {kind.label().upper()}", "red")
    title = prompt_title(console, "Enter the movie title to remove")
    if tracker.remove(kind, title) is None:
        console.print("[red]Movie not found![/red]")
    else:
        console.print("[green]Movie successfully removed![/green]")


def search_movie(console: Console, tracker: MovieTracker) -> None:
    print_heading(console, "SEARCH MOVIE", "blue")
    title = prompt_title(console, "Enter the movie title to search for")
    hit = tracker.search(title)
    if hit is None:
        console.print("[red]Movie not found in either list.[/red]")
    else:
        console.print(build_movie_panel(hit))


def list_menu(console: Console, tracker: MovieTracker, kind: MovieList) -> None:
    """Sub-menu of one list; returns on choice 4."""

    heading = f"{kind.label().upper()} MOVIES MENU"
    while True:
        _print_options(console, heading, kind.color(), _list_options(kind))
        choice = _read_choice()
        if choice == 1:
            add_movie(console, tracker, kind)
        elif choice == 2:
            remove_movie(console, tracker, kind)
        elif choice == 3:
            print_heading(console, f"{kind.label().upper()} MOVIES LIST", kind.color())
            print_movies(console, kind, tracker.list(kind))
        elif choice == 4:
            return
        else:
            console.print(INVALID_CHOICE)


def run_menu(console: Console, tracker: MovieTracker) -> None:
    """Main loop. The caller saves both lists once it returns."""

    print_banner(console)
    try:
        while True:
            _print_options(console, "MOVIE TRACKER - MAIN MENU", "blue", MAIN_MENU)
            choice = _read_choice()
            if choice == 1:
                list_menu(console, tracker, MovieList.WATCHED)
            elif choice == 2:
                list_menu(console, tracker, MovieList.TO_WATCH)
            elif choice == 3:
                search_movie(console, tracker)
            elif choice == 4:
                break
            else:
                console.print(INVALID_CHOICE)
    except typer.Abort:
        logger.debug("Input closed, leaving the menu")

    console.print("[yellow]Saving data and exiting...[/yellow]")
