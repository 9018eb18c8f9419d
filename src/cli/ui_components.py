"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels are shared by the one-shot commands and the menu.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Movie, MovieList, SearchHit


def print_banner(console: Console) -> None:
    """Print the welcome banner (menu mode only)."""

    title = Text("MOVIE TRACKER", style="bold blue")
    subtitle = Text("Watched • To Watch", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="blue", padding=(1, 4)))


def print_heading(console: Console, text: str, style: str) -> None:
    console.print(f"\n[bold {style}]=== {text} ===[/bold {style}]")


def build_movies_table(kind: MovieList, movies: Sequence[Movie]) -> Table:
    """Numbered table of a list, in display order."""

    color = kind.color()
    table = Table(title=f"{kind.label()} Movies", title_style=f"bold {color}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style=f"bold {color}")
    table.add_column("Description", style="white")
    table.add_column("Duration", style="yellow", justify="right", no_wrap=True)
    for index, movie in enumerate(movies, start=1):
        table.add_row(str(index), Text(movie.title), Text(movie.description), f"{movie.duration} minutes")
    return table


def print_movies(console: Console, kind: MovieList, movies: Sequence[Movie]) -> None:
    if not movies:
        console.print("[yellow]No movies to display.[/yellow]")
        return
    console.print(build_movies_table(kind, movies))


def build_movie_panel(hit: SearchHit) -> Panel:
    """Panel for a search result, tagged with the list it was found in."""

    color = hit.kind.color()
    body = Text()
    body.append("Title: ")
    body.append(hit.movie.title, style=f"bold {color}")
    body.append(f"\nDescription: {hit.movie.description}")
    body.append("\nDuration: ")
    body.append(f"{hit.movie.duration} minutes", style="yellow")

    title = Text(f"Movie found in '{hit.kind.label()}' List", style=color)
    return Panel(body, title=title, border_style=color)
