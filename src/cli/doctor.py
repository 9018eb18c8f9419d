"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.text_store import load_catalog
from core.config import AppSettings, get_user_env_file
from core.domain.models import MovieList
from core.errors import StorageError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_writable(directory: Path) -> tuple[bool, str]:
    """Attempt to create and delete a temporary file in `directory`."""

    if not directory.exists():
        return False, "Directory does not exist (created on first save)"
    try:
        fd, name = tempfile.mkstemp(prefix=".doctor-", dir=directory)
        os.close(fd)
        Path(name).unlink()
        return True, "OK"
    except OSError as exc:
        return False, str(exc)


def _check_list(path: Path) -> tuple[str, str]:
    if not path.exists():
        return "EMPTY", "No file yet"
    try:
        catalog = load_catalog(path)
    except StorageError as exc:
        return "FAIL", str(exc)
    return "OK", f"{len(catalog)} movies"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics on the configured data directory."""

    settings = ctx.find_object(AppSettings) or AppSettings()

    table = Table(title="Movie Tracker Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_dir, detail_dir = _check_writable(settings.data_dir)
    table.add_row("Data dir", "OK" if ok_dir else "WARN", f"{settings.data_dir} ({detail_dir})")

    for kind in MovieList:
        path = settings.path_for(kind)
        status, detail = _check_list(path)
        table.add_row(f"{kind.label()} list", status, f"{path} ({detail})")

    _console.print(table)
