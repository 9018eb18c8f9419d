"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the file store and the CLI resolve list paths the same way.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typer import get_app_dir

from core.domain.models import MovieList


APP_NAME = "movie-tracker"


def get_user_env_file() -> Path:
    """Per-user `.env`, e.g. `~/.config/movie-tracker/.env` on Linux."""

    return Path(get_app_dir(APP_NAME)) / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be set through a `MOVIE_TRACKER_*` environment variable,
    the project `.env` or the per-user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIE_TRACKER_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    data_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding the list files (defaults to the working directory).",
    )
    watched_file: str = Field(
        default=MovieList.WATCHED.default_filename(),
        min_length=1,
        description="File name of the Watched list.",
    )
    to_watch_file: str = Field(
        default=MovieList.TO_WATCH.default_filename(),
        min_length=1,
        description="File name of the To Watch list.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level used when --verbose is not given.",
    )

    def path_for(self, kind: MovieList) -> Path:
        """Backing file of a list."""

        name = self.watched_file if kind is MovieList.WATCHED else self.to_watch_file
        return self.data_dir / name
