"""
Test suite for core/config.py — settings and file locations
"""

import sys

import pytest

from core.config import AppSettings, get_user_env_file
from core.domain.models import MovieList


class TestUserEnvFile:

    def test_lives_in_app_dir(self):
        env_file = get_user_env_file()
        assert env_file.name == ".env"
        assert env_file.parent.name.lower() == "movie-tracker"

    @pytest.mark.skipif(sys.platform == "win32", reason="Windows uses APPDATA")
    def test_follows_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_env_file() == tmp_path / "movie-tracker" / ".env"


class TestAppSettings:

    def test_env_overrides_file_names(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MOVIE_TRACKER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MOVIE_TRACKER_WATCHED_FILE", "seen.txt")

        settings = AppSettings()

        assert settings.path_for(MovieList.WATCHED) == tmp_path / "seen.txt"
        assert settings.path_for(MovieList.TO_WATCH) == tmp_path / "to_watch_movies.txt"
