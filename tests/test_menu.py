"""
Test suite for cli/menu.py — driven with scripted answers
"""

import pytest
import typer
from rich.console import Console

from cli import menu
from core.domain.models import MovieList
from core.services.tracker import MovieTracker, session


@pytest.fixture
def console():
    return Console(record=True, width=120)


@pytest.fixture
def answers(monkeypatch):
    """Replace typer.prompt with a script; running out behaves like Ctrl-D."""

    script = []

    def fake_prompt(text, **kwargs):
        if not script:
            raise typer.Abort()
        return script.pop(0)

    monkeypatch.setattr(typer, "prompt", fake_prompt)
    return script


class TestRunMenu:

    def test_end_of_input_leaves_menu(self, console, answers, memory_store):
        answers.extend(["2", "1", "Heat", "Crime", "170"])

        with session(memory_store) as tracker:
            menu.run_menu(console, tracker)

        assert "Saving data and exiting..." in console.export_text()
        assert [m.title for m in memory_store.saved[MovieList.TO_WATCH]] == ["Heat"]
        assert memory_store.save_calls[-2:] == [MovieList.WATCHED, MovieList.TO_WATCH]

    def test_exit_saves_each_list_once(self, console, answers, memory_store):
        answers.append("4")

        with session(memory_store) as tracker:
            menu.run_menu(console, tracker)

        assert memory_store.save_calls == [MovieList.WATCHED, MovieList.TO_WATCH]

    def test_menu_itself_does_not_save(self, console, answers, memory_store):
        answers.append("4")
        menu.run_menu(console, MovieTracker(memory_store))
        assert memory_store.save_calls == []

    def test_add_prompts_until_valid(self, console, answers, memory_store):
        answers.extend(["x" * 100, "Dune", "", "Sci-fi epic", "601", "155"])
        tracker = MovieTracker(memory_store)

        menu.add_movie(console, tracker, MovieList.WATCHED)

        output = console.export_text()
        assert "Title must be between 1 and 99 characters." in output
        assert "Description must be between 1 and 255 characters." in output
        assert "Duration must be between 1 and 600 minutes." in output
        assert tracker.search("Dune").movie.duration == 155

    def test_display_empty_list(self, console, answers, memory_store):
        answers.extend(["3", "4"])

        menu.list_menu(console, MovieTracker(memory_store), MovieList.TO_WATCH)

        output = console.export_text()
        assert "TO WATCH MOVIES LIST" in output
        assert "No movies to display." in output

    def test_search_miss(self, console, answers, memory_store):
        answers.append("Tenet")
        menu.search_movie(console, MovieTracker(memory_store))
        assert "Movie not found in either list." in console.export_text()
