"""Validated prompt loops.

A prompt keeps asking until the validator accepts the answer. Validators
are the plain callables from `core.domain.validation`: they return the
converted value or raise `MovieValidationError`.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import typer
from rich.console import Console

from core.domain.validation import parse_duration, validate_description, validate_title
from core.errors import MovieValidationError

T = TypeVar("T")


def prompt_valid(console: Console, prompt: str, validator: Callable[[str], T]) -> T:
    """Ask for `prompt` until `validator` accepts the answer.

    Raises `typer.Abort` when input runs out.
    """

    while True:
        raw = typer.prompt(prompt, default="", show_default=False)
        try:
            return validator(raw)
        except MovieValidationError as exc:
            console.print(f"[red]Error: {exc.message}[/red]")


def prompt_title(console: Console, prompt: str = "Enter the movie title") -> str:
    return prompt_valid(console, prompt, validate_title)


def prompt_description(console: Console) -> str:
    return prompt_valid(console, "Enter the description", validate_description)


def prompt_duration(console: Console) -> int:
    return prompt_valid(console, "Enter the duration in minutes", parse_duration)
