"""JSON export of both lists.

Why JSON:
- Interoperability with other tools (spreadsheets, scripts).
- Unlike the pipe format, JSON survives `|` and newlines inside fields.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import MovieList
from core.errors import StorageError
from core.services.tracker import MovieTracker


def export_lists_json(*, tracker: MovieTracker, output_path: Path) -> Path:
    """Export every list to UTF-8 JSON with a stable layout."""

    payload = {
        kind.value: [movie.model_dump(mode="json") for movie in tracker.list(kind)]
        for kind in MovieList
    }
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise StorageError(output_path, "Could not write export") from exc
    return output_path
