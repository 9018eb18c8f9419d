"""Run movie-tracker from a source checkout without installing it.

    python main.py list watched
    python -m main
"""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: E402

    run()
