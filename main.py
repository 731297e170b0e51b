"""Development entry point (no install needed).

Run the CLI with:
- `python main.py classify 4 5 22 23`

The code lives under `src/` (src layout), so without an editable install
Python would not find `cli`, `core`, etc.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
