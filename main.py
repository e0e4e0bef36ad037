"""Run the `oneliners` CLI from a source checkout: `python main.py reverse abc`."""

from __future__ import annotations

import sys
from pathlib import Path

if __name__ == "__main__":
    sys.path.append(str(Path(__file__).resolve().parent))

    from oneliners.runtime.lifecycle import main

    raise SystemExit(main())
