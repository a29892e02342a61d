#!/usr/bin/env python3
"""Align two paired point sets without installing the package:

    python scripts/align.py src.npy dst.npy -o transform.txt
    python scripts/align.py --config align.yaml --no-scale
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make kabsch_umeyama importable from a source checkout.
_SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(_SRC))

from kabsch_umeyama.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
