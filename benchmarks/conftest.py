"""Shared bootstrap for dailyrotate benchmarks."""
from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).parent.parent
_SRC = _REPO_ROOT / "src"
_BENCHMARKS = _REPO_ROOT / "benchmarks"

for _path in [str(_SRC), str(_BENCHMARKS)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from dailyrotate.retention import archive_name, sweep_archives
from dailyrotate.writer import RotatingWriter

__all__ = [
    "RotatingWriter",
    "archive_name",
    "sweep_archives",
]
