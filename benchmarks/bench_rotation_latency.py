"""Benchmark: Rotation latency — per-rotation p50/p99.

Measures the per-call latency of RotatingWriter.rotate() in a directory
holding a month of archives plus unrelated files, so every call pays for a
rename, a reopen and a full retention sweep.
"""
from __future__ import annotations

import json
import sys
import tempfile
import time
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dailyrotate.retention import archive_name
from dailyrotate.writer import RotatingWriter

_WARMUP: int = 20
_ITERATIONS: int = 500
_ARCHIVE_DAYS: int = 30
_RETENTION: int = 30


def _seed_directory(directory: Path, basename: str) -> None:
    """Create a month of archives and a few unrelated files."""
    today = date.today()
    for offset in range(1, _ARCHIVE_DAYS + 1):
        (directory / archive_name(basename, today - timedelta(days=offset))).write_bytes(b"x")
    for name in (".hidden", "other.txt", "notes.md"):
        (directory / name).write_bytes(b"x")


def bench_rotation_latency() -> dict[str, object]:
    """Benchmark RotatingWriter.rotate() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, archives_kept.
    """
    latencies_ms: list[float] = []
    with tempfile.TemporaryDirectory() as workdir:
        directory = Path(workdir)
        _seed_directory(directory, "bench.log")
        with RotatingWriter(directory / "bench.log", retention=_RETENTION) as writer:
            for _ in range(_WARMUP):
                writer.rotate()

            for _ in range(_ITERATIONS):
                writer.write(b"line\n")
                t0 = time.perf_counter()
                writer.rotate()
                latencies_ms.append((time.perf_counter() - t0) * 1000)
            archives_kept = len(writer.archives())

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "rotation_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
        "archives_kept": archives_kept,
    }
    print(
        f"[bench_rotation_latency] {result['operation']}: "
        f"p99={result['p99_latency_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_rotation_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "rotation_latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
