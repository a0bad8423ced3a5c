"""Benchmark: RotatingWriter write throughput — writes per second.

Measures how many RotatingWriter.rotate_write() calls complete per second,
including the per-call rotation decision, on a writer in a temporary
directory.
"""
from __future__ import annotations

import json
import sys
import tempfile
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dailyrotate.writer import RotatingWriter

_ITERATIONS: int = 10_000
_PAYLOAD: bytes = b"2024-01-01T00:00:00 INFO bench: request handled in 12ms\n"


def bench_rotate_write_throughput() -> dict[str, object]:
    """Benchmark RotatingWriter.rotate_write() throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, bytes_written.
    """
    with tempfile.TemporaryDirectory() as workdir:
        with RotatingWriter(Path(workdir) / "bench.log", retention=3) as writer:
            written = 0
            start = time.perf_counter()
            for _ in range(_ITERATIONS):
                written += writer.rotate_write(_PAYLOAD)
            total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "rotate_write_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
        "p99_latency_ms": 0.0,
        "bytes_written": written,
    }
    print(
        f"[bench_write_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_rotate_write_throughput()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "write_throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
