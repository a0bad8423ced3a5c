#!/usr/bin/env python3
"""Example: Quickstart — dailyrotate

Minimal working example: open a rotating writer, write through it, age the
live file to simulate a day change, and watch it rotate.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install dailyrotate
"""
from __future__ import annotations

import os
import tempfile
import time
from pathlib import Path

import dailyrotate


def main() -> None:
    print(f"dailyrotate version: {dailyrotate.__version__}")

    with tempfile.TemporaryDirectory() as workdir:
        live = Path(workdir) / "app.log"

        # Step 1: Open a writer keeping three days of archives
        with dailyrotate.RotatingWriter(live, retention=3) as writer:
            writer.rotate_write(b"first line\n")
            print(f"Live file: {writer.path}")
            print(f"Should rotate now? {writer.should_rotate()}")

            # Step 2: Pretend the live file was last written two days ago
            two_days_ago = time.time() - 2 * 86400
            os.utime(live, (two_days_ago, two_days_ago))
            print(f"Should rotate after ageing? {writer.should_rotate()}")

            # Step 3: The next rotate_write archives the stale file first
            writer.rotate_write(b"second line\n")

            print("\nArchives:")
            for archive in writer.archives():
                print(f"  {os.path.basename(archive)}: {Path(archive).read_bytes()!r}")
            print(f"Live file now holds: {live.read_bytes()!r}")


if __name__ == "__main__":
    main()
