#!/usr/bin/env python3
"""Example: Logging handler — dailyrotate

Route the standard logging module through a daily rotating file configured
from YAML.

Usage:
    python examples/02_logging_handler.py
"""
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from dailyrotate import ConfigLoader


def main() -> None:
    with tempfile.TemporaryDirectory() as workdir:
        live = Path(workdir) / "service.log"
        config = ConfigLoader().load_string(
            f"path: {live}\n"
            "retention_days: 14\n"
            "handler:\n"
            "  level: INFO\n"
            "  format: '%(asctime)s %(levelname)s %(name)s: %(message)s'\n"
        )

        handler = config.build_handler()
        logger = logging.getLogger("service")
        logger.setLevel(logging.DEBUG)
        logger.addHandler(handler)
        try:
            logger.debug("not written: below the handler level")
            logger.info("service started")
            logger.warning("cache miss ratio above 40%")
        finally:
            logger.removeHandler(handler)
            handler.close()

        print(live.read_text(), end="")


if __name__ == "__main__":
    main()
