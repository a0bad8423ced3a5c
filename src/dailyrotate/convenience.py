"""Convenience API for dailyrotate — zero-configuration quickstart.

Example
-------
::

    from dailyrotate import open_default_writer
    with open_default_writer() as writer:
        writer.rotate_write(b"hello\\n")

"""
from __future__ import annotations

import logging
from pathlib import Path

from dailyrotate.config import ConfigLoader
from dailyrotate.handler import DailyRotatingHandler
from dailyrotate.writer import RotatingWriter


def open_default_writer() -> RotatingWriter:
    """Open a writer on ``/tmp/rotating.log`` keeping 7 days of archives.

    Equivalent to :meth:`RotatingWriter.with_defaults`.
    """
    return RotatingWriter.with_defaults()


def attach_daily_handler(
    logger: logging.Logger | None = None,
    config_path: Path | None = None,
) -> DailyRotatingHandler:
    """Attach a daily rotating handler to *logger* (the root logger by default).

    Parameters
    ----------
    logger:
        Logger receiving the handler.
    config_path:
        Optional YAML configuration.  Defaults are used when omitted.

    Returns
    -------
    DailyRotatingHandler
        The attached handler; it owns its writer, so closing the handler
        closes the live file.
    """
    loader = ConfigLoader()
    config = loader.load(config_path) if config_path is not None else loader.defaults()
    handler = config.build_handler()
    (logger or logging.getLogger()).addHandler(handler)
    return handler
