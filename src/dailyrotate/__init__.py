"""dailyrotate — a thread-safe daily rotating file writer.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import dailyrotate
>>> dailyrotate.__version__
'0.1.0'
>>> writer = dailyrotate.RotatingWriter("/tmp/app.log", retention=3)
>>> writer.rotate_write(b"hello\\n")
6
>>> writer.close()
"""
from __future__ import annotations

__version__: str = "0.1.0"

from dailyrotate.convenience import attach_daily_handler, open_default_writer

# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------
from dailyrotate.writer import (
    DEFAULT_FILE_PATH,
    DEFAULT_RETENTION_DAYS,
    RotatingWriter,
)
from dailyrotate.retention import (
    UNLIMITED,
    archive_name,
    protected_names,
    sweep_archives,
    validate_retention,
)

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
from dailyrotate.errors import (
    DailyRotateError,
    HandleClosedError,
    InvalidPathError,
    InvalidRetentionError,
)

# ---------------------------------------------------------------------------
# Logging and configuration
# ---------------------------------------------------------------------------
from dailyrotate.handler import DailyRotatingHandler
from dailyrotate.config import ConfigLoader, HandlerConfig, WriterConfig

__all__ = [
    "__version__",
    "attach_daily_handler",
    "open_default_writer",
    # Writer
    "DEFAULT_FILE_PATH",
    "DEFAULT_RETENTION_DAYS",
    "RotatingWriter",
    "UNLIMITED",
    "archive_name",
    "protected_names",
    "sweep_archives",
    "validate_retention",
    # Errors
    "DailyRotateError",
    "HandleClosedError",
    "InvalidPathError",
    "InvalidRetentionError",
    # Logging and configuration
    "ConfigLoader",
    "DailyRotatingHandler",
    "HandlerConfig",
    "WriterConfig",
]
