"""Exception types raised by dailyrotate.

Filesystem failures other than the ones below are raised as the builtin
:class:`OSError` produced by the failing call and are never translated.
"""
from __future__ import annotations

import errno


class DailyRotateError(Exception):
    """Base class for errors raised by dailyrotate itself."""


class InvalidPathError(DailyRotateError, ValueError):
    """Raised when the live file path is not absolute.

    Attributes
    ----------
    path:
        The offending path, after normalisation.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path should be absolute ({path!r} given)")


class InvalidRetentionError(DailyRotateError, ValueError):
    """Raised when a retention value is neither ``None`` nor a day count >= 0.

    Attributes
    ----------
    retention:
        The rejected value.
    """

    def __init__(self, retention: object) -> None:
        self.retention = retention
        super().__init__(
            f"Retention should be None (unlimited) or an integer >= 0 ({retention!r} given)"
        )


class HandleClosedError(DailyRotateError, OSError):
    """Raised when writing or rotating while no file handle is open.

    This happens after a failed rotation (until a later rotation succeeds)
    or after the writer has been closed.
    """

    def __init__(self, path: str, reason: str = "no open file handle") -> None:
        super().__init__(errno.EBADF, reason, path)
