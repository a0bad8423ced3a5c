"""Thread-safe daily rotating file writer.

The RotatingWriter appends raw bytes to a live file.  Once the calendar day
changes (or the live file on disk was last modified on another day than the
writer's last rotation) the live file is renamed to
``<YYYY-MM-DD>-<basename>``, a fresh file is opened at the original path and
archives older than the retention window are removed.

Writes and rotations share one lock.  The rotation decision itself is
unlocked, so two callers racing through :meth:`RotatingWriter.rotate_safe`
may rotate twice in a row.  Only one process should own a given path.

Example
-------
>>> from dailyrotate.writer import RotatingWriter
>>> with RotatingWriter("/tmp/app.log", retention=3) as writer:
...     writer.rotate_write(b"service started\\n")
16
"""
from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from datetime import date, datetime
from types import TracebackType
from typing import BinaryIO

from dailyrotate.errors import HandleClosedError, InvalidPathError
from dailyrotate.retention import (
    ARCHIVE_DATE_FORMAT,
    archive_name,
    is_family_member,
    sweep_archives,
    validate_retention,
)

logger = logging.getLogger(__name__)

DEFAULT_FILE_PATH: str = "/tmp/rotating.log"
DEFAULT_RETENTION_DAYS: int = 7

FILE_PERMISSIONS: int = 0o644


def _opener(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_PERMISSIONS)


def _modified_date(path: str) -> date | None:
    """Return the local modification date of *path*, or ``None`` if unreadable."""
    try:
        return date.fromtimestamp(os.stat(path).st_mtime)
    except OSError:
        return None


class RotatingWriter:
    """Appends to a file and rotates it into dated archives once a day.

    Parameters
    ----------
    path:
        Absolute path of the live file.  It is normalised before use and
        created if missing.
    retention:
        Number of days of archives to keep, counted back from the day of a
        rotation.  ``None`` keeps archives forever.
    clock:
        Zero-argument callable returning the current local time.  Defaults
        to :meth:`datetime.now`.

    Raises
    ------
    InvalidPathError:
        When *path* is not absolute.
    InvalidRetentionError:
        When *retention* is neither ``None`` nor an integer >= 0.
    OSError:
        When the live file cannot be opened.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        retention: int | None = DEFAULT_RETENTION_DAYS,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        normalised = os.path.normpath(os.fspath(path))
        if not os.path.isabs(normalised):
            raise InvalidPathError(normalised)

        self._path = normalised
        self._retention = validate_retention(retention)
        self._clock = clock or datetime.now
        self._lock = threading.Lock()
        self._closed = False
        self._handle: BinaryIO | None = self._open()
        self._last_rotation = self._clock()

    @classmethod
    def with_defaults(cls) -> "RotatingWriter":
        """Return a writer on ``/tmp/rotating.log`` keeping 7 days of archives."""
        return cls(DEFAULT_FILE_PATH, DEFAULT_RETENTION_DAYS)

    # ------------------------------------------------------------------
    # Write API
    # ------------------------------------------------------------------

    def write(self, data: bytes) -> int:
        """Append *data* to the live file without checking for rotation.

        Returns
        -------
        int
            Number of bytes written, always ``len(data)``.

        Raises
        ------
        HandleClosedError:
            When no handle is open (failed rotation or closed writer).
        OSError:
            When the underlying write fails.  A short write is retried with
            the remaining bytes until everything is written or the retry
            raises (``EFBIG``, ``ENOSPC``...).
        """
        with self._lock:
            if self._handle is None:
                raise HandleClosedError(self._path)
            view = memoryview(data).cast("B")
            written = 0
            while written < len(view):
                written += self._handle.write(view[written:])
            return written

    def rotate_write(self, data: bytes) -> int:
        """Rotate if needed, then append *data*.

        If the rotation raises, nothing is written.
        """
        self.rotate_safe()
        return self.write(data)

    def flush(self) -> None:
        """No-op; the live file is opened unbuffered."""

    # ------------------------------------------------------------------
    # Rotation API
    # ------------------------------------------------------------------

    def should_rotate(self) -> bool:
        """Return ``True`` when the live file belongs to another day.

        Compares today's date, then the live file's modification date, with
        the date of the last rotation.  Reads only and takes no lock.
        """
        last_day = self._last_rotation.date()
        if self._clock().date() != last_day:
            return True

        modified = _modified_date(self._path)
        return modified is not None and modified != last_day

    def rotate(self) -> None:
        """Archive the live file, reopen it and sweep old archives.

        The rotation is unconditional; use :meth:`rotate_safe` to rotate
        only when :meth:`should_rotate` says so.

        Raises
        ------
        HandleClosedError:
            When the writer has been closed.
        OSError:
            From closing, renaming, reopening or sweeping.  A failure before
            the reopen leaves the writer without a handle; a sweep failure
            leaves the new handle open.
        """
        with self._lock:
            if self._closed:
                raise HandleClosedError(self._path, "writer is closed")

            if self._handle is not None:
                handle, self._handle = self._handle, None
                handle.close()

            directory, basename = os.path.split(self._path)
            archived: str | None = None
            modified = _modified_date(self._path)
            if modified is not None:
                archived = archive_name(basename, modified)
                target = os.path.join(directory, archived)
                os.rename(self._path, target)
                logger.info("Rotated %s to %s", self._path, target)

            self._handle = self._open()

            now = self._clock()
            if self._retention is not None:
                sweep_archives(
                    directory,
                    basename,
                    self._retention,
                    now.date(),
                    keep=() if archived is None else (archived,),
                )

            self._last_rotation = now

    def rotate_safe(self) -> bool:
        """Rotate only if :meth:`should_rotate` returns ``True``.

        Returns
        -------
        bool
            ``True`` when a rotation actually occurred.
        """
        if not self.should_rotate():
            logger.debug("No rotation needed for %s", self._path)
            return False
        self.rotate()
        return True

    def archives(self) -> list[str]:
        """Return full paths of this file's archives, oldest first."""
        directory, basename = os.path.split(self._path)
        found: list[str] = []
        for name in os.listdir(directory):
            if not is_family_member(name, basename):
                continue
            stamp = name[: -len(basename) - 1]
            try:
                day = datetime.strptime(stamp, ARCHIVE_DATE_FORMAT).date()
            except ValueError:
                continue
            if archive_name(basename, day) == name:
                found.append(os.path.join(directory, name))
        return sorted(found)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the live file.  Further writes and rotations fail."""
        with self._lock:
            self._closed = True
            if self._handle is not None:
                handle, self._handle = self._handle, None
                handle.close()

    def __enter__(self) -> "RotatingWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _open(self) -> BinaryIO:
        logger.debug("Opening %s", self._path)
        return open(self._path, "ab", buffering=0, opener=_opener)  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        """The normalised absolute path of the live file."""
        return self._path

    @property
    def retention(self) -> int | None:
        """Days of archives kept, or ``None`` for unlimited."""
        return self._retention

    @property
    def last_rotation(self) -> datetime:
        """When the writer was created or last rotated."""
        return self._last_rotation

    @property
    def closed(self) -> bool:
        """``True`` once :meth:`close` has been called."""
        return self._closed

    @property
    def is_open(self) -> bool:
        """``True`` while a live file handle is held."""
        return self._handle is not None

    def __repr__(self) -> str:
        return f"RotatingWriter(path={self._path!r}, retention={self._retention!r})"
