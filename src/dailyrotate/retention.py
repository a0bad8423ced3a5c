"""Archive naming and retention sweeps for daily rotated files.

An archive is the live file renamed to ``<YYYY-MM-DD>-<basename>`` in the
live file's directory.  Retention counts calendar days, not files: with a
retention of ``N`` days, archives dated today and the ``N`` preceding days
survive a sweep, everything older is removed.  Missing days (process
downtime, quiet days) never extend the window.

Example
-------
>>> from datetime import date
>>> archive_name("app.log", date(2024, 3, 9))
'2024-03-09-app.log'
>>> sorted(protected_names("app.log", 1, date(2024, 3, 9)))
['2024-03-08-app.log', '2024-03-09-app.log']
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import date, timedelta

from dailyrotate.errors import InvalidRetentionError

logger = logging.getLogger(__name__)

#: Retention value meaning "keep archives forever".
UNLIMITED: None = None

ARCHIVE_DATE_FORMAT: str = "%Y-%m-%d"
ARCHIVE_SEPARATOR: str = "-"


def validate_retention(retention: object) -> int | None:
    """Return *retention* unchanged if it is a valid retention policy.

    Raises
    ------
    InvalidRetentionError:
        When *retention* is not ``None`` and not an integer >= 0.
        Booleans are rejected even though they are ``int`` subclasses.
    """
    if retention is UNLIMITED:
        return None
    if isinstance(retention, bool) or not isinstance(retention, int) or retention < 0:
        raise InvalidRetentionError(retention)
    return retention


def archive_name(basename: str, day: date) -> str:
    """Return the archive filename for *basename* rotated on *day*."""
    return day.strftime(ARCHIVE_DATE_FORMAT) + ARCHIVE_SEPARATOR + basename


def protected_names(basename: str, retention: int, today: date) -> set[str]:
    """Return the archive names a sweep must keep.

    Covers day offsets ``0`` through ``retention`` inclusive, counted back
    from *today*.
    """
    return {
        archive_name(basename, today - timedelta(days=offset))
        for offset in range(retention + 1)
    }


def is_family_member(name: str, basename: str) -> bool:
    """Return ``True`` if *name* looks like an archive of *basename*.

    Hidden files and the live file itself are never members.
    """
    return not name.startswith(".") and name != basename and name.endswith(basename)


def sweep_archives(
    directory: str,
    basename: str,
    retention: int,
    today: date,
    *,
    keep: Iterable[str] = (),
) -> list[str]:
    """Delete archives of *basename* that fall outside the retention window.

    Parameters
    ----------
    directory:
        Directory holding the live file and its archives.  Only its top
        level is scanned.
    basename:
        Final path segment of the live file.
    retention:
        Number of days preceding *today* whose archives are kept.
    today:
        Reference date for the window.
    keep:
        Extra filenames that must survive regardless of their date.

    Returns
    -------
    list[str]
        Full paths of the removed files, in directory listing order.

    Raises
    ------
    OSError:
        On the first listing or deletion failure.  Files removed before the
        failure stay removed.
    """
    allowed = protected_names(basename, retention, today)
    allowed.update(keep)

    removed: list[str] = []
    for name in os.listdir(directory):
        if not is_family_member(name, basename) or name in allowed:
            continue
        target = os.path.join(directory, name)
        os.remove(target)
        logger.info("Purged old archive: %s", target)
        removed.append(target)
    return removed
