"""logging.Handler front-end for :class:`RotatingWriter`.

Example
-------
>>> import logging
>>> from dailyrotate import DailyRotatingHandler, RotatingWriter
>>> handler = DailyRotatingHandler(RotatingWriter("/tmp/app.log", 7), owns_writer=True)
>>> logging.getLogger("app").addHandler(handler)
"""
from __future__ import annotations

import logging

from dailyrotate.writer import RotatingWriter


class DailyRotatingHandler(logging.Handler):
    """Writes formatted records through a daily rotating writer.

    Each record is checked for rotation before it is written, so the first
    record logged after midnight lands in a fresh file.

    Parameters
    ----------
    writer:
        The writer receiving encoded records.
    encoding:
        Text encoding applied to formatted records.
    owns_writer:
        When ``True``, :meth:`close` also closes *writer*.
    """

    terminator: str = "\n"

    def __init__(
        self,
        writer: RotatingWriter,
        encoding: str = "utf-8",
        owns_writer: bool = False,
    ) -> None:
        super().__init__()
        self._writer = writer
        self._encoding = encoding
        self._owns_writer = owns_writer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record) + self.terminator
            self._writer.rotate_write(message.encode(self._encoding))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            if self._owns_writer:
                self._writer.close()
        finally:
            super().close()

    @property
    def writer(self) -> RotatingWriter:
        """The underlying rotating writer."""
        return self._writer

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        return f"<{type(self).__name__} {self._writer.path} ({level})>"
