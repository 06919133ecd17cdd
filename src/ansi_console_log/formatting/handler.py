from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.entry import LogEntry
from .protocol import ConsoleFormatterProtocol


class ConsoleHandler(logging.StreamHandler):
    """StreamHandler that hands each record to a console formatter.

    The handler lock serializes writes from different threads.
    """

    def __init__(
        self,
        formatter: ConsoleFormatterProtocol,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(stream if stream is not None else sys.stdout)
        self.console_formatter = formatter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry.from_record(record)
            self.console_formatter.write(entry, self.stream)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self.console_formatter.close()
        finally:
            super().close()
