from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from ..runtime.scopes import current_scopes

_EXCEPTION_FORMATTER = logging.Formatter()


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A log call as seen by console formatters.

    ``message`` is the already rendered text; ``None`` means there is
    nothing to print.
    """

    message: str | None
    level: int = logging.INFO
    category: str = ""
    event_id: int = 0
    exception: BaseException | None = None
    exception_text: str | None = None
    scopes: tuple[object, ...] = ()
    created: float = field(default_factory=time.time)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        message = None if record.msg is None else record.getMessage()
        exception = None
        exception_text = record.exc_text
        if record.exc_info:
            exception = record.exc_info[1]
            if exception_text is None:
                exception_text = _EXCEPTION_FORMATTER.formatException(
                    record.exc_info
                )
        scopes = getattr(record, "scopes", None)
        if scopes is None:
            scopes = current_scopes()
        return cls(
            message=message,
            level=record.levelno,
            category=record.name,
            event_id=int(getattr(record, "event_id", 0)),
            exception=exception,
            exception_text=exception_text,
            scopes=tuple(scopes),
            created=record.created,
        )
