from __future__ import annotations

from typing import Protocol, TextIO

from ..core.entry import LogEntry


class ConsoleFormatterProtocol(Protocol):
    """Protocol for console formatters plugged into a ConsoleHandler."""

    name: str

    def write(self, entry: LogEntry, output: TextIO) -> None:
        """Render ``entry`` and write it to ``output``."""
        ...

    def close(self) -> None:
        """Release option subscriptions. Safe to call more than once."""
        ...
