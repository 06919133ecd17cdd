from __future__ import annotations

from typing import TextIO

from ...core.entry import LogEntry
from ...core.levels import syslog_severity
from ...options.models import ConsoleFormatterOptions
from ...options.monitor import ChangeSubscription, OptionsMonitor
from .common import format_timestamp, single_line


def render(entry: LogEntry, options: ConsoleFormatterOptions) -> str:
    """One journald-friendly line with a ``<severity>`` syslog prefix."""
    if entry.message is None:
        return ""
    parts: list[str] = [
        f"<{syslog_severity(entry.level)}>",
        format_timestamp(entry.created, options),
        f"{entry.category}[{entry.event_id}]",
    ]
    if options.include_scopes:
        parts.extend(f" => {scope}" for scope in entry.scopes)
    parts.append(" " + single_line(entry.message))
    if entry.exception_text:
        parts.append(" " + single_line(entry.exception_text))
    parts.append("\n")
    return "".join(parts)


class SystemdConsoleFormatter:
    name = "systemd"

    def __init__(
        self,
        options: (
            OptionsMonitor[ConsoleFormatterOptions]
            | ConsoleFormatterOptions
            | None
        ) = None,
    ) -> None:
        self._subscription: ChangeSubscription | None = None
        if isinstance(options, OptionsMonitor):
            self._options: ConsoleFormatterOptions = options.current
            self._subscription = options.on_change(
                self.configure, notify_current=True
            )
        else:
            self._options = options or ConsoleFormatterOptions()

    @property
    def options(self) -> ConsoleFormatterOptions:
        return self._options

    def configure(self, options: ConsoleFormatterOptions) -> None:
        self._options = options

    def write(self, entry: LogEntry, output: TextIO) -> None:
        text = render(entry, self._options)
        if text:
            output.write(text)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
