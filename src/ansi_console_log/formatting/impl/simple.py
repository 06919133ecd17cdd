from __future__ import annotations

from typing import TextIO

from ...core.colors import ColorCode, colorize
from ...core.entry import LogEntry
from ...core.levels import level_label
from ...options.models import ColorBehavior, SimpleConsoleFormatterOptions
from ...options.monitor import ChangeSubscription, OptionsMonitor
from .common import color_enabled, format_timestamp, is_redirected, single_line

PADDING = "      "

# label -> (foreground, background)
_LEVEL_COLORS: dict[str, tuple[ColorCode, ColorCode]] = {
    "trce": (ColorCode.GRAY, ColorCode.BLACK),
    "dbug": (ColorCode.GRAY, ColorCode.BLACK),
    "info": (ColorCode.DARK_GREEN, ColorCode.BLACK),
    "warn": (ColorCode.YELLOW, ColorCode.BLACK),
    "fail": (ColorCode.BLACK, ColorCode.DARK_RED),
    "crit": (ColorCode.WHITE, ColorCode.DARK_RED),
}


def _padded(text: str) -> str:
    return PADDING + text.rstrip("\n").replace("\n", "\n" + PADDING)


def render(
    entry: LogEntry,
    options: SimpleConsoleFormatterOptions,
    *,
    redirected: bool = False,
) -> str:
    if entry.message is None:
        return ""
    parts: list[str] = [format_timestamp(entry.created, options)]
    label = level_label(entry.level)
    if color_enabled(options.color_behavior, redirected):
        foreground, background = _LEVEL_COLORS[label]
        label = colorize(label, foreground=foreground, background=background)
    parts.append(f"{label}: {entry.category}[{entry.event_id}]")

    scopes = entry.scopes if options.include_scopes else ()
    if options.single_line:
        parts.extend(f" => {scope}" for scope in scopes)
        parts.append(" " + single_line(entry.message))
        if entry.exception_text:
            parts.append(" " + single_line(entry.exception_text))
    else:
        if scopes:
            parts.append("\n" + PADDING)
            parts.append(" ".join(f"=> {scope}" for scope in scopes))
        parts.append("\n" + _padded(entry.message))
        if entry.exception_text:
            parts.append("\n" + _padded(entry.exception_text))
    parts.append("\n")
    return "".join(parts)


class SimpleConsoleFormatter:
    """Level label and category on one line, padded message below."""

    name = "simple"

    def __init__(
        self,
        options: (
            OptionsMonitor[SimpleConsoleFormatterOptions]
            | SimpleConsoleFormatterOptions
            | None
        ) = None,
    ) -> None:
        self._subscription: ChangeSubscription | None = None
        if isinstance(options, OptionsMonitor):
            self._options: SimpleConsoleFormatterOptions = options.current
            self._subscription = options.on_change(
                self.configure, notify_current=True
            )
        else:
            self._options = options or SimpleConsoleFormatterOptions()

    @property
    def options(self) -> SimpleConsoleFormatterOptions:
        return self._options

    def configure(self, options: SimpleConsoleFormatterOptions) -> None:
        self._options = options

    def write(self, entry: LogEntry, output: TextIO) -> None:
        options = self._options
        if entry.message is None:
            return
        redirected = False
        if options.color_behavior is ColorBehavior.DEFAULT:
            redirected = is_redirected(output)
        output.write(render(entry, options, redirected=redirected))

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
