from __future__ import annotations

from typing import TextIO

from ...core.colors import ColorCode, colorize
from ...core.entry import LogEntry
from ...options.models import ColorBehavior, FormatterOptions
from ...options.monitor import ChangeSubscription, OptionsMonitor
from .common import color_enabled, format_timestamp, is_redirected

PREFIX_FOREGROUND = ColorCode.GREEN
PREFIX_BACKGROUND = ColorCode.BLACK


def render(
    entry: LogEntry,
    options: FormatterOptions,
    *,
    redirected: bool = False,
    newline: bool = True,
) -> str:
    """Render ``entry`` as prefix plus message.

    Only the prefix is colorized. With ``newline`` a line terminator
    follows both the prefix and the message; without it neither gets one.
    Returns an empty string when the entry has no message.
    """
    if entry.message is None:
        return ""
    terminator = "\n" if newline else ""
    parts: list[str] = []
    if options.timestamp_format:
        parts.append(format_timestamp(entry.created, options))
    head = options.prefix + terminator
    if color_enabled(options.color_behavior, redirected):
        parts.append(
            colorize(
                head,
                foreground=PREFIX_FOREGROUND,
                background=PREFIX_BACKGROUND,
            )
        )
    else:
        parts.append(head)
    if options.include_scopes:
        parts.extend(f"=> {scope} " for scope in entry.scopes)
    parts.append(entry.message)
    parts.append(terminator)
    return "".join(parts)


class ColorLineFormatter:
    """Writes a green-on-black prefix in front of every message.

    Options come either as a fixed value or from an ``OptionsMonitor``; in
    the latter case the formatter follows reloads until :meth:`close`.
    """

    name = "colorLine"

    def __init__(
        self,
        options: OptionsMonitor[FormatterOptions] | FormatterOptions | None = None,
        *,
        newline: bool = True,
    ) -> None:
        self._newline = newline
        self._subscription: ChangeSubscription | None = None
        if isinstance(options, OptionsMonitor):
            self._options: FormatterOptions = options.current
            self._subscription = options.on_change(
                self.configure, notify_current=True
            )
        else:
            self._options = options or FormatterOptions()

    @property
    def options(self) -> FormatterOptions:
        return self._options

    @property
    def newline(self) -> bool:
        return self._newline

    def configure(self, options: FormatterOptions) -> None:
        self._options = options

    def write(self, entry: LogEntry, output: TextIO) -> None:
        # Read once so a concurrent configure() can't mix two option sets.
        options = self._options
        if entry.message is None:
            return
        redirected = False
        if options.color_behavior is ColorBehavior.DEFAULT:
            redirected = is_redirected(output)
        output.write(
            render(
                entry,
                options,
                redirected=redirected,
                newline=self._newline,
            )
        )

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
