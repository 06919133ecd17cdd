from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ...options.models import ColorBehavior, ConsoleFormatterOptions


def is_redirected(output: Any) -> bool:
    """True when ``output`` is not attached to an interactive terminal."""
    isatty = getattr(output, "isatty", None)
    if isatty is None:
        return True
    try:
        return not isatty()
    except ValueError:
        # closed stream
        return True


def color_enabled(behavior: ColorBehavior, redirected: bool) -> bool:
    if behavior is ColorBehavior.ENABLED:
        return True
    return behavior is ColorBehavior.DEFAULT and not redirected


def format_timestamp(
    created: float, options: ConsoleFormatterOptions
) -> str:
    if not options.timestamp_format:
        return ""
    tz = timezone.utc if options.use_utc_timestamp else None
    return datetime.fromtimestamp(created, tz=tz).strftime(
        options.timestamp_format
    )


def single_line(text: str) -> str:
    return text.rstrip("\n").replace("\r\n", " ").replace("\n", " ")
