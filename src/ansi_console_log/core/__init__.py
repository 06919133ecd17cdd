from .colors import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    ColorCode,
    background_escape,
    colorize,
    foreground_escape,
)
from .entry import LogEntry
from .errors import (
    ConsoleLogError,
    FormatterNotFoundError,
    FormatterRegistrationError,
    MessageTemplateError,
    OptionsLoadError,
)
from .levels import TRACE, level_label, syslog_severity

__all__ = [
    "ColorCode",
    "ConsoleLogError",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "FormatterNotFoundError",
    "FormatterRegistrationError",
    "LogEntry",
    "MessageTemplateError",
    "OptionsLoadError",
    "TRACE",
    "background_escape",
    "colorize",
    "foreground_escape",
    "level_label",
    "syslog_severity",
]
