from .handler import ConsoleHandler
from .impl.color_line import ColorLineFormatter
from .impl.color_line import render as render_color_line
from .impl.common import is_redirected
from .impl.simple import SimpleConsoleFormatter
from .impl.systemd import SystemdConsoleFormatter
from .protocol import ConsoleFormatterProtocol
from .registry import (
    FormatterRegistration,
    FormatterRegistry,
    get_formatter_registry,
    register_builtin_formatters,
)

__all__ = [
    "ColorLineFormatter",
    "ConsoleFormatterProtocol",
    "ConsoleHandler",
    "FormatterRegistration",
    "FormatterRegistry",
    "SimpleConsoleFormatter",
    "SystemdConsoleFormatter",
    "get_formatter_registry",
    "is_redirected",
    "register_builtin_formatters",
    "render_color_line",
]
