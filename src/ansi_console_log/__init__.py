"""Public API entry point for ansi_console_log.

Use this module for supported imports. Subpackages are internal.
"""

from .core import (
    ColorCode,
    ConsoleLogError,
    FormatterNotFoundError,
    FormatterRegistrationError,
    LogEntry,
    MessageTemplateError,
    OptionsLoadError,
    background_escape,
    colorize,
    foreground_escape,
)
from .formatting import (
    ColorLineFormatter,
    ConsoleFormatterProtocol,
    ConsoleHandler,
    FormatterRegistry,
    SimpleConsoleFormatter,
    SystemdConsoleFormatter,
    get_formatter_registry,
    render_color_line,
)
from .logging import (
    LoggingSettings,
    StandardLoggingConfigurator,
    build_logging_configurator,
    configure_logging,
    define_message,
    load_logging_settings,
)
from .options import (
    ChangeSubscription,
    ColorBehavior,
    ConsoleFormatterOptions,
    FileOptionsWatcher,
    FormatterOptions,
    JsonFileOptionsSource,
    OptionsMonitor,
    SimpleConsoleFormatterOptions,
)
from .runtime import begin_scope, current_scopes

__all__ = [
    "ChangeSubscription",
    "ColorBehavior",
    "ColorCode",
    "ColorLineFormatter",
    "ConsoleFormatterOptions",
    "ConsoleFormatterProtocol",
    "ConsoleHandler",
    "ConsoleLogError",
    "FileOptionsWatcher",
    "FormatterNotFoundError",
    "FormatterOptions",
    "FormatterRegistrationError",
    "FormatterRegistry",
    "JsonFileOptionsSource",
    "LogEntry",
    "LoggingSettings",
    "MessageTemplateError",
    "OptionsLoadError",
    "OptionsMonitor",
    "SimpleConsoleFormatter",
    "SimpleConsoleFormatterOptions",
    "StandardLoggingConfigurator",
    "SystemdConsoleFormatter",
    "background_escape",
    "begin_scope",
    "build_logging_configurator",
    "colorize",
    "configure_logging",
    "current_scopes",
    "define_message",
    "foreground_escape",
    "get_formatter_registry",
    "load_logging_settings",
    "render_color_line",
]
