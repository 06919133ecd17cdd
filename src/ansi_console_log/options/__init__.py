from .file_source import FileOptionsWatcher, JsonFileOptionsSource
from .models import (
    ColorBehavior,
    ConsoleFormatterOptions,
    FormatterOptions,
    SimpleConsoleFormatterOptions,
)
from .monitor import ChangeSubscription, OptionsMonitor

__all__ = [
    "ChangeSubscription",
    "ColorBehavior",
    "ConsoleFormatterOptions",
    "FileOptionsWatcher",
    "FormatterOptions",
    "JsonFileOptionsSource",
    "OptionsMonitor",
    "SimpleConsoleFormatterOptions",
]
