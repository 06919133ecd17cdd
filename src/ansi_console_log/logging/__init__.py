"""Logging pipeline wiring: settings, configurator and message templates."""

from .factory import (
    build_logging_configurator,
    configure_logging,
    define_message,
)
from .impl.messages import StandardLogMessage, compile_template
from .impl.standard import StandardLoggingConfigurator
from .protocol import LoggingConfiguratorProtocol, LogMessageProtocol
from .settings import LoggingSettings, load_logging_settings

__all__ = [
    "LogMessageProtocol",
    "LoggingConfiguratorProtocol",
    "LoggingSettings",
    "StandardLogMessage",
    "StandardLoggingConfigurator",
    "build_logging_configurator",
    "compile_template",
    "configure_logging",
    "define_message",
    "load_logging_settings",
]
