from __future__ import annotations

import logging
from typing import TextIO

from ..formatting.registry import FormatterRegistry
from .impl.messages import StandardLogMessage
from .impl.standard import StandardLoggingConfigurator
from .protocol import LogMessageProtocol
from .settings import LoggingSettings, load_logging_settings


def build_logging_configurator(
    settings: LoggingSettings | None = None,
    *,
    registry: FormatterRegistry | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> StandardLoggingConfigurator:
    resolved = settings or load_logging_settings()
    return StandardLoggingConfigurator(
        resolved, registry=registry, stream=stream, logger=logger
    )


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    registry: FormatterRegistry | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> StandardLoggingConfigurator:
    configurator = build_logging_configurator(
        settings, registry=registry, stream=stream, logger=logger
    )
    configurator.configure()
    return configurator


def define_message(
    level: int, event_id: int, template: str
) -> LogMessageProtocol:
    return StandardLogMessage(level, event_id, template)
