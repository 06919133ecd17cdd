"""Systemd console demo: scopes on, a timestamp, one line per message."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TextIO

from ..logging import LoggingSettings, build_logging_configurator
from ..runtime import begin_scope


def build_settings() -> LoggingSettings:
    base = LoggingSettings.from_env()
    return replace(
        base,
        formatter="systemd",
        include_scopes=True,
        timestamp_format=base.timestamp_format or "%I:%M:%S ",
    )


def main(stream: TextIO | None = None) -> int:
    logger = logging.getLogger("demo.program")
    with build_logging_configurator(build_settings(), stream=stream):
        with begin_scope("[scope is enabled]"):
            logger.info("Hello World!")
            logger.info("Logs contain timestamp and log level.")
            logger.info("Each log message is fit in a single line.")
    return 0
