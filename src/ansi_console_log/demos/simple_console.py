"""Simple console demo with precompiled message templates."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TextIO

from ..logging import (
    LoggingSettings,
    build_logging_configurator,
    define_message,
)
from ..runtime import begin_scope

_LOGGER = logging.getLogger("demo.orders")

ORDER_RECEIVED = define_message(
    logging.INFO, 1001, "Order {OrderId} received from {Customer}"
)
ORDER_SLOW = define_message(
    logging.WARNING, 1002, "Order {OrderId} took {Elapsed:.1f} ms"
)
ORDER_FAILED = define_message(logging.ERROR, 1003, "Order {OrderId} failed")


def build_settings(*, single_line: bool = False) -> LoggingSettings:
    base = LoggingSettings.from_env()
    return replace(
        base,
        formatter="simple",
        include_scopes=True,
        single_line=single_line or base.single_line,
        timestamp_format=base.timestamp_format or "%H:%M:%S ",
    )


def main(stream: TextIO | None = None, *, single_line: bool = False) -> int:
    with build_logging_configurator(
        build_settings(single_line=single_line), stream=stream
    ):
        with begin_scope("batch 42"):
            ORDER_RECEIVED(_LOGGER, 7, "contoso")
            ORDER_SLOW(_LOGGER, 7, 1234.56)
            try:
                raise ValueError("payment declined")
            except ValueError as exc:
                ORDER_FAILED(_LOGGER, 7, exc_info=exc)
    return 0
