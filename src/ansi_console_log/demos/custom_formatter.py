"""Color line demo: a green prefix in front of every message.

Settings come from the ``LOG_*`` environment variables (and ``.env``).
Point ``LOG_OPTIONS_FILE`` at a JSON file such as
``{"prefix": " ~~~ ", "colorBehavior": "disabled"}`` to override the
options; the file is re-read between messages.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TextIO

from ..logging import LoggingSettings, build_logging_configurator

_LOGGER = logging.getLogger("demo.custom_formatter")


def build_settings(options_file: str | None = None) -> LoggingSettings:
    settings = replace(LoggingSettings.from_env(), formatter="colorLine")
    if options_file:
        settings = replace(settings, options_file=options_file)
    return settings


def main(
    stream: TextIO | None = None,
    *,
    options_file: str | None = None,
) -> int:
    settings = build_settings(options_file)
    with build_logging_configurator(settings, stream=stream) as configurator:
        _LOGGER.info("Hello World!")
        configurator.reload_options()
        _LOGGER.info("Prefix and colors come from the formatter options.")
    return 0
