from __future__ import annotations

import logging
from typing import Any, TextIO

from pydantic import BaseModel as _PydanticBaseModel

from ...formatting.handler import ConsoleHandler
from ...formatting.registry import FormatterRegistry, get_formatter_registry
from ...options.file_source import FileOptionsWatcher, JsonFileOptionsSource
from ...options.monitor import OptionsMonitor
from ..protocol import LoggingConfiguratorProtocol
from ..settings import LoggingSettings

_LOGGER = logging.getLogger(__name__)

_MARKER = "_ansi_console_log_configured"


class StandardLoggingConfigurator(LoggingConfiguratorProtocol):
    """Installs a ConsoleHandler with the configured formatter.

    Usable as a context manager; leaving the block removes the handler and
    releases the formatter's option subscription.
    """

    def __init__(
        self,
        settings: LoggingSettings,
        *,
        registry: FormatterRegistry | None = None,
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry or get_formatter_registry()
        self._stream = stream
        self._logger = logger or logging.getLogger()
        self._handler: ConsoleHandler | None = None
        self._monitor: OptionsMonitor[Any] | None = None
        self._source: JsonFileOptionsSource[Any] | None = None
        self._watcher: FileOptionsWatcher | None = None
        self._previous_level: int | None = None

    @property
    def handler(self) -> ConsoleHandler | None:
        return self._handler

    @property
    def options(self) -> OptionsMonitor[Any] | None:
        return self._monitor

    def configure(self) -> None:
        logger = self._logger
        if getattr(logger, _MARKER, False):
            return
        registration = self._registry.get(self._settings.formatter)
        self._monitor = OptionsMonitor(
            self._build_options(registration.options_model)
        )
        if self._settings.options_file:
            self._source = JsonFileOptionsSource(
                self._settings.options_file,
                registration.options_model,
                self._monitor,
            )
            self._source.reload()
        formatter = registration.factory(self._monitor)
        handler = ConsoleHandler(formatter, self._stream)
        handler.setLevel(self._settings.level)
        self._previous_level = logger.level
        logger.setLevel(self._settings.level)
        logger.addHandler(handler)
        self._handler = handler
        setattr(logger, _MARKER, True)
        if self._source is not None and self._settings.options_reload_interval_s:
            self._watcher = FileOptionsWatcher(
                self._source,
                interval_s=self._settings.options_reload_interval_s,
            )
            self._watcher.start()
        _LOGGER.debug("console logging configured with %r formatter",
                      registration.name)

    def reload_options(self) -> bool:
        """Re-read the options file if it changed since the last read."""
        if self._source is None:
            return False
        return self._source.reload_if_changed()

    def close(self) -> None:
        if self._watcher is not None:
            self._watcher.stop()
            self._watcher = None
        handler, self._handler = self._handler, None
        if handler is None:
            return
        self._logger.removeHandler(handler)
        handler.close()
        if self._previous_level is not None:
            self._logger.setLevel(self._previous_level)
            self._previous_level = None
        if getattr(self._logger, _MARKER, False):
            delattr(self._logger, _MARKER)

    def __enter__(self) -> "StandardLoggingConfigurator":
        self.configure()
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def _build_options(
        self, model: type[_PydanticBaseModel]
    ) -> _PydanticBaseModel:
        payload = {
            key: value
            for key, value in self._settings.options_payload().items()
            if key in model.model_fields
        }
        return model.model_validate(payload)
