from __future__ import annotations

import json
import logging
import os
from threading import Event, Thread
from typing import Generic, TypeVar

from pydantic import BaseModel as _PydanticBaseModel
from pydantic import ValidationError

from ..core.errors import OptionsLoadError
from .monitor import OptionsMonitor

TModel = TypeVar("TModel", bound=_PydanticBaseModel)

_LOGGER = logging.getLogger(__name__)


class JsonFileOptionsSource(Generic[TModel]):
    """Loads formatter options from a JSON file into an OptionsMonitor.

    The file holds one JSON object whose keys are the option names, either
    snake_case or camelCase.
    """

    def __init__(
        self,
        path: str,
        model: type[TModel],
        monitor: OptionsMonitor[TModel],
    ) -> None:
        self._path = path
        self._model = model
        self._monitor = monitor
        self._stamp: tuple[int, int] | None = None

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> TModel:
        try:
            with open(self._path, encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise OptionsLoadError(
                f"cannot read options file {self._path!r}: {exc}"
            ) from exc
        try:
            return self._model.model_validate(raw)
        except ValidationError as exc:
            raise OptionsLoadError(
                f"invalid options in {self._path!r}: {exc}"
            ) from exc

    def reload(self) -> TModel:
        stamp = self._stat()
        options = self.load()
        self._stamp = stamp
        self._monitor.set(options)
        _LOGGER.debug("reloaded options from %s", self._path)
        return options

    def reload_if_changed(self) -> bool:
        stamp = self._stat()
        if stamp is not None and stamp == self._stamp:
            return False
        self.reload()
        return True

    def _stat(self) -> tuple[int, int] | None:
        # size as well, coarse mtime clocks can miss a quick rewrite
        try:
            st = os.stat(self._path)
            return st.st_mtime_ns, st.st_size
        except OSError:
            return None


class FileOptionsWatcher:
    """Polls a JSON options source on a daemon thread."""

    def __init__(
        self,
        source: JsonFileOptionsSource[_PydanticBaseModel],
        *,
        interval_s: float = 1.0,
    ) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        self._source = source
        self._interval_s = interval_s
        self._stop = Event()
        self._thread: Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = Thread(
            target=self._run,
            name="options-file-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join(timeout)

    def poll_once(self) -> bool:
        try:
            return self._source.reload_if_changed()
        except OptionsLoadError:
            _LOGGER.warning(
                "keeping previous options, reload of %s failed",
                self._source.path,
                exc_info=True,
            )
            return False

    def _run(self) -> None:
        while not self._stop.wait(self._interval_s):
            self.poll_once()

    def __enter__(self) -> "FileOptionsWatcher":
        self.start()
        return self

    def __exit__(self, *_: object) -> None:
        self.stop()
