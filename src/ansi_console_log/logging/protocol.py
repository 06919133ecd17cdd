from __future__ import annotations

from typing import Any, Protocol, TypeAlias

ExcInfo: TypeAlias = Any


class LoggingConfiguratorProtocol(Protocol):
    """Protocol for logging configurators."""

    def configure(self) -> None:
        """Apply logging configuration."""

    def close(self) -> None:
        """Undo :meth:`configure` and release formatter resources."""


class LogMessageProtocol(Protocol):
    """A precompiled templated log message."""

    level: int
    event_id: int
    template: str

    def __call__(
        self,
        logger: Any,
        *args: object,
        exc_info: ExcInfo = None,
    ) -> None:
        ...
