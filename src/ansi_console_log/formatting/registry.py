from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Iterable

from ..core.errors import FormatterNotFoundError, FormatterRegistrationError
from ..options.models import (
    ConsoleFormatterOptions,
    FormatterOptions,
    SimpleConsoleFormatterOptions,
)
from .impl.color_line import ColorLineFormatter
from .impl.simple import SimpleConsoleFormatter
from .impl.systemd import SystemdConsoleFormatter
from .protocol import ConsoleFormatterProtocol

FormatterFactory = Callable[[Any], ConsoleFormatterProtocol]


@dataclass(frozen=True, slots=True)
class FormatterRegistration:
    name: str
    factory: FormatterFactory
    options_model: type[ConsoleFormatterOptions]


class FormatterRegistry:
    """In-memory registry of console formatters, keyed by name.

    Names are matched case-insensitively; the spelling used at
    registration is kept for display.
    """

    def __init__(self) -> None:
        self._items: dict[str, FormatterRegistration] = {}
        self._lock = RLock()

    def register(
        self,
        name: str,
        factory: FormatterFactory,
        *,
        options_model: type[ConsoleFormatterOptions] = ConsoleFormatterOptions,
    ) -> None:
        if not name or not name.strip():
            raise FormatterRegistrationError("formatter name must be non-empty")
        key = name.strip().casefold()
        with self._lock:
            if key in self._items:
                raise FormatterRegistrationError(
                    f"formatter already registered: {name}"
                )
            self._items[key] = FormatterRegistration(
                name=name.strip(),
                factory=factory,
                options_model=options_model,
            )

    def get(self, name: str) -> FormatterRegistration:
        key = name.strip().casefold()
        with self._lock:
            try:
                return self._items[key]
            except KeyError as exc:
                raise FormatterNotFoundError(
                    f"formatter not found: {name}"
                ) from exc

    def create(self, name: str, options: Any = None) -> ConsoleFormatterProtocol:
        return self.get(name).factory(options)

    def names(self) -> Iterable[str]:
        with self._lock:
            return tuple(item.name for item in self._items.values())


def register_builtin_formatters(registry: FormatterRegistry) -> None:
    registry.register(
        SimpleConsoleFormatter.name,
        SimpleConsoleFormatter,
        options_model=SimpleConsoleFormatterOptions,
    )
    registry.register(
        SystemdConsoleFormatter.name,
        SystemdConsoleFormatter,
        options_model=ConsoleFormatterOptions,
    )
    registry.register(
        ColorLineFormatter.name,
        ColorLineFormatter,
        options_model=FormatterOptions,
    )


_default_registry = FormatterRegistry()
register_builtin_formatters(_default_registry)


def get_formatter_registry() -> FormatterRegistry:
    return _default_registry
