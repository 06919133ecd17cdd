from __future__ import annotations

import logging
from collections.abc import Mapping

from ...core.errors import MessageTemplateError
from ..protocol import ExcInfo, LogMessageProtocol


def compile_template(template: str) -> tuple[str, tuple[str, ...]]:
    """Turn a ``{Name}`` template into a positional ``str.format`` string.

    ``{{`` and ``}}`` are literal braces. A placeholder may carry a format
    spec after a colon, e.g. ``{Elapsed:.2f}``. Nested placeholders and
    ``!`` conversions are not supported and raise ``MessageTemplateError``.
    """
    parts: list[str] = []
    names: list[str] = []
    i = 0
    while i < len(template):
        ch = template[i]
        if ch == "{":
            if template.startswith("{{", i):
                parts.append("{{")
                i += 2
                continue
            end = template.find("}", i)
            if end == -1:
                raise MessageTemplateError(
                    f"unclosed placeholder in template: {template!r}"
                )
            hole = template[i + 1:end]
            if "{" in hole:
                raise MessageTemplateError(
                    f"nested placeholder in template: {template!r}"
                )
            name, sep, spec = hole.partition(":")
            if "!" in name:
                raise MessageTemplateError(
                    f"conversions are not supported in template: {template!r}"
                )
            name = name.strip()
            if not name:
                raise MessageTemplateError(
                    f"empty placeholder in template: {template!r}"
                )
            parts.append(f"{{{len(names)}{sep}{spec}}}")
            names.append(name)
            i = end + 1
        elif ch == "}":
            if template.startswith("}}", i):
                parts.append("}}")
                i += 2
                continue
            raise MessageTemplateError(
                f"unmatched '}}' in template: {template!r}"
            )
        else:
            parts.append(ch)
            i += 1
    return "".join(parts), tuple(names)


class StandardLogMessage(LogMessageProtocol):
    def __init__(self, level: int, event_id: int, template: str) -> None:
        self.level = level
        self.event_id = event_id
        self.template = template
        self._format, self.names = compile_template(template)

    def render(self, *args: object) -> str:
        self._check_arity(args)
        return self._format.format(*args)

    def _check_arity(self, args: tuple[object, ...]) -> None:
        if len(args) != len(self.names):
            raise MessageTemplateError(
                f"template {self.template!r} expects {len(self.names)} "
                f"argument(s), got {len(args)}"
            )

    def __call__(
        self,
        logger: logging.Logger,
        *args: object,
        exc_info: ExcInfo = None,
        stacklevel: int = 2,
    ) -> None:
        self._check_arity(args)
        if not logger.isEnabledFor(self.level):
            return
        message = self.render(*args)
        extra = {
            "event_id": self.event_id,
            "template": self.template,
            "state": dict(zip(self.names, args)),
        }
        kwargs = self._build_kwargs(extra, exc_info, stacklevel)
        logger.log(self.level, message, **kwargs)

    @staticmethod
    def _build_kwargs(
        extra: Mapping[str, object] | None,
        exc_info: ExcInfo,
        stacklevel: int,
    ) -> dict[str, object]:
        kwargs: dict[str, object] = {"stacklevel": stacklevel}
        if extra is not None:
            kwargs["extra"] = extra
        if exc_info is not None:
            kwargs["exc_info"] = exc_info
        return kwargs
