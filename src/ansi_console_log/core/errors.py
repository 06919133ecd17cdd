from __future__ import annotations


class ConsoleLogError(Exception):
    """Base exception for console logging SDK errors."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class FormatterRegistrationError(ConsoleLogError):
    """Raised when a console formatter name is registered twice."""


class FormatterNotFoundError(ConsoleLogError):
    """Raised when lookup for a console formatter name fails."""


class MessageTemplateError(ConsoleLogError):
    """Raised when a message template and its arguments disagree."""


class OptionsLoadError(ConsoleLogError):
    """Raised when formatter options cannot be read or validated."""
