import pytest
from pydantic import ValidationError

from ansi_console_log import (
    ColorBehavior,
    FormatterOptions,
    SimpleConsoleFormatterOptions,
)


def test_formatter_options_defaults() -> None:
    options = FormatterOptions()
    assert options.prefix == ""
    assert options.color_behavior is ColorBehavior.DEFAULT
    assert options.timestamp_format is None
    assert options.include_scopes is False


def test_camel_case_aliases_and_names() -> None:
    by_alias = FormatterOptions.model_validate(
        {"prefix": " >>> ", "colorBehavior": "Disabled",
         "timestampFormat": "%H:%M ", "includeScopes": True}
    )
    by_name = FormatterOptions(
        prefix=" >>> ",
        color_behavior=ColorBehavior.DISABLED,
        timestamp_format="%H:%M ",
        include_scopes=True,
    )
    assert by_alias == by_name


def test_options_are_frozen() -> None:
    options = FormatterOptions(prefix="a")
    with pytest.raises(ValidationError):
        options.prefix = "b"  # type: ignore[misc]


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ValidationError):
        FormatterOptions.model_validate({"prefx": "typo"})


def test_invalid_color_behavior() -> None:
    with pytest.raises(ValidationError):
        SimpleConsoleFormatterOptions.model_validate(
            {"colorBehavior": "sometimes"}
        )
    with pytest.raises(ValueError):
        ColorBehavior.parse("sometimes")


def test_empty_timestamp_format_is_none() -> None:
    assert FormatterOptions(timestamp_format="").timestamp_format is None
