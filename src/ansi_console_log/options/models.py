from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel as _PydanticBaseModel
from pydantic import ConfigDict, Field, field_validator


class ColorBehavior(str, Enum):
    """When a console formatter may emit ANSI color escapes."""

    DEFAULT = "default"
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def parse(cls, value: "str | ColorBehavior") -> "ColorBehavior":
        if isinstance(value, ColorBehavior):
            return value
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Invalid color behavior: {value!r}")


class ConsoleFormatterOptions(_PydanticBaseModel):
    """Options shared by every console formatter."""

    include_scopes: bool = Field(default=False, alias="includeScopes")
    timestamp_format: Optional[str] = Field(
        default=None, alias="timestampFormat"
    )
    use_utc_timestamp: bool = Field(default=False, alias="useUtcTimestamp")

    model_config = ConfigDict(
        frozen=True, extra="forbid", populate_by_name=True
    )

    @field_validator("timestamp_format")
    @classmethod
    def _empty_timestamp_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            return None
        return value


class SimpleConsoleFormatterOptions(ConsoleFormatterOptions):
    single_line: bool = Field(default=False, alias="singleLine")
    color_behavior: ColorBehavior = Field(
        default=ColorBehavior.DEFAULT, alias="colorBehavior"
    )

    @field_validator("color_behavior", mode="before")
    @classmethod
    def _parse_color_behavior(cls, value: object) -> object:
        if isinstance(value, str):
            return ColorBehavior.parse(value)
        return value


class FormatterOptions(ConsoleFormatterOptions):
    """Options for the colorized prefix line formatter."""

    prefix: str = ""
    color_behavior: ColorBehavior = Field(
        default=ColorBehavior.DEFAULT, alias="colorBehavior"
    )

    @field_validator("color_behavior", mode="before")
    @classmethod
    def _parse_color_behavior(cls, value: object) -> object:
        if isinstance(value, str):
            return ColorBehavior.parse(value)
        return value
