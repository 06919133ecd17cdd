from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ..core.levels import TRACE
from ..options.models import ColorBehavior


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    level: int = logging.INFO
    formatter: str = "simple"
    prefix: str = " >>> "
    color_behavior: ColorBehavior = ColorBehavior.DEFAULT
    timestamp_format: str | None = None
    include_scopes: bool = False
    single_line: bool = False
    use_utc_timestamp: bool = False
    options_file: str | None = None
    options_reload_interval_s: float | None = None

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        level_name = _get_env_str("LOG_LEVEL", "INFO").upper()
        color_name = _get_env_str("LOG_COLOR_BEHAVIOR", "default")
        return cls(
            level=_parse_level(level_name),
            formatter=_get_env_str("LOG_CONSOLE_FORMATTER", "simple"),
            prefix=_get_env_raw("LOG_PREFIX", " >>> "),
            color_behavior=ColorBehavior.parse(color_name),
            timestamp_format=_get_env_optional("LOG_TIMESTAMP_FORMAT"),
            include_scopes=_get_env_bool("LOG_INCLUDE_SCOPES", False),
            single_line=_get_env_bool("LOG_SINGLE_LINE", False),
            use_utc_timestamp=_get_env_bool("LOG_USE_UTC", False),
            options_file=_get_env_optional("LOG_OPTIONS_FILE"),
            options_reload_interval_s=_get_env_float(
                "LOG_OPTIONS_RELOAD_INTERVAL"
            ),
        )

    def options_payload(self) -> dict[str, object]:
        """Formatter option values; each formatter keeps the keys it knows."""
        return {
            "prefix": self.prefix,
            "color_behavior": self.color_behavior,
            "timestamp_format": self.timestamp_format,
            "include_scopes": self.include_scopes,
            "single_line": self.single_line,
            "use_utc_timestamp": self.use_utc_timestamp,
        }


def load_logging_settings() -> LoggingSettings:
    return LoggingSettings.from_env()


def _parse_level(level_name: str) -> int:
    if level_name == "TRACE":
        return TRACE
    level = logging.getLevelName(level_name)
    if isinstance(level, int):
        return level
    raise ValueError(f"Invalid LOG_LEVEL: {level_name!r}")


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_raw(name: str, default: str) -> str:
    # Not stripped: leading/trailing blanks are part of a prefix.
    value = os.getenv(name)
    if value is None:
        return default
    return value


def _get_env_optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


def _get_env_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid bool env var {name}={value!r}")
