import io
import logging

from ansi_console_log import (
    ColorBehavior,
    LogEntry,
    SimpleConsoleFormatter,
    SimpleConsoleFormatterOptions,
)
from ansi_console_log.formatting.impl.simple import render

_ENTRY = LogEntry(
    "Hello World!",
    level=logging.INFO,
    category="demo.program",
    scopes=("[scope is enabled]",),
)
_FAILURE = LogEntry(
    "boom",
    level=logging.ERROR,
    category="c",
    event_id=3,
    exception_text="Traceback\nValueError: x\n",
)


def _options(**kwargs: object) -> SimpleConsoleFormatterOptions:
    kwargs.setdefault("color_behavior", ColorBehavior.DISABLED)
    return SimpleConsoleFormatterOptions(**kwargs)  # type: ignore[arg-type]


def test_multi_line_layout_with_scopes() -> None:
    text = render(_ENTRY, _options(include_scopes=True))
    assert text == (
        "info: demo.program[0]\n"
        "      => [scope is enabled]\n"
        "      Hello World!\n"
    )


def test_scopes_hidden_unless_enabled() -> None:
    assert render(_ENTRY, _options()) == (
        "info: demo.program[0]\n      Hello World!\n"
    )


def test_single_line_layout() -> None:
    text = render(_ENTRY, _options(include_scopes=True, single_line=True))
    assert text == "info: demo.program[0] => [scope is enabled] Hello World!\n"


def test_exception_multi_and_single_line() -> None:
    assert render(_FAILURE, _options()) == (
        "fail: c[3]\n      boom\n      Traceback\n      ValueError: x\n"
    )
    assert render(_FAILURE, _options(single_line=True)) == (
        "fail: c[3] boom Traceback ValueError: x\n"
    )


def test_level_label_colors_when_enabled() -> None:
    text = render(_ENTRY, _options(color_behavior=ColorBehavior.ENABLED))
    assert text.startswith("\x1b[40m\x1b[32minfo\x1b[39m\x1b[22m\x1b[49m: ")
    failure = render(_FAILURE, _options(color_behavior=ColorBehavior.ENABLED))
    assert failure.startswith("\x1b[41m\x1b[30mfail\x1b[39m\x1b[22m\x1b[49m: ")


def test_timestamp_prefix() -> None:
    entry = LogEntry("x", category="c", created=3661.0)
    options = _options(timestamp_format="%H:%M:%S ", use_utc_timestamp=True)
    assert render(entry, options) == "01:01:01 info: c[0]\n      x\n"


def test_formatter_skips_none_and_detects_redirect() -> None:
    formatter = SimpleConsoleFormatter(SimpleConsoleFormatterOptions())
    out = io.StringIO()
    formatter.write(LogEntry(None), out)
    formatter.write(LogEntry("x", category="c"), out)
    assert out.getvalue() == "info: c[0]\n      x\n"
