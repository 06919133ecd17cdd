import io
import json
import os
import re
from pathlib import Path

import pytest

from ansi_console_log.demos import custom_formatter, simple_console, systemd_console
from ansi_console_log.demos.main import main


@pytest.fixture(autouse=True)
def _clean_log_env(monkeypatch) -> None:
    for name in list(os.environ):
        if name.startswith("LOG_"):
            monkeypatch.delenv(name)


def test_systemd_demo_output() -> None:
    out = io.StringIO()
    assert systemd_console.main(out) == 0
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    pattern = re.compile(
        r"^<6>\d\d:\d\d:\d\d demo\.program\[0\] => \[scope is enabled\] "
    )
    assert all(pattern.match(line) for line in lines)
    assert lines[0].endswith("Hello World!")
    assert lines[2].endswith("Each log message is fit in a single line.")


def test_custom_demo_redirected_output() -> None:
    out = io.StringIO()
    assert custom_formatter.main(out) == 0
    assert out.getvalue() == (
        " >>> \nHello World!\n"
        " >>> \nPrefix and colors come from the formatter options.\n"
    )


def test_custom_demo_uses_options_file(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    path.write_text(
        json.dumps({"prefix": "~ ", "colorBehavior": "enabled"}),
        encoding="utf-8",
    )
    out = io.StringIO()
    custom_formatter.main(out, options_file=str(path))
    assert out.getvalue().startswith(
        "\x1b[40m\x1b[1m\x1b[32m~ \n\x1b[39m\x1b[22m\x1b[49mHello World!\n"
    )


def test_simple_demo_output() -> None:
    out = io.StringIO()
    assert simple_console.main(out) == 0
    text = out.getvalue()
    assert "info: demo.orders[1001]\n      => batch 42\n" in text
    assert "      Order 7 received from contoso\n" in text
    assert "warn: demo.orders[1002]" in text
    assert "      Order 7 took 1234.6 ms\n" in text
    assert "fail: demo.orders[1003]" in text
    assert "ValueError: payment declined" in text
    assert "\x1b" not in text


def test_simple_demo_single_line() -> None:
    out = io.StringIO()
    simple_console.main(out, single_line=True)
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(
        "info: demo.orders[1001] => batch 42 Order 7 received from contoso"
    )


def test_entry_point_runs_selected_demo(capsys) -> None:
    assert main(["systemd"]) == 0
    assert "Hello World!" in capsys.readouterr().out


def test_entry_point_rejects_unknown_demo() -> None:
    with pytest.raises(SystemExit):
        main(["json"])


def test_custom_demo_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_PREFIX", "## ")
    monkeypatch.setenv("LOG_COLOR_BEHAVIOR", "enabled")
    out = io.StringIO()
    custom_formatter.main(out)
    assert out.getvalue().startswith(
        "\x1b[40m\x1b[1m\x1b[32m## \n\x1b[39m\x1b[22m\x1b[49mHello World!\n"
    )


def test_systemd_demo_honors_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    out = io.StringIO()
    systemd_console.main(out)
    assert out.getvalue() == ""


def test_entry_point_reads_environment(capsys, monkeypatch) -> None:
    monkeypatch.setenv("LOG_PREFIX", "-> ")
    assert main(["custom"]) == 0
    assert capsys.readouterr().out.startswith("-> \nHello World!\n")
