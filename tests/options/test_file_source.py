import json
import os
import threading
from pathlib import Path

import pytest

from ansi_console_log import (
    ColorBehavior,
    FileOptionsWatcher,
    FormatterOptions,
    JsonFileOptionsSource,
    OptionsLoadError,
    OptionsMonitor,
)


def _write(path: Path, payload: object, *, mtime: float | None = None) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))


def _source(
    path: Path,
) -> tuple[JsonFileOptionsSource[FormatterOptions],
           OptionsMonitor[FormatterOptions]]:
    monitor = OptionsMonitor(FormatterOptions())
    return JsonFileOptionsSource(str(path), FormatterOptions, monitor), monitor


def test_reload_publishes_file_values(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"prefix": " ~~~ ", "colorBehavior": "disabled"})
    source, monitor = _source(path)

    options = source.reload()

    assert monitor.current is options
    assert options.prefix == " ~~~ "
    assert options.color_behavior is ColorBehavior.DISABLED


def test_reload_if_changed_uses_mtime(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"prefix": "a"}, mtime=1_000)
    source, monitor = _source(path)

    assert source.reload_if_changed() is True
    assert source.reload_if_changed() is False

    _write(path, {"prefix": "b"}, mtime=2_000)
    assert source.reload_if_changed() is True
    assert monitor.current.prefix == "b"


def test_invalid_file_raises_and_keeps_value(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"colorBehavior": "sometimes"})
    source, monitor = _source(path)
    before = monitor.current

    with pytest.raises(OptionsLoadError):
        source.reload()
    assert monitor.current is before


def test_missing_file_raises(tmp_path: Path) -> None:
    source, _ = _source(tmp_path / "missing.json")
    with pytest.raises(OptionsLoadError):
        source.reload()


def test_watcher_poll_keeps_previous_on_error(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"prefix": "good"}, mtime=1_000)
    source, monitor = _source(path)
    watcher = FileOptionsWatcher(source, interval_s=60)

    assert watcher.poll_once() is True
    _write(path, "not an object", mtime=2_000)
    assert watcher.poll_once() is False
    assert monitor.current.prefix == "good"


def test_watcher_start_stop(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"prefix": "a"})
    source, _ = _source(path)
    watcher = FileOptionsWatcher(source, interval_s=0.01)

    with watcher:
        assert watcher.running
    assert not watcher.running


def test_watcher_rejects_bad_interval(tmp_path: Path) -> None:
    source, _ = _source(tmp_path / "options.json")
    with pytest.raises(ValueError):
        FileOptionsWatcher(source, interval_s=0)


def test_reload_if_changed_detects_size_change_with_same_mtime(
    tmp_path: Path,
) -> None:
    path = tmp_path / "options.json"
    stamp_ns = 1_000_000_000_000
    path.write_text(json.dumps({"prefix": "a"}), encoding="utf-8")
    os.utime(path, ns=(stamp_ns, stamp_ns))
    source, monitor = _source(path)
    assert source.reload_if_changed() is True

    path.write_text(json.dumps({"prefix": "abc"}), encoding="utf-8")
    os.utime(path, ns=(stamp_ns, stamp_ns))

    assert source.reload_if_changed() is True
    assert monitor.current.prefix == "abc"


def test_watcher_thread_publishes_file_change(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    _write(path, {"prefix": "before"}, mtime=1_000)
    source, monitor = _source(path)
    source.reload()
    changed = threading.Event()
    monitor.on_change(lambda _options: changed.set())

    with FileOptionsWatcher(source, interval_s=0.01):
        _write(path, {"prefix": "after"}, mtime=2_000)
        assert changed.wait(5)

    assert monitor.current.prefix == "after"
