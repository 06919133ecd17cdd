import asyncio

import pytest

from ansi_console_log import begin_scope, current_scopes


def test_scopes_nest_and_unwind() -> None:
    assert current_scopes() == ()
    with begin_scope("outer"):
        with begin_scope({"request": 1}):
            assert current_scopes() == ("outer", {"request": 1})
        assert current_scopes() == ("outer",)
    assert current_scopes() == ()


def test_scope_pops_on_error() -> None:
    with pytest.raises(RuntimeError):
        with begin_scope("failing"):
            raise RuntimeError("boom")
    assert current_scopes() == ()


def test_scopes_are_task_local() -> None:
    async def _worker(name: str) -> tuple[object, ...]:
        with begin_scope(name):
            await asyncio.sleep(0)
            return current_scopes()

    async def _main() -> list[tuple[object, ...]]:
        return list(await asyncio.gather(_worker("a"), _worker("b")))

    assert asyncio.run(_main()) == [("a",), ("b",)]
