from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator

_CURRENT_SCOPES: ContextVar[tuple[object, ...]] = ContextVar(
    "console_log_scopes",
    default=(),
)


def push_scope(state: object) -> Token[tuple[object, ...]]:
    return _CURRENT_SCOPES.set(_CURRENT_SCOPES.get() + (state,))


def pop_scope(token: Token[tuple[object, ...]]) -> None:
    _CURRENT_SCOPES.reset(token)


def current_scopes() -> tuple[object, ...]:
    """Active scopes, outermost first."""
    return _CURRENT_SCOPES.get()


@contextmanager
def begin_scope(state: object) -> Iterator[None]:
    token = push_scope(state)
    try:
        yield
    finally:
        pop_scope(token)
