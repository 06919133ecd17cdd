from .scopes import begin_scope, current_scopes, pop_scope, push_scope

__all__ = [
    "begin_scope",
    "current_scopes",
    "pop_scope",
    "push_scope",
]
