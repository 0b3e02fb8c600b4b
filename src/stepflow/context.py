"""Shared, mutable storage for a single workflow run.

A context has two independent namespaces:

- ``store``: long-lived values, mutated key by key.
- ``state``: ephemeral values, always replaced as a whole.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class GenericContext(Protocol):
    def store_value(self, key: str, value: Any) -> None: ...

    def get_value(self, key: str) -> tuple[Any, bool]: ...

    def get_state(self) -> dict[str, Any]: ...

    def set_state(self, state: dict[str, Any]) -> None: ...


class BaseContext:
    """Dict-backed context.

    The mappings passed in are kept by reference, so a caller holding on to
    ``store`` sees what the steps write into it.
    """

    __slots__ = ("store", "state")

    def __init__(self, store: dict[str, Any], state: dict[str, Any]) -> None:
        self.store = store
        self.state = state

    def store_value(self, key: str, value: Any) -> None:
        self.store[key] = value

    def get_value(self, key: str) -> tuple[Any, bool]:
        if key in self.store:
            return self.store[key], True
        return None, False

    def get_state(self) -> dict[str, Any]:
        return self.state

    def set_state(self, state: dict[str, Any]) -> None:
        # Wholesale replacement: nothing from the previous state survives.
        self.state = state

    def __repr__(self) -> str:
        return f"BaseContext(store={self.store!r}, state={self.state!r})"


def new_base_context(
    store: dict[str, Any] | None = None, state: dict[str, Any] | None = None
) -> BaseContext:
    return BaseContext(
        store={} if store is None else store,
        state={} if state is None else state,
    )
