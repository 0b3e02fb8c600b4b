from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable


@runtime_checkable
class GenericEvent(Protocol):
    """Anything that can hand out payload values by key."""

    def get(self, key: str) -> tuple[object | None, bool]: ...


@dataclass(frozen=True, slots=True)
class BaseEvent:
    """The message passed between steps.

    ``next_step`` names the step to run next (or ``"end"``). The label is not
    validated here; only the workflow knows which names are meaningful. The
    payload is copied into a read-only mapping at construction.
    """

    next_step: str
    data: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def get(self, key: str) -> tuple[str | None, bool]:
        if key in self.data:
            return self.data[key], True
        return None, False


def new_base_event(next_step: str, data: Mapping[str, str] | None = None) -> BaseEvent:
    return BaseEvent(next_step=next_step, data={} if data is None else data)
