"""Test configuration and fixtures."""

import pytest

from stepflow import BaseContext, BaseEvent, BaseWorkflow, new_base_context, new_base_event
from stepflow.observers import RunTrace


def hello_step(_event: BaseEvent, _ctx: BaseContext) -> BaseEvent:
    return new_base_event("end", {"output": "hello world"})


@pytest.fixture
def empty_context() -> BaseContext:
    """Provide a context with empty store and state."""
    return new_base_context({}, {})


@pytest.fixture
def input_event() -> BaseEvent:
    """Provide a throwaway input event."""
    return new_base_event("mockEvent", {"mock": "event"})


@pytest.fixture
def hello_workflow(empty_context: BaseContext) -> BaseWorkflow:
    """Provide a one-step workflow that always outputs 'hello world'."""
    return BaseWorkflow(
        first_step="firstStep", context=empty_context, steps={"firstStep": hello_step}
    )


@pytest.fixture
def trace() -> RunTrace:
    return RunTrace()
