"""Unit tests for the opt-in step limit."""

from __future__ import annotations

import pytest

from stepflow.context import BaseContext, new_base_context
from stepflow.events import BaseEvent, new_base_event
from stepflow.guard import StepLimitExceededError, run_with_step_limit
from stepflow.observers import RunTrace
from stepflow.workflow import BaseWorkflow, new_base_workflow


def _ping(_event: BaseEvent, _ctx: BaseContext) -> BaseEvent:
    return new_base_event("pong", {})


def _pong(_event: BaseEvent, _ctx: BaseContext) -> BaseEvent:
    return new_base_event("ping", {})


def test_cycle_is_stopped_after_max_steps(input_event: BaseEvent, trace: RunTrace) -> None:
    wf = new_base_workflow("ping", new_base_context(), {"ping": _ping, "pong": _pong})

    with pytest.raises(StepLimitExceededError) as excinfo:
        run_with_step_limit(
            wf, input_event, new_base_context(), trace.on_start, trace.on_end, trace.on_output,
            max_steps=5,
        )

    assert excinfo.value.max_steps == 5
    assert len(trace.started) == 5
    assert trace.outputs == []


def test_terminating_workflow_is_unaffected(
    hello_workflow: BaseWorkflow, input_event: BaseEvent, trace: RunTrace
) -> None:
    run_with_step_limit(
        hello_workflow, input_event, None, trace.on_start, trace.on_end, trace.on_output,
        max_steps=1,
    )

    assert trace.outputs == ["hello world"]
    assert len(trace.started) == 1


def test_max_steps_must_be_positive(hello_workflow: BaseWorkflow, input_event: BaseEvent) -> None:
    trace = RunTrace()
    with pytest.raises(ValueError):
        run_with_step_limit(
            hello_workflow, input_event, None, trace.on_start, trace.on_end, trace.on_output,
            max_steps=0,
        )


def test_run_reaching_end_on_the_next_event_is_not_aborted(
    input_event: BaseEvent, trace: RunTrace
) -> None:
    def first(_event: BaseEvent, _ctx: BaseContext) -> BaseEvent:
        return new_base_event("second", {})

    def second(_event: BaseEvent, _ctx: BaseContext) -> BaseEvent:
        return new_base_event("end", {"output": "ok"})

    wf = new_base_workflow("first", new_base_context(), {"first": first, "second": second})

    run_with_step_limit(
        wf, input_event, None, trace.on_start, trace.on_end, trace.on_output,
        max_steps=1,
    )

    assert [e.next_step for e in trace.started] == ["second", "end"]
    assert trace.outputs == ["ok"]
