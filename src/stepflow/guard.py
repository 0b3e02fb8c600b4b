"""Opt-in safety rail for workflows that might never reach ``"end"``.

The engine itself never caps iterations. This wrapper leaves the run loop
untouched and only counts the events it sees through ``on_start``.
"""

from __future__ import annotations

from stepflow.context import BaseContext
from stepflow.events import BaseEvent
from stepflow.workflow import END_STEP, EventCallback, GenericWorkflow, OutputCallback


class StepLimitExceededError(RuntimeError):
    def __init__(self, max_steps: int) -> None:
        super().__init__(f"Workflow did not reach the end step within {max_steps} steps")
        self.max_steps = max_steps


def run_with_step_limit(
    workflow: GenericWorkflow,
    input_event: BaseEvent,
    context: BaseContext | None,
    on_start: EventCallback,
    on_end: EventCallback,
    on_output: OutputCallback,
    *,
    max_steps: int,
) -> None:
    """Run ``workflow`` but abort once more than ``max_steps`` events are produced.

    A terminal event always goes through, so a run that reaches ``"end"`` is
    never aborted. The step that produced the offending event has already run
    when the limit trips.

    Raises:
        ValueError: If ``max_steps`` is smaller than 1.
        StepLimitExceededError: If event ``max_steps + 1`` is not terminal.
            ``on_start`` has been called exactly ``max_steps`` times at that
            point.
    """

    if max_steps < 1:
        raise ValueError("max_steps must be >= 1")

    seen = 0

    def _counting_on_start(event: BaseEvent) -> None:
        nonlocal seen
        seen += 1
        if seen > max_steps and event.next_step != END_STEP:
            raise StepLimitExceededError(max_steps)
        on_start(event)

    workflow.run(input_event, context, _counting_on_start, on_end, on_output)
