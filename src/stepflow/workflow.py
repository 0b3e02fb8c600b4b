"""Step dispatch and the run loop.

A workflow has no static graph. Transitions come from the ``next_step`` label
of whatever event the previous step returned, so the same workflow can branch
differently on every run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from stepflow.context import BaseContext
from stepflow.events import BaseEvent

logger = logging.getLogger(__name__)

END_STEP = "end"

NO_OUTPUT = "No output produced"
NOT_AN_OUTPUT_STEP = "Not an output step"

StepFunction = Callable[[BaseEvent, BaseContext], BaseEvent]
EventCallback = Callable[[BaseEvent], None]
OutputCallback = Callable[[object], None]


class WorkflowValidationError(ValueError):
    pass


def missing_step_message(step_name: str) -> str:
    return f"There was an error while executing step {step_name}: the step does not exist"


@runtime_checkable
class GenericWorkflow(Protocol):
    """The operations a workflow exposes to its callers."""

    def validate(self) -> tuple[bool, WorkflowValidationError | None]: ...

    def take_step(self, step_name: str, event: BaseEvent, context: BaseContext) -> BaseEvent: ...

    def run(
        self,
        input_event: BaseEvent,
        context: BaseContext | None,
        on_start: EventCallback,
        on_end: EventCallback,
        on_output: OutputCallback,
    ) -> None: ...

    def output(self, event: BaseEvent, context: BaseContext) -> object: ...


@dataclass(frozen=True, slots=True)
class BaseWorkflow:
    """A fixed table of named steps plus the name of the entry step.

    The step table is frozen at construction. Steps themselves may still close
    over and mutate external state.
    """

    first_step: str
    context: BaseContext
    steps: Mapping[str, StepFunction] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", MappingProxyType(dict(self.steps)))

    def validate(self) -> tuple[bool, WorkflowValidationError | None]:
        """Check that no step uses the reserved terminal name.

        This is the only structural check. Unknown ``next_step`` labels are
        handled at dispatch time by :meth:`take_step`.
        """

        if END_STEP in self.steps:
            return False, WorkflowValidationError(
                f"`{END_STEP}` is a reserved keyword, you cannot use it as a name for your steps"
            )
        return True, None

    def ensure_valid(self) -> None:
        ok, error = self.validate()
        if not ok and error is not None:
            raise error

    def take_step(self, step_name: str, event: BaseEvent, context: BaseContext) -> BaseEvent:
        """Run a single step by name.

        An unknown step does not raise: it yields a terminal event whose
        ``"output"`` explains which step was missing.
        """

        step = self.steps.get(step_name)
        if step is None:
            logger.warning("Step not found", extra={"step": step_name})
            return BaseEvent(next_step=END_STEP, data={"output": missing_step_message(step_name)})

        logger.debug("Dispatching step", extra={"step": step_name})
        return step(event, context)

    def run(
        self,
        input_event: BaseEvent,
        context: BaseContext | None,
        on_start: EventCallback,
        on_end: EventCallback,
        on_output: OutputCallback,
    ) -> None:
        """Drive the workflow until a terminal event is produced.

        ``on_start`` fires for every produced event, including the terminal
        one. ``on_end`` fires only for intermediate transitions. ``on_output``
        fires once with the extracted output.

        There is no iteration cap: a step table that never reaches ``"end"``
        loops forever. See :func:`stepflow.guard.run_with_step_limit`.
        """

        ctx = self.context if context is None else context

        event = self.take_step(self.first_step, input_event, ctx)
        while True:
            on_start(event)
            if event.next_step == END_STEP:
                on_output(self.output(event, ctx))
                return
            event = self.take_step(event.next_step, event, ctx)
            on_end(event)

    def output(self, event: BaseEvent, context: BaseContext) -> object:
        if event.next_step != END_STEP:
            return NOT_AN_OUTPUT_STEP
        value, ok = event.get("output")
        if ok:
            return value
        return NO_OUTPUT


def new_base_workflow(
    first_step: str, context: BaseContext, steps: Mapping[str, StepFunction]
) -> BaseWorkflow:
    return BaseWorkflow(first_step=first_step, context=context, steps=steps)
