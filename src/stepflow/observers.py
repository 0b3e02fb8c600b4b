"""Ready-made callback sets for :meth:`BaseWorkflow.run`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stepflow.events import BaseEvent
from stepflow.workflow import EventCallback, OutputCallback


@dataclass(slots=True)
class RunTrace:
    """Record every callback of a run.

    Pass the bound methods to ``run``::

        trace = RunTrace()
        workflow.run(event, ctx, trace.on_start, trace.on_end, trace.on_output)
    """

    started: list[BaseEvent] = field(default_factory=list)
    ended: list[BaseEvent] = field(default_factory=list)
    outputs: list[object] = field(default_factory=list)

    def on_start(self, event: BaseEvent) -> None:
        self.started.append(event)

    def on_end(self, event: BaseEvent) -> None:
        self.ended.append(event)

    def on_output(self, output: object) -> None:
        self.outputs.append(output)

    @property
    def output(self) -> object | None:
        return self.outputs[-1] if self.outputs else None


def logging_callbacks(
    logger: logging.Logger | None = None, level: int = logging.INFO
) -> tuple[EventCallback, EventCallback, OutputCallback]:
    """Build ``(on_start, on_end, on_output)`` callbacks that log structured records."""

    log = logger or logging.getLogger("stepflow.run")

    def on_start(event: BaseEvent) -> None:
        log.log(level, "Event started", extra={"next_step": event.next_step})

    def on_end(event: BaseEvent) -> None:
        log.log(level, "Event emitted", extra={"next_step": event.next_step})

    def on_output(output: object) -> None:
        log.log(level, "Workflow output", extra={"output": output})

    return on_start, on_end, on_output
