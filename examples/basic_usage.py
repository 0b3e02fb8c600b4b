#!/usr/bin/env python3
"""Programmatic workflow example.

This demonstrates using the engine directly:

* load settings from `.env`
* build a small branching workflow
* run it with logging callbacks, bounded by STEPFLOW_MAX_STEPS if set
"""

from __future__ import annotations

import argparse
from typing import Sequence

from stepflow import (
    END_STEP,
    BaseContext,
    BaseEvent,
    new_base_context,
    new_base_event,
    new_base_workflow,
    run_with_step_limit,
)
from stepflow.config import StepflowSettings
from stepflow.logging import configure_logging
from stepflow.observers import RunTrace, logging_callbacks


def greet(event: BaseEvent, ctx: BaseContext) -> BaseEvent:
    name, ok = event.get("name")
    ctx.store_value("greeted", name if ok else "stranger")
    return new_base_event("shout" if ctx.get_state().get("loud") else "finish", {})


def shout(_event: BaseEvent, ctx: BaseContext) -> BaseEvent:
    name, _ = ctx.get_value("greeted")
    return new_base_event(END_STEP, {"output": f"HELLO, {str(name).upper()}!"})


def finish(_event: BaseEvent, ctx: BaseContext) -> BaseEvent:
    name, _ = ctx.get_value("greeted")
    return new_base_event(END_STEP, {"output": f"Hello, {name}."})


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a small greeting workflow.")
    parser.add_argument("--name", default="", help="Name to greet (optional)")
    parser.add_argument("--loud", action="store_true", help="Take the shouting branch")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = StepflowSettings()
    configure_logging(settings.log_level)

    workflow = new_base_workflow(
        "greet",
        new_base_context(),
        {"greet": greet, "shout": shout, "finish": finish},
    )
    ok, error = workflow.validate()
    if not ok:
        print(error)
        return 2

    payload = {"name": args.name} if args.name else {}
    ctx = new_base_context(state={"loud": args.loud})
    trace = RunTrace()
    log_start, log_end, log_output = logging_callbacks()

    def on_start(event: BaseEvent) -> None:
        log_start(event)
        trace.on_start(event)

    def on_end(event: BaseEvent) -> None:
        log_end(event)
        trace.on_end(event)

    def on_output(output: object) -> None:
        log_output(output)
        trace.on_output(output)

    if settings.max_steps is not None:
        run_with_step_limit(
            workflow,
            new_base_event("greet", payload),
            ctx,
            on_start,
            on_end,
            on_output,
            max_steps=settings.max_steps,
        )
    else:
        workflow.run(new_base_event("greet", payload), ctx, on_start, on_end, on_output)

    print(trace.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
