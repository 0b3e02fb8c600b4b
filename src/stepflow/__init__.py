"""stepflow: a minimal event-driven workflow engine.

A workflow is a table of named step functions. Each step consumes an event
and a shared context and returns the next event; the event's ``next_step``
label picks the step that runs after it, until the reserved ``"end"`` label
is reached.
"""

__version__ = "0.1.0"

from stepflow.context import BaseContext, GenericContext, new_base_context
from stepflow.events import BaseEvent, GenericEvent, new_base_event
from stepflow.guard import StepLimitExceededError, run_with_step_limit
from stepflow.workflow import (
    END_STEP,
    BaseWorkflow,
    GenericWorkflow,
    StepFunction,
    WorkflowValidationError,
    new_base_workflow,
)

__all__ = [
    "__version__",
    "END_STEP",
    "BaseContext",
    "BaseEvent",
    "BaseWorkflow",
    "GenericContext",
    "GenericEvent",
    "GenericWorkflow",
    "StepFunction",
    "StepLimitExceededError",
    "WorkflowValidationError",
    "new_base_context",
    "new_base_event",
    "new_base_workflow",
    "run_with_step_limit",
]
