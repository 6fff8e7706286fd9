from __future__ import annotations

from services.api.app.confirmation.workflow import ActionConfirmationWorkflow
from services.api.app.services.ability_factory import get_ability_registry
from services.api.app.services.audit_log import DatabaseAuditSink

_WORKFLOW: ActionConfirmationWorkflow | None = None


def get_confirmation_workflow() -> ActionConfirmationWorkflow:
    """Return the process-wide workflow.

    Pending tokens live in the workflow's in-memory store, so every request must share one
    instance (and the registry it executes against).
    """

    global _WORKFLOW

    if _WORKFLOW is None:
        _WORKFLOW = ActionConfirmationWorkflow(
            registry=get_ability_registry(),
            audit=DatabaseAuditSink(),
        )
    return _WORKFLOW


def reset_confirmation_workflow() -> None:
    """Drop the shared workflow, its pending tokens and its registry state."""

    global _WORKFLOW
    _WORKFLOW = None
