from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from packages.shared.schemas.confirmation import CancelActionResultV1, ConfirmedActionResultV1
from packages.shared.schemas.events import EntityTypeV1, EventTypeV1
from services.api.app.confirmation.errors import (
    ConfirmationError,
    ConfirmationExpiredError,
    InvalidConfirmationCodeError,
    WrongUserError,
)
from services.api.app.confirmation.factory import get_confirmation_workflow
from services.api.app.confirmation.workflow import Requester
from services.api.app.db.deps import get_db
from services.api.app.models.actions import CancelActionRequest, ConfirmActionRequest
from services.api.app.services.ability_base import (
    AbilityError,
    AbilityExecutionError,
    AbilityNotFoundError,
    AbilityParameterError,
)
from services.api.app.services.event_log import log_event
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, code: str, e: Exception) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"code": code, "message": str(e)})


def _raise_confirmation_http_error(e: Exception) -> None:
    if isinstance(e, ConfirmationExpiredError):
        raise _error(410, "confirmation_expired", e) from e

    if isinstance(e, WrongUserError):
        raise _error(403, "confirmation_invalid_user", e) from e

    if isinstance(e, InvalidConfirmationCodeError):
        raise _error(400, "confirmation_code_invalid", e) from e

    if isinstance(e, AbilityNotFoundError):
        raise _error(404, "ability_not_found", e) from e

    if isinstance(e, AbilityParameterError):
        raise _error(422, "ability_invalid_parameter", e) from e

    if isinstance(e, AbilityExecutionError):
        raise _error(422, "ability_error", e) from e

    raise HTTPException(status_code=500, detail="Internal Server Error") from e


def _log_confirmation_event(
    db: Session,
    *,
    token: str,
    event_type: EventTypeV1,
    event_payload: dict[str, Any],
    user_id: str | None = None,
    session_id: str | None = None,
) -> None:
    # Best-effort: event log failures never change the response.
    try:
        log_event(
            db,
            entity_type=EntityTypeV1.PENDING_CONFIRMATION,
            entity_id=token,
            event_type=event_type,
            event_payload=event_payload,
            user_id=user_id,
            session_id=session_id,
        )
        db.commit()
    except Exception:
        db.rollback()
        logger.warning("Failed to record %s event", event_type.value, exc_info=True)


@router.post("/v1/actions/confirm", response_model=ConfirmedActionResultV1)
def confirm_action(payload: ConfirmActionRequest, db: Session = Depends(get_db)) -> ConfirmedActionResultV1:
    try:
        workflow = get_confirmation_workflow()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    pending = workflow.peek(payload.confirmation_token)
    requester = Requester(user_id=payload.user_id, session_id=payload.session_id)

    try:
        result = workflow.redeem(
            payload.confirmation_token,
            requester,
            confirmation_code=payload.confirmation_code,
        )
    except (ConfirmationError, AbilityError) as e:
        _log_confirmation_event(
            db,
            token=payload.confirmation_token,
            event_type=(
                EventTypeV1.CONFIRMATION_REJECTED if isinstance(e, ConfirmationError) else EventTypeV1.ABILITY_FAILED
            ),
            event_payload={
                "ability_id": pending.ability_id if pending is not None else None,
                "error": type(e).__name__,
                "message": str(e),
            },
            user_id=payload.user_id,
            session_id=payload.session_id,
        )
        _raise_confirmation_http_error(e)
    except Exception as e:
        _raise_confirmation_http_error(e)

    _log_confirmation_event(
        db,
        token=payload.confirmation_token,
        event_type=EventTypeV1.CONFIRMATION_REDEEMED,
        event_payload={
            "ability_id": pending.ability_id if pending is not None else None,
            "message": result.message,
        },
        user_id=payload.user_id,
        session_id=payload.session_id,
    )
    return result


@router.post("/v1/actions/cancel", response_model=CancelActionResultV1)
def cancel_action(payload: CancelActionRequest, db: Session = Depends(get_db)) -> CancelActionResultV1:
    try:
        workflow = get_confirmation_workflow()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    pending = workflow.peek(payload.confirmation_token)
    cancelled = workflow.cancel(payload.confirmation_token)

    if cancelled and pending is not None:
        _log_confirmation_event(
            db,
            token=payload.confirmation_token,
            event_type=EventTypeV1.CONFIRMATION_CANCELLED,
            event_payload={"ability_id": pending.ability_id},
            user_id=pending.requester.user_id,
            session_id=pending.requester.session_id,
        )

    return CancelActionResultV1(success=cancelled)
