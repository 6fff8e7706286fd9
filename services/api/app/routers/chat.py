from __future__ import annotations

from typing import Any
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException
from packages.shared.schemas.chat_v1 import (
    ChatReplyActionTypeV1,
    ChatReplyActionV1,
    ChatReplyTypeV1,
    ChatReplyV1,
)
from packages.shared.schemas.events import EntityTypeV1, EventTypeV1
from packages.shared.schemas.intent import ClassificationMatchV1
from services.api.app.confirmation.workflow import Requester
from services.api.app.db.deps import get_db
from services.api.app.db.models import ChatRequest
from services.api.app.intents.factory import get_intent_classifier
from services.api.app.models.chat import ChatRequestIn
from services.api.app.services.dispatcher import DispatchOutcome, get_dispatcher
from services.api.app.services.event_log import log_event
from sqlalchemy.orm import Session

router = APIRouter()

UNSUPPORTED_SUMMARY = (
    "I couldn't match that to anything I can do. "
    "Try asking about orders, products, customers, coupons or sales."
)


@router.post("/v1/intents/classify", response_model=list[ClassificationMatchV1])
def classify_message(payload: ChatRequestIn) -> list[ClassificationMatchV1]:
    try:
        classifier = get_intent_classifier()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return classifier.classify(payload.message, scope=payload.caller_context)


@router.post("/v1/chat", response_model=ChatReplyV1)
def chat(payload: ChatRequestIn, db: Session = Depends(get_db)) -> ChatReplyV1:
    try:
        dispatcher = get_dispatcher()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    requester = Requester(
        user_id=payload.user_id,
        session_id=payload.session_id,
        user_type=payload.caller_context.value,
    )
    outcome = dispatcher.dispatch(payload.message, requester, payload.caller_context)

    chat_request_id = uuid4().hex
    matches_json = [m.model_dump(mode="json") for m in outcome.matches]
    db.add(
        ChatRequest(
            id=chat_request_id,
            user_id=payload.user_id,
            session_id=payload.session_id,
            caller_context=payload.caller_context.value,
            message=payload.message,
            matches_json=matches_json,
        )
    )
    _log_dispatch_events(db, payload, chat_request_id, outcome)
    db.commit()

    return _build_reply(payload, chat_request_id, outcome)


def _log_dispatch_events(
    db: Session,
    payload: ChatRequestIn,
    chat_request_id: str,
    outcome: DispatchOutcome,
) -> None:
    common: dict[str, Any] = {
        "user_id": payload.user_id,
        "session_id": payload.session_id,
        "chat_request_id": chat_request_id,
    }

    log_event(
        db,
        entity_type=EntityTypeV1.CHAT_REQUEST,
        entity_id=chat_request_id,
        event_type=EventTypeV1.MESSAGE_RECEIVED,
        event_payload={"message": payload.message, "caller_context": payload.caller_context.value},
        **common,
    )
    log_event(
        db,
        entity_type=EntityTypeV1.CHAT_REQUEST,
        entity_id=chat_request_id,
        event_type=EventTypeV1.INTENT_CLASSIFIED,
        event_payload={
            "matches": [
                {"intent_name": m.intent_name, "ability_id": m.ability_id, "score": m.score}
                for m in outcome.matches
            ]
        },
        **common,
    )

    by_intent = {m.intent_name: m for m in outcome.matches}
    for intent_name in outcome.results:
        log_event(
            db,
            entity_type=EntityTypeV1.ABILITY_EXECUTION,
            entity_id=by_intent[intent_name].ability_id,
            event_type=EventTypeV1.ABILITY_EXECUTED,
            event_payload={"intent_name": intent_name, "params": by_intent[intent_name].params},
            **common,
        )
    for intent_name, error in outcome.errors.items():
        log_event(
            db,
            entity_type=EntityTypeV1.ABILITY_EXECUTION,
            entity_id=by_intent[intent_name].ability_id,
            event_type=EventTypeV1.ABILITY_FAILED,
            event_payload={"intent_name": intent_name, "error": error},
            **common,
        )

    pending = outcome.pending_action
    if pending is not None and pending.confirmation_token:
        log_event(
            db,
            entity_type=EntityTypeV1.PENDING_CONFIRMATION,
            entity_id=pending.confirmation_token,
            event_type=EventTypeV1.CONFIRMATION_REQUESTED,
            event_payload={
                "ability_id": pending.ability_id,
                "level": pending.level.value if pending.level else None,
                "preview": pending.preview,
            },
            **common,
        )


def _build_reply(payload: ChatRequestIn, chat_request_id: str, outcome: DispatchOutcome) -> ChatReplyV1:
    warnings = list(outcome.errors.values())

    common: dict[str, Any] = {
        "chat_request_id": chat_request_id,
        "user_id": payload.user_id,
        "session_id": payload.session_id,
        "matches": outcome.matches,
        "results": outcome.results,
    }

    pending = outcome.pending_action
    if pending is not None:
        confirm_payload: dict[str, Any] = {"confirmation_token": pending.confirmation_token}

        if pending.warning_message:
            warnings.insert(0, pending.warning_message)

        return ChatReplyV1(
            type=ChatReplyTypeV1.CONFIRM,
            summary=pending.preview or "Please confirm this action.",
            pending_action=pending,
            actions=[
                ChatReplyActionV1(type=ChatReplyActionTypeV1.CONFIRM, label="Confirm", payload=confirm_payload),
                ChatReplyActionV1(
                    type=ChatReplyActionTypeV1.CANCEL,
                    label="Cancel",
                    payload={"confirmation_token": pending.confirmation_token},
                ),
            ],
            warnings=warnings[:8],
            **common,
        )

    if not outcome.understood:
        return ChatReplyV1(type=ChatReplyTypeV1.UNSUPPORTED, summary=UNSUPPORTED_SUMMARY, **common)

    if outcome.results:
        summary = f"Ran {len(outcome.results)} lookup(s): {', '.join(outcome.results)}."
    else:
        summary = "I understood the request but could not complete it."

    return ChatReplyV1(type=ChatReplyTypeV1.RESULT, summary=summary, warnings=warnings[:8], **common)
