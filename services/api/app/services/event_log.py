from __future__ import annotations

from typing import Any
from uuid import uuid4

from packages.shared.schemas.events import EntityTypeV1, EventTypeV1, EventV1
from services.api.app.db.models import EventLog
from sqlalchemy.orm import Session


def log_event(
    db: Session,
    *,
    entity_type: EntityTypeV1,
    entity_id: str,
    event_type: EventTypeV1,
    event_payload: dict[str, Any],
    user_id: str | None = None,
    session_id: str | None = None,
    chat_request_id: str | None = None,
) -> None:
    """Stage an append-only event row. The caller owns the commit."""

    db.add(
        EventLog(
            id=uuid4().hex,
            chat_request_id=chat_request_id,
            user_id=user_id,
            session_id=session_id,
            entity_type=entity_type.value,
            entity_id=entity_id,
            event_type=event_type.value,
            event_payload_json=event_payload,
        )
    )


def to_event(row: EventLog) -> EventV1:
    return EventV1(
        id=row.id,
        user_id=row.user_id,
        session_id=row.session_id,
        entity_type=EntityTypeV1(row.entity_type),
        entity_id=row.entity_id,
        event_type=EventTypeV1(row.event_type),
        payload=row.event_payload_json or {},
        created_at=row.created_at.isoformat(),
    )
