from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from packages.shared.schemas.events import AuditEntryV1, AuditStatsV1
from services.api.app.db.deps import get_db
from services.api.app.db.models import ChatRequest, EventLog
from services.api.app.models.audit import ChatRequestDetail
from services.api.app.services.audit_log import MAX_AUDIT_PAGE, audit_stats, list_audit_entries
from services.api.app.services.event_log import to_event
from sqlalchemy.orm import Session

router = APIRouter()


@router.get("/v1/audit-log", response_model=list[AuditEntryV1])
def list_audit_log(
    user_id: str | None = None,
    category: str | None = None,
    status: str | None = None,
    limit: int = Query(50, ge=1, le=MAX_AUDIT_PAGE),
    db: Session = Depends(get_db),
) -> list[AuditEntryV1]:
    return list_audit_entries(db, user_id=user_id, category=category, status=status, limit=limit)


@router.get("/v1/audit-log/stats", response_model=AuditStatsV1)
def get_audit_stats(days: int = Query(30, ge=1, le=365), db: Session = Depends(get_db)) -> AuditStatsV1:
    return audit_stats(db, days=days)


@router.get("/v1/chat-requests/{chat_request_id}", response_model=ChatRequestDetail)
def get_chat_request(chat_request_id: str, db: Session = Depends(get_db)) -> ChatRequestDetail:
    chat_request = db.get(ChatRequest, chat_request_id)
    if chat_request is None:
        raise HTTPException(status_code=404, detail="Chat request not found")

    events = (
        db.query(EventLog)
        .filter(EventLog.chat_request_id == chat_request_id)
        .order_by(EventLog.created_at.asc())
        .all()
    )

    return ChatRequestDetail(
        chat_request_id=chat_request.id,
        user_id=chat_request.user_id,
        session_id=chat_request.session_id,
        caller_context=chat_request.caller_context,
        message=chat_request.message,
        matches=chat_request.matches_json or [],
        created_at=chat_request.created_at.isoformat(),
        events=[to_event(e) for e in events],
    )
