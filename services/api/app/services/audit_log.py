"""Audit trail of confirmed and cancelled store actions.

The confirmation workflow hands an AuditRecord to an AuditSink. The default sink writes one row to
the `audit_log` table per record; routers read the table back through `list_audit_entries` and
`audit_stats`.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Protocol
from uuid import uuid4

from packages.shared.schemas.events import AuditActionTypeV1, AuditEntryV1, AuditStatsV1, AuditStatusV1
from services.api.app.db.database import db_session
from services.api.app.db.models import AuditLogEntry
from services.api.app.services.ability_base import ability_action, ability_category
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

MAX_AUDIT_PAGE = 200

_OBJECT_TYPES = {
    "orders": "order",
    "products": "product",
    "customers": "customer",
    "coupons": "coupon",
    "subscriptions": "subscription",
    "bookings": "booking",
    "memberships": "membership",
    "content": "product",
}

_OBJECT_ID_KEYS = (
    "order_id",
    "product_id",
    "customer_id",
    "coupon_id",
    "subscription_id",
    "booking_id",
    "membership_id",
    "id",
)

_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "orders": {
        "update-status": "Updated order status",
        "refund": "Processed order refund",
        "add-note": "Added order note",
        "cancel": "Cancelled order",
    },
    "products": {
        "create": "Created product",
        "update": "Updated product",
        "delete": "Deleted product",
    },
    "coupons": {
        "create": "Created coupon",
        "update": "Updated coupon",
        "delete": "Deleted coupon",
    },
    "subscriptions": {
        "pause": "Paused subscription",
        "skip": "Skipped subscription renewal",
        "update-status": "Updated subscription status",
        "cancel": "Cancelled subscription",
        "terminate": "Terminated subscription",
    },
    "bookings": {
        "update": "Updated booking",
        "update-status": "Updated booking status",
        "cancel": "Cancelled booking",
    },
    "memberships": {
        "update-status": "Updated membership status",
        "cancel": "Cancelled membership",
    },
    "customer": {
        "pause-subscription": "Customer paused subscription",
        "resume-subscription": "Customer resumed subscription",
        "cancel-subscription": "Customer cancelled subscription",
        "cancel-booking": "Customer cancelled booking",
        "cancel-membership": "Customer cancelled membership",
    },
}


@dataclass(frozen=True, slots=True)
class AuditRecord:
    action_type: AuditActionTypeV1
    status: AuditStatusV1
    ability_id: str
    description: str
    user_id: str | None = None
    user_type: str = "admin"
    session_id: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)
    result: Any = None

    @property
    def action_category(self) -> str:
        return ability_category(self.ability_id)

    @property
    def object_type(self) -> str | None:
        return object_type_for(self.ability_id)

    @property
    def object_id(self) -> int | None:
        return object_id_for(self.parameters)


class AuditSink(Protocol):
    def record(self, entry: AuditRecord) -> None: ...


def object_type_for(ability_id: str) -> str | None:
    return _OBJECT_TYPES.get(ability_category(ability_id))


def object_id_for(parameters: dict[str, Any]) -> int | None:
    for key in _OBJECT_ID_KEYS:
        value = parameters.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
    return None


def describe_ability(ability_id: str, parameters: dict[str, Any]) -> str:
    """`shop/orders/refund` with order 1042 -> `Processed order refund #1042`."""

    description = _DESCRIPTIONS.get(ability_category(ability_id), {}).get(ability_action(ability_id), ability_id)
    object_id = object_id_for(parameters)
    if object_id is not None:
        description += f" #{object_id}"
    return description


def confirmed_description(ability_id: str, parameters: dict[str, Any]) -> str:
    return f"Confirmed and executed: {describe_ability(ability_id, parameters)}"


def cancelled_description(ability_id: str, parameters: dict[str, Any]) -> str:
    return f"Cancelled action: {describe_ability(ability_id, parameters)}"


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return str(value)


class DatabaseAuditSink:
    """Writes each record to the audit_log table in its own session."""

    def record(self, entry: AuditRecord) -> None:
        db = db_session()
        try:
            db.add(
                AuditLogEntry(
                    id=uuid4().hex,
                    user_id=entry.user_id,
                    user_type=entry.user_type,
                    session_id=entry.session_id,
                    action_type=entry.action_type.value,
                    action_category=entry.action_category,
                    description=entry.description,
                    ability_id=entry.ability_id,
                    parameters=_json_safe(entry.parameters),
                    result=_json_safe(entry.result),
                    status=entry.status.value,
                    object_type=entry.object_type,
                    object_id=entry.object_id,
                )
            )
            db.commit()
        finally:
            db.close()


class MemoryAuditSink:
    def __init__(self) -> None:
        self.records: list[AuditRecord] = []

    def record(self, entry: AuditRecord) -> None:
        self.records.append(entry)


def to_audit_entry(row: AuditLogEntry) -> AuditEntryV1:
    return AuditEntryV1(
        id=row.id,
        user_id=row.user_id,
        user_type=row.user_type,
        session_id=row.session_id,
        action_type=row.action_type,
        action_category=row.action_category,
        description=row.description,
        ability_id=row.ability_id,
        parameters=row.parameters or {},
        result=row.result,
        status=row.status,
        object_type=row.object_type,
        object_id=row.object_id,
        created_at=row.created_at.isoformat(),
    )


def list_audit_entries(
    db: Session,
    *,
    user_id: str | None = None,
    category: str | None = None,
    status: str | None = None,
    limit: int = 50,
) -> list[AuditEntryV1]:
    query = db.query(AuditLogEntry)
    if user_id:
        query = query.filter(AuditLogEntry.user_id == user_id)
    if category:
        query = query.filter(AuditLogEntry.action_category == category)
    if status:
        query = query.filter(AuditLogEntry.status == status)

    rows = (
        query.order_by(AuditLogEntry.created_at.desc(), AuditLogEntry.id)
        .limit(max(1, min(limit, MAX_AUDIT_PAGE)))
        .all()
    )
    return [to_audit_entry(row) for row in rows]


def audit_stats(db: Session, days: int = 30) -> AuditStatsV1:
    since = datetime.utcnow() - timedelta(days=days)
    rows = db.query(AuditLogEntry).filter(AuditLogEntry.created_at >= since).all()

    return AuditStatsV1(
        total=len(rows),
        by_status=dict(Counter(row.status for row in rows)),
        by_category=dict(Counter(row.action_category for row in rows)),
        by_user_type=dict(Counter(row.user_type for row in rows)),
        period_days=days,
    )
