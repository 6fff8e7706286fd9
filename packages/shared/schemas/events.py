"""Shared event and audit schema (v1).

The backend stores an append-only event log per chat request and a separate audit trail of
ability executions and confirmation outcomes. Clients can consume both to render history.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EntityTypeV1(str, Enum):
    CHAT_REQUEST = "ChatRequest"
    PENDING_CONFIRMATION = "PendingConfirmation"
    ABILITY_EXECUTION = "AbilityExecution"


class EventTypeV1(str, Enum):
    MESSAGE_RECEIVED = "MESSAGE_RECEIVED"
    INTENT_CLASSIFIED = "INTENT_CLASSIFIED"
    ABILITY_EXECUTED = "ABILITY_EXECUTED"
    ABILITY_FAILED = "ABILITY_FAILED"
    CONFIRMATION_REQUESTED = "CONFIRMATION_REQUESTED"
    CONFIRMATION_REDEEMED = "CONFIRMATION_REDEEMED"
    CONFIRMATION_REJECTED = "CONFIRMATION_REJECTED"
    CONFIRMATION_CANCELLED = "CONFIRMATION_CANCELLED"


class EventV1(BaseModel):
    id: str
    user_id: str | None = None
    session_id: str | None = None

    entity_type: EntityTypeV1
    entity_id: str

    event_type: EventTypeV1
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: str


class AuditActionTypeV1(str, Enum):
    CONFIRMED_ACTION = "confirmed_action"
    CANCELLED_ACTION = "cancelled_action"


class AuditStatusV1(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"


class AuditEntryV1(BaseModel):
    id: str
    user_id: str | None = None
    user_type: str
    session_id: str | None = None

    action_type: str
    action_category: str
    description: str

    ability_id: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    result: Any = None
    status: str

    object_type: str | None = None
    object_id: int | None = None
    created_at: str


class AuditStatsV1(BaseModel):
    total: int
    by_status: dict[str, int] = Field(default_factory=dict)
    by_category: dict[str, int] = Field(default_factory=dict)
    by_user_type: dict[str, int] = Field(default_factory=dict)
    period_days: int
