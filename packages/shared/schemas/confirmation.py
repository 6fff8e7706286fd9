"""Shared action confirmation schema (v1).

Clients render a ConfirmationRequestV1 as a confirm/cancel prompt. Double-level actions must
also collect the typed `confirmation_code` before calling the confirm endpoint.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ConfirmationLevelV1(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


class ActionSummaryV1(BaseModel):
    title: str
    details: list[str] = Field(default_factory=list, max_length=8)


class ConfirmationRequestV1(BaseModel):
    requires_confirmation: bool

    confirmation_token: str | None = None
    level: ConfirmationLevelV1 | None = None

    ability_id: str | None = None
    action_name: str | None = None
    preview: str | None = None
    action_summary: ActionSummaryV1 | None = None
    warning_message: str | None = None

    # Phrase the user must type for double-level actions.
    confirmation_code: str | None = None

    is_destructive: bool = False
    expires_in: int | None = None
    expires_at: str | None = None


class ConfirmedActionResultV1(BaseModel):
    success: bool
    message: str
    result: Any = None


class CancelActionResultV1(BaseModel):
    success: bool
