"""Shared chat reply payload schema (v1).

The admin chat panel and the storefront widget should render these payloads consistently.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from packages.shared.schemas.confirmation import ConfirmationRequestV1
from packages.shared.schemas.intent import ClassificationMatchV1
from pydantic import BaseModel, Field


class ChatReplyTypeV1(str, Enum):
    RESULT = "RESULT"
    CONFIRM = "CONFIRM"
    UNSUPPORTED = "UNSUPPORTED"


class ChatReplyActionTypeV1(str, Enum):
    CONFIRM = "CONFIRM"
    CANCEL = "CANCEL"


class ChatReplyActionV1(BaseModel):
    type: ChatReplyActionTypeV1
    label: str
    payload: dict[str, Any] = Field(default_factory=dict)


class ChatReplyV1(BaseModel):
    version: str = "1"
    type: ChatReplyTypeV1

    summary: str

    # Server-side IDs to support follow-up actions.
    chat_request_id: str
    user_id: str
    session_id: str

    matches: list[ClassificationMatchV1] = Field(default_factory=list)

    # Ability results keyed by intent name.
    results: dict[str, Any] = Field(default_factory=dict)
    pending_action: ConfirmationRequestV1 | None = None

    actions: list[ChatReplyActionV1] = Field(default_factory=list, max_length=4)
    warnings: list[str] = Field(default_factory=list, max_length=8)
