from __future__ import annotations

from typing import Any

from packages.shared.schemas.events import EventV1
from pydantic import BaseModel, Field


class ChatRequestDetail(BaseModel):
    chat_request_id: str
    user_id: str
    session_id: str
    caller_context: str

    message: str
    matches: list[dict[str, Any]] = Field(default_factory=list)
    created_at: str

    events: list[EventV1] = Field(default_factory=list)
