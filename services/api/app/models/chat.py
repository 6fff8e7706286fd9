from __future__ import annotations

from packages.shared.schemas.intent import CallerContextV1
from pydantic import BaseModel, Field


class ChatRequestIn(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    user_id: str
    session_id: str
    caller_context: CallerContextV1 = CallerContextV1.ADMIN
