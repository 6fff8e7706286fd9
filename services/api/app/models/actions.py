from __future__ import annotations

from pydantic import BaseModel, Field


class ConfirmActionRequest(BaseModel):
    confirmation_token: str = Field(..., min_length=1)
    user_id: str
    session_id: str | None = None

    # Required for double-level actions, ignored otherwise.
    confirmation_code: str | None = None


class CancelActionRequest(BaseModel):
    confirmation_token: str = Field(..., min_length=1)
