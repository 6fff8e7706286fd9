"""Shared intent classification schema (v1).

These models are shared between the backend and chat clients (admin panel, storefront widget).
They should remain stable and backwards compatible once shipped.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PatternScopeV1(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"
    ANY = "any"


class CallerContextV1(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


class ClassificationMatchV1(BaseModel):
    """One scored candidate for a message.

    `score` counts keyword hits once and regex hits three times. Matches are ordered by
    score, then priority, then pattern registration order.
    """

    intent_name: str
    ability_id: str
    score: int = Field(..., gt=0)
    priority: int
    params: dict[str, Any] = Field(default_factory=dict)

    is_action: bool = False
    scope: PatternScopeV1 = PatternScopeV1.ADMIN
