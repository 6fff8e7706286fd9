"""Two-step execution of store actions.

`create` parks an action behind a random token and describes it to the user. `redeem` runs it
once the same user confirms (typing the code for destructive actions). `cancel` drops it.

Token lifecycle:

    (none) --create--> PENDING --redeem ok--> consumed and executed
    PENDING --redeem (wrong user or bad code)--> PENDING
    PENDING --cancel--> consumed, not executed
    PENDING --TTL--> expired

Unknown, consumed and expired tokens all raise ConfirmationExpiredError.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from packages.shared.schemas.confirmation import (
    ConfirmationLevelV1,
    ConfirmationRequestV1,
    ConfirmedActionResultV1,
)
from packages.shared.schemas.events import AuditActionTypeV1, AuditStatusV1
from services.api.app.confirmation.errors import (
    ConfirmationExpiredError,
    InvalidConfirmationCodeError,
    WrongUserError,
)
from services.api.app.confirmation.policy import (
    confirmation_code,
    confirmation_level,
    is_destructive,
    warning_message,
)
from services.api.app.confirmation.preview import build_action_summary, build_preview
from services.api.app.confirmation.store import ConfirmationStore, InMemoryConfirmationStore
from services.api.app.services.ability_base import AbilityRegistry
from services.api.app.services.audit_log import (
    AuditRecord,
    AuditSink,
    cancelled_description,
    confirmed_description,
)

logger = logging.getLogger(__name__)

CONFIRMATION_TTL_SECONDS = 300


@dataclass(frozen=True, slots=True)
class Requester:
    user_id: str
    session_id: str | None = None
    user_type: str = "admin"


@dataclass(frozen=True, slots=True)
class PendingConfirmation:
    token: str
    ability_id: str
    params: dict[str, Any]
    requester: Requester
    level: ConfirmationLevelV1
    preview: str
    created_at: float
    expires_at: float

    @property
    def confirmation_code(self) -> str | None:
        if self.level is ConfirmationLevelV1.DOUBLE:
            return confirmation_code(self.ability_id)
        return None


def _iso(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


class ActionConfirmationWorkflow:
    def __init__(
        self,
        registry: AbilityRegistry,
        store: ConfirmationStore | None = None,
        audit: AuditSink | None = None,
        clock: Callable[[], float] = time.time,
        ttl_seconds: int = CONFIRMATION_TTL_SECONDS,
    ) -> None:
        self.registry = registry
        self.store = store if store is not None else InMemoryConfirmationStore(clock=clock)
        self.audit = audit
        self._clock = clock
        self.ttl_seconds = ttl_seconds

    def create(self, ability_id: str, params: dict[str, Any], requester: Requester) -> ConfirmationRequestV1:
        level = confirmation_level(ability_id)
        if level is None:
            return ConfirmationRequestV1(requires_confirmation=False, ability_id=ability_id)

        metadata = self.registry.describe(ability_id)
        now = self._clock()
        record = PendingConfirmation(
            token=uuid4().hex,
            ability_id=ability_id,
            params=dict(params),
            requester=requester,
            level=level,
            preview=build_preview(ability_id, params, metadata),
            created_at=now,
            expires_at=now + self.ttl_seconds,
        )
        self.store.put(record.token, record, self.ttl_seconds)

        logger.info(
            "Confirmation requested ability=%s level=%s user=%s",
            ability_id,
            level.value,
            requester.user_id,
        )

        return ConfirmationRequestV1(
            requires_confirmation=True,
            confirmation_token=record.token,
            level=level,
            ability_id=ability_id,
            action_name=metadata.label if metadata is not None else ability_id,
            preview=record.preview,
            action_summary=build_action_summary(ability_id, params),
            warning_message=warning_message(ability_id),
            confirmation_code=record.confirmation_code,
            is_destructive=is_destructive(ability_id),
            expires_in=self.ttl_seconds,
            expires_at=_iso(record.expires_at),
        )

    def peek(self, token: str) -> PendingConfirmation | None:
        return self.store.get(token)

    def redeem(
        self,
        token: str,
        requester: Requester,
        confirmation_code: str | None = None,
    ) -> ConfirmedActionResultV1:
        record: PendingConfirmation | None = self.store.get(token)
        if record is None:
            raise ConfirmationExpiredError()

        if requester.user_id != record.requester.user_id:
            raise WrongUserError()

        expected = record.confirmation_code
        if expected is not None and (confirmation_code or "").strip().upper() != expected:
            raise InvalidConfirmationCodeError(expected)

        # Only one concurrent redeem can win the take.
        claimed: PendingConfirmation | None = self.store.take(token)
        if claimed is None:
            raise ConfirmationExpiredError()

        try:
            result = self.registry.execute(claimed.ability_id, dict(claimed.params))
        except Exception as e:
            logger.warning("Confirmed action failed ability=%s error=%s", claimed.ability_id, e)
            self._record_audit(
                claimed,
                AuditActionTypeV1.CONFIRMED_ACTION,
                AuditStatusV1.FAILED,
                result={"error": str(e)},
            )
            raise

        logger.info("Confirmed action executed ability=%s user=%s", claimed.ability_id, requester.user_id)
        self._record_audit(claimed, AuditActionTypeV1.CONFIRMED_ACTION, AuditStatusV1.SUCCESS, result=result)

        return ConfirmedActionResultV1(
            success=True,
            message=f"Action completed: {claimed.preview}",
            result=result,
        )

    def cancel(self, token: str) -> bool:
        record: PendingConfirmation | None = self.store.take(token)
        if record is None:
            return False

        logger.info("Confirmation cancelled ability=%s user=%s", record.ability_id, record.requester.user_id)
        self._record_audit(record, AuditActionTypeV1.CANCELLED_ACTION, AuditStatusV1.CANCELLED)
        return True

    def _record_audit(
        self,
        record: PendingConfirmation,
        action_type: AuditActionTypeV1,
        status: AuditStatusV1,
        *,
        result: Any = None,
    ) -> None:
        if self.audit is None:
            return

        if action_type is AuditActionTypeV1.CANCELLED_ACTION:
            description = cancelled_description(record.ability_id, record.params)
        else:
            description = confirmed_description(record.ability_id, record.params)

        entry = AuditRecord(
            action_type=action_type,
            status=status,
            ability_id=record.ability_id,
            description=description,
            user_id=record.requester.user_id,
            user_type=record.requester.user_type,
            session_id=record.requester.session_id,
            parameters=dict(record.params),
            result=result,
        )

        # Best-effort: audit failures never reach the caller.
        try:
            self.audit.record(entry)
        except Exception:
            logger.warning("Audit sink failed for ability=%s", record.ability_id, exc_info=True)
