from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from packages.shared.schemas.confirmation import ConfirmationRequestV1
from packages.shared.schemas.intent import CallerContextV1, ClassificationMatchV1
from services.api.app.confirmation.factory import get_confirmation_workflow
from services.api.app.confirmation.workflow import ActionConfirmationWorkflow, Requester
from services.api.app.intents.classifier import IntentClassifier
from services.api.app.intents.factory import get_intent_classifier
from services.api.app.services.ability_base import AbilityError, AbilityRegistry

logger = logging.getLogger(__name__)

MAX_DISPATCHED_RESULTS = 3


@dataclass
class DispatchOutcome:
    matches: list[ClassificationMatchV1]
    results: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    pending_action: ConfirmationRequestV1 | None = None

    @property
    def understood(self) -> bool:
        return bool(self.matches)


class Dispatcher:
    """Turn a chat message into ability results and, at most, one pending action.

    Read-only matches run immediately, best first, up to MAX_DISPATCHED_RESULTS. The first action
    match is parked with the confirmation workflow and ends the walk.
    """

    def __init__(self, classifier: IntentClassifier, workflow: ActionConfirmationWorkflow) -> None:
        self.classifier = classifier
        self.workflow = workflow

    @property
    def registry(self) -> AbilityRegistry:
        return self.workflow.registry

    def dispatch(
        self,
        message: str,
        requester: Requester,
        caller_context: CallerContextV1 = CallerContextV1.ADMIN,
    ) -> DispatchOutcome:
        matches: list[ClassificationMatchV1] = []
        for match in self.classifier.classify(message, scope=caller_context):
            if self.registry.describe(match.ability_id) is None:
                logger.warning("Discarding match %s: ability %s is not registered", match.intent_name, match.ability_id)
                continue
            matches.append(match)

        outcome = DispatchOutcome(matches=matches)
        executed: set[str] = set()

        for match in matches:
            if len(outcome.results) >= MAX_DISPATCHED_RESULTS:
                break
            if match.ability_id in executed:
                continue

            if match.is_action:
                pending = self.workflow.create(match.ability_id, match.params, requester)
                if pending.requires_confirmation:
                    outcome.pending_action = pending
                    break

            executed.add(match.ability_id)
            try:
                outcome.results[match.intent_name] = self.registry.execute(match.ability_id, dict(match.params))
            except AbilityError as e:
                logger.warning("Ability %s failed for intent %s: %s", match.ability_id, match.intent_name, e)
                outcome.errors[match.intent_name] = str(e)

        return outcome


def get_dispatcher() -> Dispatcher:
    return Dispatcher(get_intent_classifier(), get_confirmation_workflow())
