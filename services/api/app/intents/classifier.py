from __future__ import annotations

import logging
from typing import Any

from packages.shared.schemas.intent import CallerContextV1, ClassificationMatchV1
from services.api.app.intents.base import IntentPattern, PatternTable

logger = logging.getLogger(__name__)


class IntentClassifier:
    """Deterministic rule-based classifier.

    Every pattern in the table is scored against the message; keyword hits count once and
    regex hits three times. Patterns scoring zero are dropped. Survivors get their parameters
    extracted from the original-case message and are ranked by score, then priority. Python's
    sort is stable, so entries tied on both keep table registration order.
    """

    def __init__(self, table: PatternTable) -> None:
        self.table = table

    def classify(
        self,
        message: str,
        *,
        scope: CallerContextV1 | None = None,
    ) -> list[ClassificationMatchV1]:
        message = message or ""
        message_lower = message.lower()

        matches: list[ClassificationMatchV1] = []
        for p in self.table:
            if scope is not None and not p.visible_to(scope):
                continue

            score = p.score(message_lower)
            if score <= 0:
                continue

            matches.append(
                ClassificationMatchV1(
                    intent_name=p.name,
                    ability_id=p.ability_id,
                    score=score,
                    priority=p.priority,
                    params=_run_extractor(p, message),
                    is_action=p.is_action,
                    scope=p.scope,
                )
            )

        matches.sort(key=lambda m: (-m.score, -m.priority))

        if matches:
            logger.debug(
                "classified message",
                extra={"top": [(m.intent_name, m.score, m.priority) for m in matches[:5]]},
            )
        return matches

    def get_best_match(
        self,
        message: str,
        *,
        scope: CallerContextV1 | None = None,
    ) -> ClassificationMatchV1 | None:
        matches = self.classify(message, scope=scope)
        return matches[0] if matches else None


def _run_extractor(p: IntentPattern, message: str) -> dict[str, Any]:
    if p.extractor is None:
        return {}

    # A raising extractor leaves the match with empty params.
    try:
        params = p.extractor(message)
    except Exception:
        logger.warning("extractor for intent %s raised; using empty params", p.name, exc_info=True)
        return {}

    return dict(params or {})
