from __future__ import annotations

import argparse
import json

from packages.shared.schemas.intent import CallerContextV1
from services.api.app.intents.base import PatternTable
from services.api.app.intents.classifier import IntentClassifier
from services.api.app.intents.factory import enabled_integrations
from services.api.app.intents.table import build_pattern_table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show how Shopdesk ranks a chat message")
    parser.add_argument("message")
    parser.add_argument(
        "--caller-context",
        choices=[c.value for c in CallerContextV1],
        default=CallerContextV1.ADMIN.value,
    )
    parser.add_argument("--top", type=int, default=5, help="Number of matches to print (default: 5)")
    parser.add_argument(
        "--integrations",
        default=None,
        help="Comma list of integration packs, or 'none' (default: SHOPDESK_INTEGRATIONS)",
    )
    parser.add_argument("--json", action="store_true", help="Print matches as JSON")
    args = parser.parse_args(argv)

    if args.integrations is None:
        packs = enabled_integrations()
    elif args.integrations.strip().lower() == "none":
        packs = ()
    else:
        packs = tuple(p.strip().lower() for p in args.integrations.split(",") if p.strip())

    table: PatternTable = build_pattern_table(packs)
    matches = IntentClassifier(table).classify(args.message, scope=CallerContextV1(args.caller_context))
    shown = matches[: max(args.top, 0)]

    if args.json:
        print(json.dumps([m.model_dump(mode="json") for m in shown], indent=2))
        return 0

    if not shown:
        print("No matching intents.")
        return 1

    for rank, m in enumerate(shown, start=1):
        kind = "action" if m.is_action else "read"
        print(f"{rank}. {m.intent_name} -> {m.ability_id} score={m.score} priority={m.priority} ({kind})")
        if m.params:
            print(f"   params: {json.dumps(m.params, sort_keys=True)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
