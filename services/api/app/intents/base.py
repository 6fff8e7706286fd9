from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from packages.shared.schemas.intent import CallerContextV1, PatternScopeV1

Extractor = Callable[[str], dict[str, Any]]

KEYWORD_WEIGHT = 1
REGEX_WEIGHT = 3


@dataclass(frozen=True, slots=True)
class IntentPattern:
    """A rule binding keywords and regexes to one ability.

    Keywords are stored lower-cased and tested by substring containment. Regexes are compiled
    case-insensitively and may capture groups for the extractor.
    """

    name: str
    ability_id: str
    keywords: tuple[str, ...]
    regexes: tuple[re.Pattern[str], ...]
    priority: int = 5
    extractor: Extractor | None = None
    is_action: bool = False
    scope: PatternScopeV1 = PatternScopeV1.ADMIN

    def visible_to(self, caller_context: CallerContextV1) -> bool:
        if self.scope == PatternScopeV1.ANY:
            return True
        return self.scope.value == caller_context.value

    def score(self, message_lower: str) -> int:
        keyword_hits = sum(1 for keyword in self.keywords if keyword in message_lower)
        regex_hits = sum(1 for regex in self.regexes if regex.search(message_lower))
        return keyword_hits * KEYWORD_WEIGHT + regex_hits * REGEX_WEIGHT


def pattern(
    name: str,
    *,
    ability_id: str,
    keywords: Iterable[str] = (),
    regexes: Iterable[str] = (),
    priority: int = 5,
    extractor: Extractor | None = None,
    is_action: bool = False,
    scope: PatternScopeV1 = PatternScopeV1.ADMIN,
) -> IntentPattern:
    return IntentPattern(
        name=name,
        ability_id=ability_id,
        keywords=tuple(k.lower() for k in keywords),
        regexes=tuple(re.compile(r, re.IGNORECASE) for r in regexes),
        priority=priority,
        extractor=extractor,
        is_action=is_action,
        scope=scope,
    )


class PatternTable:
    """An ordered, immutable collection of intent patterns keyed by name.

    Iteration order is registration order, which is also the final tie-break when two matches
    share both score and priority. Filtering and extension return new tables.
    """

    def __init__(self, patterns: Iterable[IntentPattern] = ()) -> None:
        self._patterns: dict[str, IntentPattern] = {}
        for p in patterns:
            if p.name in self._patterns:
                raise ValueError(f"Duplicate intent pattern name: {p.name!r}")
            self._patterns[p.name] = p

    def __iter__(self) -> Iterator[IntentPattern]:
        return iter(self._patterns.values())

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def get(self, name: str) -> IntentPattern | None:
        return self._patterns.get(name)

    def names(self) -> list[str]:
        return list(self._patterns)

    def filter(self, predicate: Callable[[IntentPattern], bool]) -> PatternTable:
        return PatternTable(p for p in self if predicate(p))

    def without(self, *names: str) -> PatternTable:
        excluded = set(names)
        return self.filter(lambda p: p.name not in excluded)

    def extended(self, patterns: Iterable[IntentPattern]) -> PatternTable:
        return PatternTable([*self, *patterns])

    def by_scope(self, caller_context: CallerContextV1) -> PatternTable:
        return self.filter(lambda p: p.visible_to(caller_context))

    def actions(self) -> PatternTable:
        return self.filter(lambda p: p.is_action)
