"""Rule registry: the fixed, ordered set of rules an engine dispatches."""

from __future__ import annotations

from typing import Iterable, Iterator

from conlaw.core.errors import DuplicateRuleError

from .amendments1_10 import AMENDMENTS_I_TO_X_RULES
from .amendments13_27 import AMENDMENTS_XIII_TO_XXVII_RULES
from .article1 import ARTICLE_I_RULES
from .article2 import ARTICLE_II_RULES
from .articles3_6 import ARTICLES_III_TO_VI_RULES
from .base import RuleProtocol


class RuleRegistry:
    """Ordered, read-only collection of rules.

    Order is trace order; it never changes the aggregated verdict.
    """

    def __init__(self, rules: Iterable[RuleProtocol]):
        self._rules: tuple[RuleProtocol, ...] = tuple(rules)
        self._by_id: dict[str, RuleProtocol] = {}
        for rule in self._rules:
            if rule.id in self._by_id:
                raise DuplicateRuleError(f"Duplicate rule id: {rule.id}")
            self._by_id[rule.id] = rule

    def __iter__(self) -> Iterator[RuleProtocol]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def get(self, rule_id: str) -> RuleProtocol | None:
        """Get a registered rule by ID."""
        return self._by_id.get(rule_id)

    def ids(self) -> list[str]:
        """Rule IDs in registry order."""
        return [rule.id for rule in self._rules]


ALL_RULES: list[RuleProtocol] = [
    *ARTICLE_I_RULES,
    *ARTICLE_II_RULES,
    *ARTICLES_III_TO_VI_RULES,
    *AMENDMENTS_I_TO_X_RULES,
    *AMENDMENTS_XIII_TO_XXVII_RULES,
]


def default_registry() -> RuleRegistry:
    """Registry with the full constitutional rule catalog."""
    return RuleRegistry(ALL_RULES)
