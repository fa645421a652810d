"""Evaluation engine: dispatches every registered rule against a scenario."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, Mapping

from conlaw.core.ontology import (
    ClauseResult,
    EngineVerdict,
    InterpretationProfile,
    Scenario,
    VerdictCode,
)
from conlaw.core.ontology import clauses
from conlaw.rules.base import EvalContext, RuleProtocol
from conlaw.rules.registry import RuleRegistry, default_registry

from .aggregator import aggregate
from .loader import pick_profile
from .precedence import resolve_precedence

logger = logging.getLogger(__name__)


@dataclass
class RuleOutcome:
    """What one rule produced during dispatch.

    ``results`` holds every judgment made before ``error`` (if any) was
    raised.
    """

    rule_id: str
    results: list[ClauseResult] = field(default_factory=list)
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def run_rule(rule: RuleProtocol, ctx: EvalContext) -> RuleOutcome:
    """Run one rule's trigger and evaluate steps, capturing any error."""
    outcome = RuleOutcome(rule_id=rule.id)
    try:
        for subject in rule.trigger(ctx):
            result = rule.evaluate(subject, ctx)
            if result is not None:
                outcome.results.append(result)
    except Exception as exc:
        outcome.error = exc
    return outcome


def rule_error_result(rule_id: str, error: Exception) -> ClauseResult:
    """Synthetic result recorded in place of a rule that raised."""
    return ClauseResult.of(
        clauses.ENGINE,
        rule_id,
        VerdictCode.INSUFFICIENT_FACTS,
        str(error) or "Rule error",
    )


class RuleEngine:
    """Evaluates scenarios against a rule registry with full tracing.

    The registry and profiles are shared read-only between calls, so one
    engine may evaluate different scenarios concurrently.
    """

    def __init__(
        self,
        profiles: Mapping[str, InterpretationProfile] | Iterable[InterpretationProfile],
        registry: RuleRegistry | None = None,
        clock: Callable[[], date] | None = None,
    ):
        if isinstance(profiles, Mapping):
            self._profiles = dict(profiles)
        else:
            self._profiles = {p.id: p for p in profiles}
        self.registry = registry or default_registry()
        self.clock = clock or date.today

    @property
    def profiles(self) -> dict[str, InterpretationProfile]:
        return dict(self._profiles)

    def evaluate(self, scenario: Scenario) -> EngineVerdict:
        """Evaluate a scenario and aggregate everything into one verdict.

        Raises:
            ProfileNotFoundError: If the scenario's profile is not loaded.
                No rule runs in that case.
        """
        ctx = self.context_for(scenario)
        results = self.dispatch(ctx)
        decisions = resolve_precedence(ctx)
        verdict = aggregate(results, decisions)
        logger.debug(
            "Scenario %s: %d result(s), %d precedence step(s), verdict %s",
            scenario.id,
            len(results),
            len(decisions),
            verdict.code.value,
        )
        return verdict

    def context_for(self, scenario: Scenario) -> EvalContext:
        """Resolve the scenario's profile and build its evaluation context."""
        profile = pick_profile(self._profiles, scenario.profile_id)
        return EvalContext(scenario=scenario, profile=profile, current_date=self.clock())

    def dispatch(self, ctx: EvalContext) -> list[ClauseResult]:
        """Run every rule in registry order and collect their results.

        A rule that raises contributes what it produced before failing plus
        one INSUFFICIENT_FACTS result attributed to the Engine clause.
        """
        results: list[ClauseResult] = []
        for rule in self.registry:
            outcome = run_rule(rule, ctx)
            results.extend(outcome.results)
            if outcome.failed:
                logger.warning(
                    "Rule %s failed on scenario %s: %s",
                    rule.id,
                    ctx.scenario.id,
                    outcome.error,
                )
                results.append(rule_error_result(rule.id, outcome.error))
        return results
