"""Rule contract.

A rule declares which clause it enforces and what kind of subject it
judges. ``trigger`` selects the subjects it is responsible for from a
scenario; ``evaluate`` judges one of them or abstains with ``None``.
Both must be pure: no rule may mutate the scenario, profile or a
subject's fact bag.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from conlaw.core.errors import MissingProfileParameterError
from conlaw.core.ontology import (
    ClauseRef,
    ClauseResult,
    InterpretationProfile,
    RuleTarget,
    Scenario,
    ScenarioFacts,
    Subject,
    VerdictCode,
)
from conlaw.core.ontology.profile import ProfileParameters

S = TypeVar("S", bound=Subject)


@dataclass(frozen=True)
class EvalContext:
    """Inputs shared by every rule during one evaluation."""

    scenario: Scenario
    profile: InterpretationProfile
    current_date: date

    @property
    def facts(self) -> ScenarioFacts:
        return self.scenario.facts

    @property
    def params(self) -> ProfileParameters:
        return self.profile.parameters


@runtime_checkable
class RuleProtocol(Protocol):
    """Anything the engine can dispatch."""

    id: str
    clause: ClauseRef
    target: RuleTarget

    def trigger(self, ctx: EvalContext) -> Sequence[Any]:
        ...

    def evaluate(self, subject: Any, ctx: EvalContext) -> ClauseResult | None:
        ...


class Rule(Generic[S]):
    """Base class for catalog rules.

    Subclasses set ``id``, ``clause`` and ``target`` as class attributes and
    implement ``trigger`` and ``evaluate``.
    """

    id: str
    clause: ClauseRef
    target: RuleTarget

    def trigger(self, ctx: EvalContext) -> list[S]:
        raise NotImplementedError

    def evaluate(self, subject: S, ctx: EvalContext) -> ClauseResult | None:
        raise NotImplementedError

    def result(
        self,
        code: VerdictCode,
        notes: str | None = None,
        **extra: Any,
    ) -> ClauseResult:
        """Attribute a result to this rule and its clause."""
        return ClauseResult.of(self.clause, self.id, code, notes, **extra)

    def judge(
        self,
        passed: bool,
        failure_notes: str | None = None,
        failure: VerdictCode = VerdictCode.UNCONSTITUTIONAL,
        **extra: Any,
    ) -> ClauseResult:
        """CONSTITUTIONAL when ``passed``, otherwise ``failure`` with notes."""
        if passed:
            return self.result(VerdictCode.CONSTITUTIONAL, **extra)
        return self.result(failure, failure_notes, **extra)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


def require_param(ctx: EvalContext, name: str) -> Any:
    """Read a profile option that has no sensible default."""
    value = getattr(ctx.params, name, None)
    if value is None:
        raise MissingProfileParameterError(name)
    return value
