"""Article II rules: the Presidency and treaty-making."""

from __future__ import annotations

from conlaw.core.ontology import (
    Action,
    ActionType,
    ClauseResult,
    Office,
    RuleTarget,
    VerdictCode,
)
from conlaw.core.ontology import clauses

from .base import EvalContext, Rule

PRESIDENT_MIN_AGE = 35
PRESIDENT_MIN_YEARS_RESIDENT = 14


def presidential_offices(ctx: EvalContext) -> list[Office]:
    return [o for o in ctx.facts.offices if o.title == "President"]


class PresidentQualifications(Rule[Office]):
    """Natural-born citizen, at least 35, 14 years a resident, and sworn in."""

    id = "R-ArtII-§1-Qualifications-President"
    clause = clauses.ART_II_1_PRESIDENT_QUALIFICATIONS
    target = RuleTarget.OFFICE

    def trigger(self, ctx: EvalContext) -> list[Office]:
        return presidential_offices(ctx)

    def evaluate(self, o: Office, ctx: EvalContext) -> ClauseResult:
        q = o.qualification_facts
        passed = (
            bool(q.natural_born)
            and (q.age or 0) >= PRESIDENT_MIN_AGE
            and (q.years_citizen or 0) >= PRESIDENT_MIN_YEARS_RESIDENT
            and bool(o.oath_taken)
        )
        return self.judge(
            passed,
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=[
                "qualification_facts.natural_born",
                "qualification_facts.age",
                "qualification_facts.years_citizen",
                "oath_taken",
            ],
        )


class TreatiesConsent(Rule[Action]):
    """Treaties require the consent of two thirds of Senators present."""

    id = "R-ArtII-§2-Treaties-Consent"
    clause = clauses.ART_II_2_TREATIES
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [a for a in ctx.facts.actions if a.action_type == ActionType.TREATY_CONCLUSION]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            bool(a.fact("senate_consent_two_thirds_present")),
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["senate_consent_two_thirds_present"],
        )


ARTICLE_II_RULES: list[Rule] = [
    PresidentQualifications(),
    TreatiesConsent(),
]
