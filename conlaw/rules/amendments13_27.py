"""Reconstruction and later amendments (XIII through XXVII)."""

from __future__ import annotations

from conlaw.core.ontology import (
    Action,
    ActionType,
    ClauseResult,
    GovernmentLevel,
    LawType,
    NormativeInstrument,
    Office,
    RuleTarget,
    TaxBase,
    VerdictCode,
)
from conlaw.core.ontology import clauses
from conlaw.core.ontology.profile import EqualProtectionTiers

from .article2 import presidential_offices
from .base import EvalContext, Rule, require_param


class Abolition(Rule[Action]):
    """Involuntary servitude only as punishment for a crime."""

    id = "R-AmendXIII-Abolition"
    clause = clauses.AMEND_XIII
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [a for a in ctx.facts.actions if a.fact("involuntary_servitude_imposed")]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        return self.judge(bool(a.fact("as_punishment_for_crime")), facts_used=["as_punishment_for_crime"])


class DueProcessEqualProtection(Rule[Action]):
    """Procedural due process minima plus tiered equal-protection scrutiny for state action.

    The scrutiny tier comes from the classification the action draws;
    the profile maps classes to tiers and tiers to required findings.
    """

    id = "R-AmendXIV-DueProcess-EqualProtection"
    clause = clauses.AMEND_XIV
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [
            a for a in ctx.facts.actions
            if a.actor_level in (GovernmentLevel.STATE, GovernmentLevel.LOCAL)
        ]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        params = ctx.params
        minima = params.due_process_procedural_minima
        # Associate with the first proceeding in the scenario.
        proceeding = ctx.facts.proceedings[0] if ctx.facts.proceedings else None
        due_process_ok = not minima or (
            proceeding is not None
            and all(step in proceeding.steps_completed for step in minima)
        )

        tiers: EqualProtectionTiers = require_param(ctx, "equal_protection_tiers")
        tier = self._tier(a.fact("classification"), tiers)
        requirements = {
            "strict": params.strict_test_requirements,
            "intermediate": params.intermediate_test_requirements,
            "rational": params.rational_basis_requirements,
        }[tier]
        equal_protection_ok = all(a.fact(r) for r in requirements)

        notes = None
        if not due_process_ok:
            notes = "Procedural due process minima not completed."
        elif not equal_protection_ok:
            notes = f"Classification fails {tier} scrutiny."
        return self.judge(
            due_process_ok and equal_protection_ok,
            notes,
            facts_used=["classification", *requirements],
            profile_parameters_used=[
                "due_process_procedural_minima",
                "equal_protection_tiers",
                f"{tier}_test_requirements" if tier != "rational" else "rational_basis_requirements",
            ],
            metrics={"tier": tier},
        )

    @staticmethod
    def _tier(classification: str | None, tiers: EqualProtectionTiers) -> str:
        if classification and classification in tiers.suspect.classes:
            return "strict"
        if classification and classification in tiers.quasi_suspect.classes:
            return "intermediate"
        return "rational"


# Bases on which the right to vote may not be denied or abridged.
PROTECTED_VOTING_BASES = frozenset([
    "race",
    "color",
    "previous_condition_of_servitude",
    "sex",
    "failure_to_pay_poll_tax",
    "age>=18",
])


class Voting(Rule[Action]):
    id = "R-AmendXV-XIX-XXIV-XXVI-Voting"
    clause = clauses.AMEND_SUFFRAGE
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [a for a in ctx.facts.actions if a.action_type == ActionType.VOTING_REGULATION]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        basis = a.fact("denial_or_abridgment_based_on")
        return self.judge(
            not (isinstance(basis, str) and basis in PROTECTED_VOTING_BASES),
            f"Denial based on protected ground '{basis}'.",
            facts_used=["denial_or_abridgment_based_on"],
        )


class IncomeTax(Rule[NormativeInstrument]):
    id = "R-AmendXVI-IncomeTax"
    clause = clauses.AMEND_XVI
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        if ctx.facts.context.tax_base != TaxBase.INCOME:
            return []
        return [n for n in ctx.facts.instruments if n.type == LawType.STATUTE and n.is_federal]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        return self.result(VerdictCode.CONSTITUTIONAL, facts_used=["context.tax_base"])


class TermLimits(Rule[Office]):
    id = "R-AmendXXII-TermLimits"
    clause = clauses.AMEND_XXII
    target = RuleTarget.OFFICE

    def trigger(self, ctx: EvalContext) -> list[Office]:
        return presidential_offices(ctx)

    def evaluate(self, o: Office, ctx: EvalContext) -> ClauseResult:
        won = o.elections_won_count or 0
        succeeded_years = o.years_served_if_succeeded or 0
        return self.judge(
            won <= 2 and succeeded_years <= 10,
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["elections_won_count", "years_served_if_succeeded"],
        )


class SuccessionDisability(Rule[Action]):
    id = "R-AmendXXV-SuccessionDisability"
    clause = clauses.AMEND_XXV
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [
            a for a in ctx.facts.actions
            if a.action_type in (ActionType.VACANCY, ActionType.PRESIDENTIAL_DISABILITY)
        ]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            bool(a.fact("procedures_followed_sections_1_to_4")),
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["procedures_followed_sections_1_to_4"],
        )


class CompensationDelay(Rule[NormativeInstrument]):
    """Changes to congressional pay take effect only after an intervening election."""

    id = "R-AmendXXVII-CompensationDelay"
    clause = clauses.AMEND_XXVII
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [
            n for n in ctx.facts.instruments
            if n.is_federal and n.has_tag("congressional_compensation")
        ]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        return self.judge(n.has_tag("change_effective_after_next_election"), facts_used=["subject_tags"])


AMENDMENTS_XIII_TO_XXVII_RULES: list[Rule] = [
    Abolition(),
    DueProcessEqualProtection(),
    Voting(),
    IncomeTax(),
    TermLimits(),
    SuccessionDisability(),
    CompensationDelay(),
]
