"""Articles III through VI: treason, the amendment process, and religious tests."""

from __future__ import annotations

from conlaw.core.ontology import (
    Action,
    ActionType,
    ClauseResult,
    LawType,
    NormativeInstrument,
    RuleTarget,
    VerdictCode,
)
from conlaw.core.ontology import clauses

from .base import EvalContext, Rule


class Treason(Rule[Action]):
    """Treason is only levying war or adhering to enemies, proven by two witnesses or confession."""

    id = "R-ArtIII-§3-Treason"
    clause = clauses.ART_III_3_TREASON
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [
            a for a in ctx.facts.actions
            if a.action_type == ActionType.CRIMINAL_CHARGE and a.fact("offense") == "treason"
        ]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        proven = bool(a.fact("two_witnesses_same_overt_act") or a.fact("open_court_confession"))
        return self.judge(
            bool(a.fact("levying_war_or_adhering_enemies")) and proven,
            facts_used=[
                "levying_war_or_adhering_enemies",
                "two_witnesses_same_overt_act",
                "open_court_confession",
            ],
        )


class AmendmentProcess(Rule[NormativeInstrument]):
    """Amendments must be properly proposed and ratified by three fourths of the States."""

    id = "R-ArtV-AmendmentProcess"
    clause = clauses.ART_V_AMENDMENT
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [
            n for n in ctx.facts.instruments
            if n.type == LawType.CONSTITUTIONAL_AMENDMENT
        ]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        proposed = n.has_tag("proposed_by_2_3_congress") or n.has_tag("convention_called_by_2_3_states")
        ratified = n.has_tag("ratified_by_3_4_states")
        return self.judge(
            proposed and ratified,
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["subject_tags"],
        )


class NoReligiousTest(Rule[Action]):
    id = "R-ArtVI-NoReligiousTest"
    clause = clauses.ART_VI_NO_RELIGIOUS_TEST
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [
            a for a in ctx.facts.actions
            if a.action_type in (ActionType.APPOINTMENT, ActionType.BALLOT_ACCESS_REGULATION)
        ]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            not a.fact("requires_religious_affirmation"),
            facts_used=["requires_religious_affirmation"],
        )


ARTICLES_III_TO_VI_RULES: list[Rule] = [
    Treason(),
    AmendmentProcess(),
    NoReligiousTest(),
]
