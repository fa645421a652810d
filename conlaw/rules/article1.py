"""Article I rules: legislative process, enumerated powers, and limits on Congress and the States."""

from __future__ import annotations

from conlaw.core.ontology import (
    Chamber,
    ClauseResult,
    EnumeratedPower,
    GovernmentLevel,
    LawType,
    NormativeInstrument,
    RuleTarget,
    TaxBase,
    VerdictCode,
)
from conlaw.core.ontology import clauses
from conlaw.core.ontology.profile import NecessaryAndProperTest

from .base import EvalContext, Rule


def _federal_statutes(ctx: EvalContext) -> list[NormativeInstrument]:
    return [n for n in ctx.facts.instruments if n.is_federal and n.type == LawType.STATUTE]


def _claiming(ctx: EvalContext, power: EnumeratedPower) -> list[NormativeInstrument]:
    return [n for n in ctx.facts.instruments if n.claims_power(power)]


class BicameralismPresentment(Rule[NormativeInstrument]):
    """A federal statute must pass both chambers and be presented to the President."""

    id = "R-ArtI-§7-BicameralismPresentment"
    clause = clauses.ART_I_7_BICAMERALISM
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return _federal_statutes(ctx)

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        m = n.meta
        passed = bool(m.house_passage and m.senate_passage and m.presented_to_president)
        return self.judge(
            passed,
            "Missing House/Senate passage or presentment.",
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["meta.house_passage", "meta.senate_passage", "meta.presented_to_president"],
        )


class Origination(Rule[NormativeInstrument]):
    """Bills for raising revenue must originate in the House."""

    id = "R-ArtI-§7-Origination"
    clause = clauses.ART_I_7_ORIGINATION
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [n for n in _federal_statutes(ctx) if n.has_tag("raise_revenue")]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        origin = n.meta.chamber_of_origin or n.enacted_by.chamber_of_origin
        return self.judge(
            origin == Chamber.HOUSE,
            "Revenue bill did not originate in House.",
            failure=VerdictCode.STRUCTURALLY_INVALID,
            facts_used=["meta.chamber_of_origin", "enacted_by.chamber_of_origin"],
        )


class TaxPower(Rule[NormativeInstrument]):
    """Taxing power. Apportionment questions are left to tags and context."""

    id = "R-ArtI-§8-TaxPower"
    clause = clauses.ART_I_8_TAX
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return _claiming(ctx, EnumeratedPower.TAX)

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        if ctx.facts.context.tax_base == TaxBase.INCOME and n.is_federal:
            return self.result(
                VerdictCode.CONSTITUTIONAL,
                "Income tax validated by Amend. XVI in precedence stage.",
                facts_used=["context.tax_base"],
            )
        return self.result(VerdictCode.CONSTITUTIONAL)


class Commerce(Rule[NormativeInstrument]):
    """The regulated commerce must fall in a category the profile enables."""

    id = "R-ArtI-§8-Commerce"
    clause = clauses.ART_I_8_COMMERCE
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return _claiming(ctx, EnumeratedPower.COMMERCE)

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        bucket = ctx.facts.context.commerce_bucket
        enabled = ctx.params.commerce_categories_enabled
        return self.judge(
            bucket is not None and bucket in enabled,
            facts_used=["context.commerce_bucket"],
            profile_parameters_used=["commerce_categories_enabled"],
        )


# Used only when a profile sets no Necessary and Proper test at all.
DEFAULT_NECESSARY_AND_PROPER_TEST = NecessaryAndProperTest(
    plainly_adapted=True,
    not_prohibited=True,
    within_scope_of_end=True,
)


class NecessaryProper(Rule[NormativeInstrument]):
    """Necessary and Proper claims must serve at least one other enumerated end."""

    id = "R-ArtI-§8-NecessaryProper"
    clause = clauses.ART_I_8_NECESSARY_PROPER
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return _claiming(ctx, EnumeratedPower.NECESSARY_AND_PROPER)

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        test = ctx.params.necessary_and_proper_test or DEFAULT_NECESSARY_AND_PROPER_TEST
        ends = [p for p in n.enum_power_claims if p != EnumeratedPower.NECESSARY_AND_PROPER]
        passed = (
            bool(test.plainly_adapted)
            and bool(test.not_prohibited)
            and bool(test.within_scope_of_end)
            and len(ends) > 0
        )
        return self.judge(
            passed,
            facts_used=["enum_power_claims"],
            profile_parameters_used=["necessary_and_proper_test"],
        )


class NoBillOfAttainder(Rule[NormativeInstrument]):
    id = "R-ArtI-§9-NoBillOfAttainder"
    clause = clauses.ART_I_9_BILL_OF_ATTAINDER
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [
            n for n in ctx.facts.instruments
            if n.type in (LawType.STATUTE, LawType.RESOLUTION)
        ]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            not n.has_tag("punish_named_persons_without_trial"),
            facts_used=["subject_tags"],
        )


class NoExPostFacto(Rule[NormativeInstrument]):
    id = "R-ArtI-§9-NoExPostFacto"
    clause = clauses.ART_I_9_EX_POST_FACTO
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [
            n for n in ctx.facts.instruments
            if n.type in (LawType.STATUTE, LawType.REGULATION)
        ]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            not n.has_tag("retroactive_criminalization_or_punishment"),
            facts_used=["subject_tags"],
        )


# Powers Article I §10 withholds from the States.
STATE_PROHIBITED_TAGS = (
    "treaty",
    "coin_money",
    "bills_of_credit",
    "impair_contracts",
    "duties_on_imports_exports_outside_exceptions",
)


class StateLimits(Rule[NormativeInstrument]):
    """States may not exercise powers withheld from them by Article I §10."""

    id = "R-ArtI-§10-StateLimits"
    clause = clauses.ART_I_10_STATE_LIMITS
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [n for n in ctx.facts.instruments if n.level == GovernmentLevel.STATE]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        violated = [tag for tag in STATE_PROHIBITED_TAGS if n.has_tag(tag)]
        return self.judge(
            not violated,
            f"State exercised withheld power(s): {', '.join(violated)}." if violated else None,
            facts_used=["subject_tags"],
        )


ARTICLE_I_RULES: list[Rule] = [
    BicameralismPresentment(),
    Origination(),
    TaxPower(),
    Commerce(),
    NecessaryProper(),
    NoBillOfAttainder(),
    NoExPostFacto(),
    StateLimits(),
]
