"""Bill of Rights rules (Amendments I through X)."""

from __future__ import annotations

from conlaw.core.ontology import (
    Action,
    ActionType,
    ClauseResult,
    EnumeratedPower,
    GovernmentLevel,
    NormativeInstrument,
    Proceeding,
    ProceedingType,
    Punishment,
    RuleTarget,
    VerdictCode,
)
from conlaw.core.ontology import clauses
from conlaw.core.ontology.profile import CruelUnusualThreshold

from .base import EvalContext, Rule

DEFAULT_PROBABLE_CAUSE_THRESHOLD = 0.5
DEFAULT_SPEEDY_TRIAL_MAX_DAYS = 180
DEFAULT_BAIL_MULTIPLIER = 10
DEFAULT_FINE_MULTIPLIER = 4
DEFAULT_CRUEL_UNUSUAL_THRESHOLD = CruelUnusualThreshold(severity_min=80, unusualness_percentile_min=80)


def _actions_of_type(ctx: EvalContext, *types: ActionType) -> list[Action]:
    return [a for a in ctx.facts.actions if a.action_type in types]


def _criminal_proceedings(ctx: EvalContext) -> list[Proceeding]:
    return [p for p in ctx.facts.proceedings if p.type == ProceedingType.CRIMINAL]


# =============================================================================
# Amendment I
# =============================================================================

class Speech(Rule[Action]):
    """Free speech: incorporation, unprotected categories, then time/place/manner."""

    id = "R-AmendI-Speech"
    clause = clauses.AMEND_I
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.EXPRESSION_REGULATION)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        params = ctx.params
        # Private actors are treated as state actors for incorporation purposes.
        actor_level = a.actor_level or GovernmentLevel.STATE
        incorporation = params.incorporation_map
        if (
            actor_level in (GovernmentLevel.STATE, GovernmentLevel.LOCAL)
            and incorporation is not None
            and incorporation.get("Speech") is not True
        ):
            return self.result(
                VerdictCode.NONJUSTICIABLE,
                "Speech not incorporated in this profile.",
                profile_parameters_used=["incorporation_map"],
            )

        category = a.fact("speech_category")
        if category and category in params.speech_unprotected_categories:
            return self.result(
                VerdictCode.CONSTITUTIONAL,
                f"Category '{category}' unprotected in profile.",
                facts_used=["speech_category"],
                profile_parameters_used=["speech_unprotected_categories"],
            )

        content_neutral = a.fact("is_content_neutral")
        neutrality_ok = content_neutral is True if params.speech_content_neutrality_required else True
        passed = (
            neutrality_ok
            and a.fact("time_place_manner_narrow_tailoring") is True
            and a.fact("alternative_channels_open") is True
        )
        return self.judge(
            passed,
            facts_used=[
                "is_content_neutral",
                "time_place_manner_narrow_tailoring",
                "alternative_channels_open",
            ],
            profile_parameters_used=["speech_content_neutrality_required"],
        )


class FreeExercise(Rule[Action]):
    id = "R-AmendI-FreeExercise"
    clause = clauses.AMEND_I
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.RELIGIOUS_REGULATION)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        if a.fact("neutral_and_generally_applicable"):
            return self.result(VerdictCode.CONSTITUTIONAL, facts_used=["neutral_and_generally_applicable"])
        return self.judge(
            bool(a.fact("compelling_interest") and a.fact("least_restrictive_means")),
            facts_used=["neutral_and_generally_applicable", "compelling_interest", "least_restrictive_means"],
        )


class Establishment(Rule[Action]):
    id = "R-AmendI-Establishment"
    clause = clauses.AMEND_I
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [
            a for a in ctx.facts.actions
            if a.fact("government_endorsement_religion") or a.fact("funding_religion")
        ]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        passed = (
            not a.fact("official_church")
            and not a.fact("preference_among_faiths")
            and bool(a.fact("secular_purpose"))
            and bool(a.fact("primary_effect_not_advancing_religion"))
        )
        return self.judge(
            passed,
            facts_used=[
                "official_church",
                "preference_among_faiths",
                "secular_purpose",
                "primary_effect_not_advancing_religion",
            ],
        )


# =============================================================================
# Amendments II and III
# =============================================================================

class Arms(Rule[Action]):
    id = "R-AmendII-Arms"
    clause = clauses.AMEND_II
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.ARMS_REGULATION)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        category = a.fact("arms_category")
        if not category:
            return self.result(VerdictCode.INSUFFICIENT_FACTS, facts_used=["arms_category"])
        if category not in ctx.params.arms_bearable_categories:
            return self.result(
                VerdictCode.CONSTITUTIONAL,
                "Arms category outside protected set.",
                facts_used=["arms_category"],
                profile_parameters_used=["arms_bearable_categories"],
            )
        return self.judge(
            bool(a.fact("regulation_is_history_consistent_or_objective")),
            facts_used=["arms_category", "regulation_is_history_consistent_or_objective"],
            profile_parameters_used=["arms_bearable_categories"],
        )


class Quartering(Rule[Action]):
    id = "R-AmendIII-Quartering"
    clause = clauses.AMEND_III
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.QUARTERING)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        time = a.fact("time")
        if time == "peacetime":
            return self.judge(bool(a.fact("owner_consent")), facts_used=["time", "owner_consent"])
        if time == "wartime":
            return self.judge(bool(a.fact("law_prescribes_manner")), facts_used=["time", "law_prescribes_manner"])
        return self.result(VerdictCode.INSUFFICIENT_FACTS, facts_used=["time"])


# =============================================================================
# Amendment IV
# =============================================================================

class SearchSeizure(Rule[Action]):
    """Warranted searches need probable cause and particularity; others need a recognized exception."""

    id = "R-AmendIV-SearchSeizure"
    clause = clauses.AMEND_IV
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.SEARCH_SEIZURE)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        params = ctx.params
        if a.fact("warrant"):
            threshold = params.probable_cause_threshold
            if threshold is None:
                threshold = DEFAULT_PROBABLE_CAUSE_THRESHOLD
            probability = a.fact("probability_of_illegality", 0)
            passed = probability >= threshold and bool(a.fact("warrant_particularity"))
            return self.judge(
                passed,
                facts_used=["warrant", "probability_of_illegality", "warrant_particularity"],
                profile_parameters_used=["probable_cause_threshold"],
                metrics={"probable_cause_threshold": threshold, "probability_of_illegality": probability},
            )

        matrix = params.search_reasonableness_matrix
        exceptions = matrix.exceptions if matrix else []
        return self.judge(
            a.fact("exception") in exceptions,
            facts_used=["warrant", "exception"],
            profile_parameters_used=["search_reasonableness_matrix"],
        )


# =============================================================================
# Amendment V
# =============================================================================

class DoubleJeopardy(Rule[Action]):
    id = "R-AmendV-DoubleJeopardy"
    clause = clauses.AMEND_V
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.CRIMINAL_CHARGE)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        return self.judge(
            not a.fact("same_offense_same_sovereign_reprosecution"),
            facts_used=["same_offense_same_sovereign_reprosecution"],
        )


class SelfIncrimination(Rule[Proceeding]):
    id = "R-AmendV-SelfIncrimination"
    clause = clauses.AMEND_V
    target = RuleTarget.PROCEEDING

    def trigger(self, ctx: EvalContext) -> list[Proceeding]:
        return _criminal_proceedings(ctx)

    def evaluate(self, p: Proceeding, ctx: EvalContext) -> ClauseResult:
        compelled = p.compelled_testimony_without_immunity
        if compelled is None:
            compelled = p.fact("compelled_testimony_without_immunity")
        return self.judge(
            not compelled,
            facts_used=["compelled_testimony_without_immunity"],
        )


class Takings(Rule[Action]):
    id = "R-AmendV-Takings"
    clause = clauses.AMEND_V
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.PROPERTY_TAKING)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        public_use_ok = bool(a.fact("public_use")) if ctx.params.takings_public_use_required else True
        return self.judge(
            public_use_ok and bool(a.fact("just_compensation_paid")),
            facts_used=["public_use", "just_compensation_paid"],
            profile_parameters_used=["takings_public_use_required"],
        )


# =============================================================================
# Amendment VI
# =============================================================================

class SpeedyPublicTrial(Rule[Proceeding]):
    """Criminal trials must be speedy, public, and with counsel."""

    id = "R-AmendVI-SpeedyPublicTrial"
    clause = clauses.AMEND_VI
    target = RuleTarget.PROCEEDING

    def trigger(self, ctx: EvalContext) -> list[Proceeding]:
        return _criminal_proceedings(ctx)

    def evaluate(self, p: Proceeding, ctx: EvalContext) -> ClauseResult:
        params = ctx.params
        max_days = params.speedy_trial_max_days
        if max_days is None:
            max_days = DEFAULT_SPEEDY_TRIAL_MAX_DAYS
        duration = p.duration_days_accusation_to_trial
        speedy = duration is not None and duration <= max_days

        minimum = params.public_trial_visibility_minimum
        if minimum is None:
            minimum = True
        if isinstance(minimum, bool):
            public = p.public_access == minimum
        else:
            public = bool(p.public_access)

        passed = speedy and public and bool(p.counsel_provided)
        notes = None
        if not passed:
            failed = [
                name for name, ok in
                (("speedy", speedy), ("public", public), ("counsel", bool(p.counsel_provided)))
                if not ok
            ]
            notes = f"Failed prong(s): {', '.join(failed)}."
        return self.judge(
            passed,
            notes,
            facts_used=["duration_days_accusation_to_trial", "public_access", "counsel_provided"],
            profile_parameters_used=["speedy_trial_max_days", "public_trial_visibility_minimum"],
        )


# =============================================================================
# Amendment VIII
# =============================================================================

class BailFines(Rule[Action]):
    """Bail and fines must not exceed profile multiples of the statutory fine or the harm."""

    id = "R-AmendVIII-BailFines"
    clause = clauses.AMEND_VIII
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return _actions_of_type(ctx, ActionType.BAIL_SETTING, ActionType.FINE_IMPOSITION)

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        params = ctx.params
        if a.action_type == ActionType.BAIL_SETTING:
            multiplier = params.excessive_bail_multiplier_vs_max_fine
            if multiplier is None:
                multiplier = DEFAULT_BAIL_MULTIPLIER
            amount = a.fact("bail_amount_usd", 0)
            cap = multiplier * a.fact("stat_max_fine_usd", 1)
            return self.judge(
                amount <= cap,
                facts_used=["bail_amount_usd", "stat_max_fine_usd"],
                profile_parameters_used=["excessive_bail_multiplier_vs_max_fine"],
                metrics={"amount_usd": amount, "cap_usd": cap},
            )
        if a.action_type == ActionType.FINE_IMPOSITION:
            multiplier = params.excessive_fine_multiplier_vs_harm
            if multiplier is None:
                multiplier = DEFAULT_FINE_MULTIPLIER
            amount = a.fact("fine_amount_usd", 0)
            cap = multiplier * a.fact("harm_value_usd", 1)
            return self.judge(
                amount <= cap,
                facts_used=["fine_amount_usd", "harm_value_usd"],
                profile_parameters_used=["excessive_fine_multiplier_vs_harm"],
                metrics={"amount_usd": amount, "cap_usd": cap},
            )
        return self.result(VerdictCode.INSUFFICIENT_FACTS)


def _below(value: float, bound: float | None) -> bool:
    return bound is not None and value < bound


class CruelUnusual(Rule[Punishment]):
    """A punishment fails only when it is both severe and unusual."""

    id = "R-AmendVIII-CruelUnusual"
    clause = clauses.AMEND_VIII
    target = RuleTarget.PUNISHMENT

    def trigger(self, ctx: EvalContext) -> list[Punishment]:
        return list(ctx.facts.punishments)

    def evaluate(self, p: Punishment, ctx: EvalContext) -> ClauseResult:
        threshold = ctx.params.cruel_unusual_threshold or DEFAULT_CRUEL_UNUSUAL_THRESHOLD
        severity = p.severity_score_0_100
        unusualness = p.unusualness_percentile_0_100
        if severity is None or unusualness is None:
            return self.result(
                VerdictCode.INSUFFICIENT_FACTS,
                "Need severity and unusualness percentiles.",
                facts_used=["severity_score_0_100", "unusualness_percentile_0_100"],
            )
        passed = (
            _below(severity, threshold.severity_min)
            or _below(unusualness, threshold.unusualness_percentile_min)
        )
        return self.judge(
            passed,
            facts_used=["severity_score_0_100", "unusualness_percentile_0_100"],
            profile_parameters_used=["cruel_unusual_threshold"],
        )


# =============================================================================
# Amendments IX and X
# =============================================================================

class Unenumerated(Rule[Action]):
    id = "R-AmendIX-Unenumerated"
    clause = clauses.AMEND_IX
    target = RuleTarget.ACTION

    def trigger(self, ctx: EvalContext) -> list[Action]:
        return [a for a in ctx.facts.actions if a.fact("claimed_unenumerated_right")]

    def evaluate(self, a: Action, ctx: EvalContext) -> ClauseResult:
        claim = a.fact("claimed_unenumerated_right")
        if claim not in ctx.params.substantive_due_process_catalog:
            return self.result(
                VerdictCode.UNCONSTITUTIONAL,
                "Claimed right not in profile catalog.",
                facts_used=["claimed_unenumerated_right"],
                profile_parameters_used=["substantive_due_process_catalog"],
            )
        return self.judge(
            not a.fact("countervailing_compelling_interest_without_LRM"),
            facts_used=["claimed_unenumerated_right", "countervailing_compelling_interest_without_LRM"],
            profile_parameters_used=["substantive_due_process_catalog"],
        )


class ReservedPowers(Rule[NormativeInstrument]):
    """Federal instruments must rest on some enumerated power."""

    id = "R-AmendX-ReservedPowers"
    clause = clauses.AMEND_X
    target = RuleTarget.INSTRUMENT

    def trigger(self, ctx: EvalContext) -> list[NormativeInstrument]:
        return [n for n in ctx.facts.instruments if n.is_federal]

    def evaluate(self, n: NormativeInstrument, ctx: EvalContext) -> ClauseResult:
        powers = set(n.enum_power_claims)
        has_enumerated = any(p != EnumeratedPower.NECESSARY_AND_PROPER for p in powers)
        return self.judge(
            has_enumerated or EnumeratedPower.NECESSARY_AND_PROPER in powers,
            "No enumerated power claimed.",
            facts_used=["enum_power_claims"],
        )


AMENDMENTS_I_TO_X_RULES: list[Rule] = [
    Speech(),
    FreeExercise(),
    Establishment(),
    Arms(),
    Quartering(),
    SearchSeizure(),
    DoubleJeopardy(),
    SelfIncrimination(),
    Takings(),
    SpeedyPublicTrial(),
    BailFines(),
    CruelUnusual(),
    Unenumerated(),
    ReservedPowers(),
]
