"""
Precedence resolution between conflicting authorities.

Inspects the scenario directly and records which authority prevails when
two norms overlap. Decisions are explanatory: they are carried in the
verdict trace and never alter clause results already computed.
"""

from __future__ import annotations

from conlaw.core.ontology import (
    ClauseRef,
    GovernmentLevel,
    NormativeInstrument,
    PrecedenceBasis,
    PrecedenceDecision,
)
from conlaw.core.ontology import clauses
from conlaw.rules.base import EvalContext


# Fixed amendment supersession pairs: (later, earlier, explanation).
AMENDMENT_SUPERSESSIONS: list[tuple[ClauseRef, ClauseRef, str]] = [
    (
        clauses.AMEND_XXI,
        clauses.AMEND_XVIII,
        "Amendment XXI repeals Amendment XVIII (alcohol).",
    ),
]


def same_domain_conflict(a: NormativeInstrument, b: NormativeInstrument) -> bool:
    """Whether two instruments regulate the same domain.

    True when either lists the other in ``conflicts_with`` or when their
    subject tags overlap.
    """
    if b.id in a.conflicts_with or a.id in b.conflicts_with:
        return True
    return bool(set(a.subject_tags) & set(b.subject_tags))


def resolve_precedence(ctx: EvalContext) -> list[PrecedenceDecision]:
    """
    Produce precedence decisions for a scenario.

    Emits:
    - Supremacy: one decision per (federal, state) instrument pair in the
      same domain; the federal side always wins
    - Amendment supersession: the fixed pairs in AMENDMENT_SUPERSESSIONS,
      whether or not the scenario mentions them

    Args:
        ctx: Evaluation context for the scenario

    Returns:
        List of PrecedenceDecision in emission order
    """
    decisions = _supremacy_decisions(ctx.facts.instruments)
    decisions.extend(_supersession_decisions())
    return decisions


def _supremacy_decisions(instruments: list[NormativeInstrument]) -> list[PrecedenceDecision]:
    federal = [n for n in instruments if n.level == GovernmentLevel.FEDERAL]
    state = [n for n in instruments if n.level == GovernmentLevel.STATE]

    decisions = []
    for f in federal:
        for s in state:
            if same_domain_conflict(f, s):
                decisions.append(
                    PrecedenceDecision(
                        basis=PrecedenceBasis.SUPREMACY,
                        winning_clause=clauses.ART_VI_SUPREMACY,
                        losing_clause=clauses.CONFLICTING_STATE_NORM,
                        explanation=f"Federal instrument '{f.id}' preempts state instrument '{s.id}'.",
                    )
                )
    return decisions


def _supersession_decisions() -> list[PrecedenceDecision]:
    return [
        PrecedenceDecision(
            basis=PrecedenceBasis.AMENDMENT_SUPERSEDES,
            winning_clause=later,
            losing_clause=earlier,
            explanation=explanation,
        )
        for later, earlier, explanation in AMENDMENT_SUPERSESSIONS
    ]
