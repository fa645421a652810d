"""Verdict aggregation.

Reduces every clause result and precedence decision into a single
EngineVerdict. The checks run as an ordered priority chain; the first
match decides the code:

1. any STRUCTURALLY_INVALID            -> STRUCTURALLY_INVALID
2. any UNCONSTITUTIONAL and any CONSTITUTIONAL -> PARTIAL
3. any UNCONSTITUTIONAL                -> UNCONSTITUTIONAL
4. all INSUFFICIENT_FACTS (or none)    -> INSUFFICIENT_FACTS
5. otherwise                           -> CONSTITUTIONAL

NONJUSTICIABLE results are not branched on. A scenario whose results are
all NONJUSTICIABLE lands in branch 5.
"""

from __future__ import annotations

from conlaw.core.ontology import (
    ClauseResult,
    EngineVerdict,
    PrecedenceDecision,
    Remedy,
    Scope,
    VerdictCode,
    VerdictTrace,
)


def aggregate(
    results: list[ClauseResult],
    decisions: list[PrecedenceDecision],
) -> EngineVerdict:
    """Aggregate clause results and precedence decisions into a verdict."""
    trace = VerdictTrace(
        evaluated_rules=list(results),
        precedence_steps=list(decisions),
        structural_gates=[],
        unresolved_facts=[],
    )
    codes = {r.result for r in results}

    if VerdictCode.STRUCTURALLY_INVALID in codes:
        return EngineVerdict(
            code=VerdictCode.STRUCTURALLY_INVALID,
            conclusion="One or more structural gates failed.",
            trace=trace,
            remedies=[Remedy.INVALIDATE_NORM],
        )

    any_unconstitutional = VerdictCode.UNCONSTITUTIONAL in codes
    any_constitutional = VerdictCode.CONSTITUTIONAL in codes

    if any_unconstitutional and any_constitutional:
        return EngineVerdict(
            code=VerdictCode.PARTIAL,
            conclusion="Some rules passed; others failed. Consider severability.",
            trace=trace,
            remedies=[Remedy.SEVER_PROVISION],
            scope=Scope.AS_APPLIED,
        )

    if any_unconstitutional:
        return EngineVerdict(
            code=VerdictCode.UNCONSTITUTIONAL,
            conclusion="One or more controlling rights/power rules failed.",
            trace=trace,
            remedies=[Remedy.ENJOIN_ACTION],
            scope=Scope.AS_APPLIED,
        )

    if all(r.result == VerdictCode.INSUFFICIENT_FACTS for r in results):
        return EngineVerdict(
            code=VerdictCode.INSUFFICIENT_FACTS,
            conclusion="Insufficient facts across controlling rules.",
            trace=trace,
            remedies=[Remedy.REMAND_FOR_FACTS],
        )

    return EngineVerdict(
        code=VerdictCode.CONSTITUTIONAL,
        conclusion="All controlling rules passed (subject to recorded precedence steps).",
        trace=trace,
        remedies=[Remedy.NO_ACTION],
    )
