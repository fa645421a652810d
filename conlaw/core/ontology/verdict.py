"""Result and verdict models produced by an evaluation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .clauses import ClauseRef
from .types import PrecedenceBasis, Remedy, Scope, VerdictCode


class ClauseResult(BaseModel):
    """One rule's judgment of one subject.

    ``passed`` is serialized as ``pass`` and is true exactly when the
    result is CONSTITUTIONAL.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, serialize_by_alias=True)

    clause: ClauseRef
    rule_id: str
    result: VerdictCode
    passed: bool = Field(..., alias="pass")
    notes: str | None = None
    facts_used: list[str] = Field(default_factory=list)
    profile_parameters_used: list[str] = Field(default_factory=list)
    metrics: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _pass_matches_result(self) -> ClauseResult:
        if self.passed != (self.result == VerdictCode.CONSTITUTIONAL):
            raise ValueError(
                f"pass={self.passed} is inconsistent with result {self.result.value}"
            )
        return self

    @classmethod
    def of(
        cls,
        clause: ClauseRef,
        rule_id: str,
        result: VerdictCode,
        notes: str | None = None,
        **extra: Any,
    ) -> ClauseResult:
        """Build a result, deriving ``pass`` from ``result``."""
        return cls(
            clause=clause,
            rule_id=rule_id,
            result=result,
            passed=result == VerdictCode.CONSTITUTIONAL,
            notes=notes,
            **extra,
        )


class PrecedenceDecision(BaseModel):
    """Record of which authority prevails in a detected conflict."""

    model_config = ConfigDict(frozen=True)

    basis: PrecedenceBasis
    winning_clause: ClauseRef
    losing_clause: ClauseRef
    explanation: str | None = None


class VerdictTrace(BaseModel):
    """Everything that went into a verdict."""

    evaluated_rules: list[ClauseResult] = Field(default_factory=list)
    precedence_steps: list[PrecedenceDecision] = Field(default_factory=list)
    # Reserved; not populated yet.
    structural_gates: list[str] = Field(default_factory=list)
    unresolved_facts: list[str] = Field(default_factory=list)


class EngineVerdict(BaseModel):
    """Aggregated outcome of evaluating one scenario."""

    code: VerdictCode
    conclusion: str
    trace: VerdictTrace
    remedies: list[Remedy] | None = None
    scope: Scope | None = None
