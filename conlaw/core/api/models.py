"""Pydantic models for API responses.

Scenarios and verdicts are served as the ontology models themselves; the
models here describe the inspection endpoints.
"""

from pydantic import BaseModel

from conlaw.core.ontology import ClauseRef, RuleTarget


# =============================================================================
# Rule Models
# =============================================================================


class RuleInfo(BaseModel):
    """Summary information about a registered rule."""

    rule_id: str
    clause: ClauseRef
    target: RuleTarget
    position: int


class RulesListResponse(BaseModel):
    """Response listing registered rules in dispatch order."""

    rules: list[RuleInfo]
    total: int


# =============================================================================
# Profile Models
# =============================================================================


class ProfileInfo(BaseModel):
    """Summary information about an interpretation profile."""

    id: str
    label: str | None


class ProfilesListResponse(BaseModel):
    profiles: list[ProfileInfo]
    total: int
