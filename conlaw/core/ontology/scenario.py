"""Scenario model: the fact pattern a rule registry is evaluated against.

A scenario bundles independent, optional sequences of subjects
(instruments, actions, proceedings, punishments, offices) together with
persons and a free-form context record. Every subject carries an open fact
bag whose keys are defined by the rules that read them.

Example:
    {
        "id": "sc_001",
        "profile_id": "mainstream_2024",
        "facts": {
            "instruments": [{
                "id": "hr_1",
                "level": "federal",
                "type": "statute",
                "enacted_on": "2023-03-01",
                "enacted_by": {"id": "congress", "name": "Congress", "level": "federal"},
                "meta": {"house_passage": false, "senate_passage": true}
            }]
        }
    }
"""

from __future__ import annotations

from datetime import date
from typing import Any, Union

from pydantic import BaseModel, Field

from .types import (
    ActionType,
    Branch,
    Chamber,
    CommerceBucket,
    EnumeratedPower,
    GovernmentLevel,
    LawType,
    ProceedingType,
    PunishmentType,
    TaxBase,
    TerritorialApplicability,
    WarState,
)


# Closed set of values a fact bag may hold. Lists are tag sets.
FactValue = Union[bool, int, float, date, str, list[str], None]
FactBag = dict[str, FactValue]


# =============================================================================
# Actors
# =============================================================================

class GovernmentUnit(BaseModel):
    """A body of government (legislature, agency, court)."""

    id: str
    name: str
    level: GovernmentLevel
    branch: Branch | None = None
    chamber_of_origin: Chamber | None = None


class Citizenship(BaseModel):
    """Citizenship facts about a person."""

    status: str | None = Field(None, description="'citizen', 'noncitizen' or 'national'")
    by_birth: bool | None = None
    naturalized_on: date | None = None
    state_residencies: list[str] = Field(default_factory=list)


class Person(BaseModel):
    """A natural person appearing in the scenario."""

    id: str
    age: int | None = None
    citizenship: Citizenship | None = None
    classes: list[str] = Field(default_factory=list)


# =============================================================================
# Subjects
# =============================================================================

class Subject(BaseModel):
    """Base for anything a rule can judge.

    ``facts`` holds rule-specific keys. They are not validated globally;
    each rule reads the keys it understands through :meth:`fact`.
    """

    facts: FactBag = Field(default_factory=dict)

    def fact(self, key: str, default: Any = None) -> Any:
        """Get a fact bag value, returning ``default`` when absent or None."""
        value = self.facts.get(key)
        return default if value is None else value

    def has_fact(self, key: str) -> bool:
        """Check if a fact is present and not None."""
        return self.facts.get(key) is not None


class InstrumentMeta(BaseModel):
    """Enactment-process facts used by structural gates."""

    house_passage: bool | None = None
    senate_passage: bool | None = None
    presented_to_president: bool | None = None
    chamber_of_origin: Chamber | None = None


class NormativeInstrument(Subject):
    """A statute, regulation, treaty or other enacted norm."""

    id: str
    level: GovernmentLevel
    type: LawType
    title: str | None = None
    text_uri: str | None = None
    enacted_on: date
    enacted_by: GovernmentUnit
    subject_tags: list[str] = Field(default_factory=list)
    enum_power_claims: list[EnumeratedPower] = Field(default_factory=list)
    meta: InstrumentMeta = Field(default_factory=InstrumentMeta)
    conflicts_with: list[str] = Field(
        default_factory=list,
        description="IDs of other instruments this one is known to conflict with",
    )

    @property
    def is_federal(self) -> bool:
        return self.level == GovernmentLevel.FEDERAL

    def has_tag(self, tag: str) -> bool:
        return tag in self.subject_tags

    def claims_power(self, power: EnumeratedPower) -> bool:
        return power in self.enum_power_claims


class Action(Subject):
    """A discrete act by a government unit or person."""

    id: str
    actor: GovernmentUnit | Person = Field(..., union_mode="left_to_right")
    date: date
    action_type: ActionType

    @property
    def actor_level(self) -> GovernmentLevel | None:
        """Government level of the actor, or None for private persons."""
        return getattr(self.actor, "level", None)


class Proceeding(Subject):
    """A judicial or quasi-judicial proceeding."""

    id: str
    type: ProceedingType
    forum: GovernmentUnit
    jury_size: int | None = None
    jury_unanimity_required: bool | None = None
    public_access: bool | str | None = None
    counsel_provided: bool | None = None
    steps_completed: list[str] = Field(default_factory=list)
    duration_days_accusation_to_trial: int | None = None
    compelled_testimony_without_immunity: bool | None = None


class Punishment(Subject):
    """A sanction imposed on a person."""

    id: str | None = None
    type: PunishmentType
    severity_score_0_100: float | None = None
    unusualness_percentile_0_100: float | None = None
    fine_amount_usd: float | None = None
    bail_amount_usd: float | None = None


class QualificationFacts(BaseModel):
    """Eligibility facts about an office holder."""

    age: int | None = None
    years_citizen: int | None = None
    residency_state: str | None = None
    natural_born: bool | None = None


class Office(Subject):
    """A public office and facts about its holder."""

    id: str
    title: str
    unit: GovernmentUnit
    term_start: date | None = None
    term_end: date | None = None
    qualification_facts: QualificationFacts = Field(default_factory=QualificationFacts)
    oath_taken: bool | None = None
    holder_id: str | None = None
    elections_won_count: int | None = None
    years_served_if_succeeded: float | None = None


# =============================================================================
# Scenario
# =============================================================================

class ScenarioContext(BaseModel):
    """Free-form context shared by every subject in the scenario."""

    commerce_bucket: CommerceBucket | None = None
    tax_base: TaxBase | None = None
    war_state: WarState | None = None
    territorial_applicability: TerritorialApplicability | None = None


class ScenarioFacts(BaseModel):
    """Evidentiary facts grouped by kind. Every sequence is optional."""

    instruments: list[NormativeInstrument] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    proceedings: list[Proceeding] = Field(default_factory=list)
    punishments: list[Punishment] = Field(default_factory=list)
    persons: list[Person] = Field(default_factory=list)
    offices: list[Office] = Field(default_factory=list)
    context: ScenarioContext = Field(default_factory=ScenarioContext)


class Scenario(BaseModel):
    """Input scenario for constitutional evaluation."""

    id: str
    profile_id: str = Field(..., description="Interpretation profile to judge under")
    facts: ScenarioFacts = Field(default_factory=ScenarioFacts)
