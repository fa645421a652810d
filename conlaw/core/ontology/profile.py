"""Interpretation profiles.

A profile is a named bundle of thresholds and class lists that
parameterize how rules judge open-textured standards (probable cause,
scrutiny tiers, excessive bail) without changing rule code.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .types import CommerceBucket


class SearchReasonablenessMatrix(BaseModel):
    """Fourth Amendment warrant defaults and recognized exceptions."""

    model_config = ConfigDict(frozen=True)

    warrant_required_default: bool | None = None
    exceptions: list[str] = Field(default_factory=list)


class CruelUnusualThreshold(BaseModel):
    """Minimum severity and unusualness for a punishment to be cruel and unusual.

    A punishment is never below an unset bound.
    """

    model_config = ConfigDict(frozen=True)

    severity_min: float | None = None
    unusualness_percentile_min: float | None = None


class ScrutinyTier(BaseModel):
    """Classes that trigger a given level of equal-protection scrutiny."""

    model_config = ConfigDict(frozen=True)

    classes: list[str] = Field(default_factory=list)
    test: Literal["strict", "intermediate", "rational"]


class EqualProtectionTiers(BaseModel):
    model_config = ConfigDict(frozen=True)

    suspect: ScrutinyTier
    quasi_suspect: ScrutinyTier
    other: ScrutinyTier


class OfficerDefinition(BaseModel):
    """What makes a position an 'Officer of the United States'."""

    model_config = ConfigDict(frozen=True)

    continuous_duties: bool | None = None
    significant_authority: bool | None = None


class NecessaryAndProperTest(BaseModel):
    """Prongs of the Necessary and Proper test, as this profile reads them.

    An unset prong counts as not satisfied.
    """

    model_config = ConfigDict(frozen=True)

    plainly_adapted: bool | None = None
    not_prohibited: bool | None = None
    within_scope_of_end: bool | None = None


class ProfileParameters(BaseModel):
    """Known profile options.

    Every option is optional; rules fall back to their own defaults when a
    profile is silent. Unknown keys are kept so new rules can read options
    without a model change.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    incorporation: Literal["selective", "total"] | None = None
    incorporation_map: dict[str, bool] | None = None
    probable_cause_threshold: float | None = None
    search_reasonableness_matrix: SearchReasonablenessMatrix | None = None
    speedy_trial_max_days: int | None = None
    public_trial_visibility_minimum: bool | str | None = None
    excessive_bail_multiplier_vs_max_fine: float | None = None
    excessive_fine_multiplier_vs_harm: float | None = None
    cruel_unusual_threshold: CruelUnusualThreshold | None = None
    takings_public_use_required: bool | None = None
    speech_unprotected_categories: list[str] = Field(default_factory=list)
    speech_content_neutrality_required: bool | None = None
    arms_bearable_categories: list[str] = Field(default_factory=list)
    commerce_categories_enabled: list[CommerceBucket] = Field(default_factory=list)
    equal_protection_tiers: EqualProtectionTiers | None = None
    strict_test_requirements: list[str] = Field(default_factory=list)
    intermediate_test_requirements: list[str] = Field(default_factory=list)
    rational_basis_requirements: list[str] = Field(default_factory=list)
    substantive_due_process_catalog: list[str] = Field(default_factory=list)
    due_process_procedural_minima: list[str] = Field(default_factory=list)
    appointments_definition_officer_us: OfficerDefinition | None = None
    necessary_and_proper_test: NecessaryAndProperTest | None = None


class InterpretationProfile(BaseModel):
    """A named interpretation profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None
    parameters: ProfileParameters = Field(default_factory=ProfileParameters)
