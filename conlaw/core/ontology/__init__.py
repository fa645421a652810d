"""Core ontology types for constitutional rule evaluation."""

from .types import (
    ActionType,
    Branch,
    Chamber,
    ClauseKind,
    CommerceBucket,
    EnumeratedPower,
    GovernmentLevel,
    LawType,
    PrecedenceBasis,
    ProceedingType,
    PunishmentType,
    Remedy,
    RuleTarget,
    Scope,
    TaxBase,
    TerritorialApplicability,
    VerdictCode,
    WarState,
)
from .clauses import CLAUSES, ClauseRef, clause_after
from .scenario import (
    Action,
    Citizenship,
    FactBag,
    FactValue,
    GovernmentUnit,
    InstrumentMeta,
    NormativeInstrument,
    Office,
    Person,
    Proceeding,
    Punishment,
    QualificationFacts,
    Scenario,
    ScenarioContext,
    ScenarioFacts,
    Subject,
)
from .profile import (
    CruelUnusualThreshold,
    EqualProtectionTiers,
    InterpretationProfile,
    NecessaryAndProperTest,
    OfficerDefinition,
    ProfileParameters,
    ScrutinyTier,
    SearchReasonablenessMatrix,
)
from .verdict import ClauseResult, EngineVerdict, PrecedenceDecision, VerdictTrace

__all__ = [
    # Types
    "ActionType",
    "Branch",
    "Chamber",
    "ClauseKind",
    "CommerceBucket",
    "EnumeratedPower",
    "GovernmentLevel",
    "LawType",
    "PrecedenceBasis",
    "ProceedingType",
    "PunishmentType",
    "Remedy",
    "RuleTarget",
    "Scope",
    "TaxBase",
    "TerritorialApplicability",
    "VerdictCode",
    "WarState",
    # Clauses
    "CLAUSES",
    "ClauseRef",
    "clause_after",
    # Scenario
    "Action",
    "Citizenship",
    "FactBag",
    "FactValue",
    "GovernmentUnit",
    "InstrumentMeta",
    "NormativeInstrument",
    "Office",
    "Person",
    "Proceeding",
    "Punishment",
    "QualificationFacts",
    "Scenario",
    "ScenarioContext",
    "ScenarioFacts",
    "Subject",
    # Profile
    "CruelUnusualThreshold",
    "EqualProtectionTiers",
    "InterpretationProfile",
    "NecessaryAndProperTest",
    "OfficerDefinition",
    "ProfileParameters",
    "ScrutinyTier",
    "SearchReasonablenessMatrix",
    # Verdict
    "ClauseResult",
    "EngineVerdict",
    "PrecedenceDecision",
    "VerdictTrace",
]
