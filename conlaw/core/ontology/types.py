"""Core enumerations for constitutional rule evaluation.

This module defines the closed vocabularies the engine and the rule
catalog speak in:
- Government structure (levels, branches, law types)
- Fact-pattern categories (proceedings, punishments, actions)
- Verdict codes, precedence bases, remedies and scopes
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Government Structure
# =============================================================================

class GovernmentLevel(str, Enum):
    """Level of government that enacted a norm or took an action."""

    FEDERAL = "federal"
    STATE = "state"
    TERRITORY = "territory"
    DISTRICT = "district"
    LOCAL = "local"


class Branch(str, Enum):
    """Branch of government."""

    LEGISLATIVE = "legislative"
    EXECUTIVE = "executive"
    JUDICIAL = "judicial"
    OTHER = "other"


class Chamber(str, Enum):
    """Chamber of Congress where a bill originated."""

    HOUSE = "House of Representatives"
    SENATE = "Senate"


class LawType(str, Enum):
    """Types of normative instruments."""

    STATUTE = "statute"
    RESOLUTION = "resolution"
    TREATY = "treaty"
    REGULATION = "regulation"
    EXECUTIVE_ORDER = "executive_order"
    STATE_CONSTITUTION = "state_constitution"
    ORDINANCE = "ordinance"
    COURT_RULE = "court_rule"
    CONSTITUTIONAL_AMENDMENT = "constitutional_amendment"


class EnumeratedPower(str, Enum):
    """Article I powers an instrument may claim as its authority."""

    TAX = "Tax"
    BORROW = "Borrow"
    COMMERCE = "Commerce"
    NATURALIZATION_BANKRUPTCY = "NaturalizationBankruptcy"
    COIN_MONEY = "CoinMoney"
    COUNTERFEITING = "Counterfeiting"
    POST_OFFICE = "PostOffice"
    IP_PROGRESS = "IPProgress"
    INFERIOR_TRIBUNALS = "InferiorTribunals"
    PIRACY_FELONIES_HIGH_SEAS = "PiracyFeloniesHighSeas"
    DECLARE_WAR = "DeclareWar"
    MARQUE_REPRISAL = "MarqueReprisal"
    ARMY = "Army"
    NAVY = "Navy"
    RULES_OF_FORCES = "RulesOfForces"
    MILITIA_CALL_FORTH = "MilitiaCallForth"
    MILITIA_ORGANIZE = "MilitiaOrganize"
    SEAT_OF_GOVERNMENT = "SeatOfGovernment"
    NECESSARY_AND_PROPER = "NP"


# =============================================================================
# Fact-Pattern Categories
# =============================================================================

class ProceedingType(str, Enum):
    """Types of legal proceedings."""

    CRIMINAL = "criminal"
    CIVIL = "civil"
    IMPEACHMENT = "impeachment"
    BANKRUPTCY = "bankruptcy"
    MILITARY = "military"
    ADMINISTRATIVE = "administrative"


class PunishmentType(str, Enum):
    """Types of punishment imposed by the state."""

    FINE = "fine"
    IMPRISONMENT = "imprisonment"
    DEATH = "death"
    FORFEITURE = "forfeiture"
    BANISHMENT = "banishment"
    PROBATION = "probation"
    CORPORAL = "corporal"


class ActionType(str, Enum):
    """Types of government action a scenario may describe."""

    SEARCH_SEIZURE = "SearchSeizure"
    EXPRESSION_REGULATION = "ExpressionRegulation"
    RELIGIOUS_REGULATION = "ReligiousRegulation"
    ARMS_REGULATION = "ArmsRegulation"
    QUARTERING = "Quartering"
    PROPERTY_TAKING = "PropertyTaking"
    CRIMINAL_CHARGE = "CriminalCharge"
    BAIL_SETTING = "BailSetting"
    FINE_IMPOSITION = "FineImposition"
    VOTING_REGULATION = "VotingRegulation"
    BALLOT_ACCESS_REGULATION = "BallotAccessRegulation"
    DISTRICTING = "Districting"
    MILITARY_DRAFT = "MilitaryDraft"
    MILITIA_CALL = "MilitiaCall"
    WAR_DECLARATION = "WarDeclaration"
    TAX_COLLECTION = "TaxCollection"
    APPOINTMENT = "Appointment"
    REMOVAL = "Removal"
    IMPEACHMENT = "Impeachment"
    TREATY_CONCLUSION = "TreatyConclusion"
    NATURALIZATION_DECISION = "NaturalizationDecision"
    BANKRUPTCY_ORDER = "BankruptcyOrder"
    VACANCY = "Vacancy"
    PRESIDENTIAL_DISABILITY = "PresidentialDisability"


class CommerceBucket(str, Enum):
    """Categories of commerce Congress may regulate."""

    CHANNELS = "channels"
    INSTRUMENTALITIES = "instrumentalities"
    SUBSTANTIAL_EFFECTS = "substantial_effects"
    FOREIGN = "foreign"
    INTERSTATE = "interstate"
    INDIAN = "indian"


class TaxBase(str, Enum):
    """What a tax is levied on."""

    INCOME = "income"
    PROPERTY = "property"
    CAPITATION = "capitation"
    IMPORTS = "imports"
    OTHER = "other"


class WarState(str, Enum):
    """State of hostilities at the time of the scenario."""

    NONE = "none"
    DECLARED_WAR = "declared_war"
    AUTHORIZED_FORCE = "authorized_force"
    EMERGENCY = "emergency"


class TerritorialApplicability(str, Enum):
    """Where the challenged norm or action applies."""

    STATES = "states"
    DISTRICT = "district"
    TERRITORIES = "territories"
    MILITARY_BASE = "military_base"
    HIGH_SEAS = "high_seas"
    FOREIGN = "foreign"


# =============================================================================
# Clauses
# =============================================================================

class ClauseKind(str, Enum):
    """Whether a clause lives in an Article or an Amendment."""

    ARTICLE = "Article"
    AMENDMENT = "Amendment"


# =============================================================================
# Rule Targets
# =============================================================================

class RuleTarget(str, Enum):
    """Kind of subject a rule judges."""

    INSTRUMENT = "instrument"
    ACTION = "action"
    PROCEEDING = "proceeding"
    OFFICE = "office"
    PUNISHMENT = "punishment"


# =============================================================================
# Verdicts
# =============================================================================

class VerdictCode(str, Enum):
    """Outcome codes for clause results and engine verdicts.

    PREEMPTED_BY_SUPREMACY and AMENDMENT_SUPERSEDES are reserved for
    precedence annotation and are never assigned by the aggregator.
    """

    CONSTITUTIONAL = "CONSTITUTIONAL"
    UNCONSTITUTIONAL = "UNCONSTITUTIONAL"
    PARTIAL = "PARTIAL"
    PREEMPTED_BY_SUPREMACY = "PREEMPTED_BY_SUPREMACY"
    STRUCTURALLY_INVALID = "STRUCTURALLY_INVALID"
    AMENDMENT_SUPERSEDES = "AMENDMENT_SUPERSEDES"
    NONJUSTICIABLE = "NONJUSTICIABLE"
    INSUFFICIENT_FACTS = "INSUFFICIENT_FACTS"


class PrecedenceBasis(str, Enum):
    """Doctrine used to resolve a conflict between two authorities."""

    AMENDMENT_SUPERSEDES = "AmendmentSupersedes"
    SUPREMACY = "Supremacy"
    SPECIFIC_OVER_GENERAL = "SpecificOverGeneral"
    RIGHTS_OVER_POWERS = "RightsOverPowers"
    EXPLICIT_REPEAL = "ExplicitRepeal"
    TEMPORAL_LATEST = "TemporalLatest"
    STRUCTURAL_GATE = "StructuralGate"


class Remedy(str, Enum):
    """Remedies a verdict may suggest."""

    INVALIDATE_NORM = "invalidate_norm"
    ENJOIN_ACTION = "enjoin_action"
    SEVER_PROVISION = "sever_provision"
    NARROW_CONSTRUCTION = "narrow_construction"
    REMAND_FOR_FACTS = "remand_for_facts"
    NO_ACTION = "no_action"


class Scope(str, Enum):
    """Reach of a verdict."""

    AS_APPLIED = "as_applied"
    FACIAL = "facial"
