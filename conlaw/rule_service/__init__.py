"""Rule service - dispatch, precedence resolution, aggregation and profile loading."""

from .aggregator import aggregate
from .engine import RuleEngine, RuleOutcome, rule_error_result, run_rule
from .loader import ProfileLoader, pick_profile
from .precedence import AMENDMENT_SUPERSESSIONS, resolve_precedence, same_domain_conflict

__all__ = [
    # Engine
    "RuleEngine",
    "RuleOutcome",
    "run_rule",
    "rule_error_result",
    # Precedence
    "resolve_precedence",
    "same_domain_conflict",
    "AMENDMENT_SUPERSESSIONS",
    # Aggregation
    "aggregate",
    # Profiles
    "ProfileLoader",
    "pick_profile",
]
