"""Routes for inspecting rules and interpretation profiles."""

from fastapi import APIRouter, HTTPException

from conlaw.core.ontology import InterpretationProfile
from .models import ProfileInfo, ProfilesListResponse, RuleInfo, RulesListResponse
from .routes_evaluate import get_engine

router = APIRouter(tags=["Rules"])


@router.get("/rules", response_model=RulesListResponse)
async def list_rules(target: str | None = None) -> RulesListResponse:
    """List registered rules in dispatch order.

    Optionally filter by target kind (instrument, action, ...).
    """
    registry = get_engine().registry

    rule_infos = [
        RuleInfo(rule_id=rule.id, clause=rule.clause, target=rule.target, position=i)
        for i, rule in enumerate(registry)
        if target is None or rule.target.value == target
    ]
    return RulesListResponse(rules=rule_infos, total=len(rule_infos))


@router.get("/rules/{rule_id}", response_model=RuleInfo)
async def get_rule(rule_id: str) -> RuleInfo:
    """Get information about a specific rule."""
    registry = get_engine().registry
    rule = registry.get(rule_id)

    if rule is None:
        raise HTTPException(status_code=404, detail=f"Rule not found: {rule_id}")

    return RuleInfo(
        rule_id=rule.id,
        clause=rule.clause,
        target=rule.target,
        position=registry.ids().index(rule.id),
    )


@router.get("/profiles", response_model=ProfilesListResponse)
async def list_profiles() -> ProfilesListResponse:
    """List loaded interpretation profiles."""
    profiles = get_engine().profiles
    infos = [ProfileInfo(id=p.id, label=p.label) for p in profiles.values()]
    return ProfilesListResponse(profiles=infos, total=len(infos))


@router.get("/profiles/{profile_id}", response_model=InterpretationProfile)
async def get_profile(profile_id: str) -> InterpretationProfile:
    """Get a profile with all of its parameters."""
    profile = get_engine().profiles.get(profile_id)

    if profile is None:
        raise HTTPException(status_code=404, detail=f"Profile not found: {profile_id}")

    return profile
