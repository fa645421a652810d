"""Pytest fixtures for test suite."""

from datetime import date
from pathlib import Path
from typing import Any

import pytest

from conlaw.core.config import DEFAULT_PROFILES_PATH
from conlaw.core.ontology import (
    Action,
    GovernmentUnit,
    InterpretationProfile,
    NormativeInstrument,
    Scenario,
)
from conlaw.rule_service import ProfileLoader, RuleEngine
from conlaw.rules import EvalContext, RuleRegistry, default_registry

FIXED_DATE = date(2024, 6, 1)


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def profiles_path() -> Path:
    """Path to the shipped interpretation profiles."""
    return DEFAULT_PROFILES_PATH


@pytest.fixture
def profile_loader(profiles_path: Path) -> ProfileLoader:
    """Profile loader with the shipped profiles loaded."""
    loader = ProfileLoader(profiles_path)
    loader.load()
    return loader


@pytest.fixture
def profiles(profile_loader: ProfileLoader) -> dict[str, InterpretationProfile]:
    return profile_loader.as_mapping()


@pytest.fixture
def profile(profiles: dict[str, InterpretationProfile]) -> InterpretationProfile:
    """The mainstream profile."""
    return profiles["mainstream_2024"]


@pytest.fixture
def registry() -> RuleRegistry:
    return default_registry()


@pytest.fixture
def engine(profiles: dict[str, InterpretationProfile], registry: RuleRegistry) -> RuleEngine:
    """Engine with shipped profiles and a fixed clock."""
    return RuleEngine(profiles, registry=registry, clock=lambda: FIXED_DATE)


@pytest.fixture
def make_context(profile: InterpretationProfile):
    """Build an EvalContext for a scenario under the mainstream profile."""

    def _make(scenario: Scenario, under: InterpretationProfile | None = None) -> EvalContext:
        return EvalContext(scenario=scenario, profile=under or profile, current_date=FIXED_DATE)

    return _make


# =============================================================================
# Scenario Builders
# =============================================================================


CONGRESS = {"id": "congress", "name": "Congress", "level": "federal", "branch": "legislative"}
STATE_LEGISLATURE = {"id": "ca_leg", "name": "California Legislature", "level": "state", "branch": "legislative"}
STATE_POLICE = {"id": "ca_police", "name": "California Highway Patrol", "level": "state", "branch": "executive"}
FEDERAL_AGENCY = {"id": "fbi", "name": "FBI", "level": "federal", "branch": "executive"}


def instrument(id: str = "hr_1", **overrides: Any) -> dict:
    """A valid federal statute that passes every structural gate."""
    data = {
        "id": id,
        "level": "federal",
        "type": "statute",
        "enacted_on": "2023-03-01",
        "enacted_by": CONGRESS,
        "enum_power_claims": ["Commerce"],
        "meta": {
            "house_passage": True,
            "senate_passage": True,
            "presented_to_president": True,
        },
    }
    data.update(overrides)
    return data


def state_instrument(id: str = "ca_1", **overrides: Any) -> dict:
    data = {
        "id": id,
        "level": "state",
        "type": "statute",
        "enacted_on": "2022-01-01",
        "enacted_by": STATE_LEGISLATURE,
    }
    data.update(overrides)
    return data


def action(action_type: str, id: str = "act_1", actor: dict | None = None, **facts: Any) -> dict:
    return {
        "id": id,
        "actor": actor or STATE_POLICE,
        "date": "2024-01-15",
        "action_type": action_type,
        "facts": facts,
    }


def scenario(profile_id: str = "mainstream_2024", id: str = "sc_test", **facts: Any) -> Scenario:
    """Build a Scenario from fact-group keyword arguments."""
    return Scenario.model_validate({"id": id, "profile_id": profile_id, "facts": facts})


@pytest.fixture
def valid_statute_scenario() -> Scenario:
    """A federal commerce statute enacted by the full process."""
    return scenario(
        instruments=[instrument()],
        context={"commerce_bucket": "interstate"},
    )


@pytest.fixture
def federal_instrument() -> NormativeInstrument:
    return NormativeInstrument.model_validate(instrument())


@pytest.fixture
def state_action() -> Action:
    return Action.model_validate(action("SearchSeizure"))


@pytest.fixture
def congress() -> GovernmentUnit:
    return GovernmentUnit.model_validate(CONGRESS)
