"""Tests for the HTTP API."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from conlaw.rule_service import RuleEngine

from conftest import FEDERAL_AGENCY, action, instrument


# =============================================================================
# Test Client Setup
# =============================================================================

@pytest.fixture
def client(engine: RuleEngine):
    """Create test client with the shared engine installed."""
    from conlaw.core.api import routes_evaluate
    from conlaw.main import create_app

    # Save original state
    original_engine = routes_evaluate._engine

    routes_evaluate._engine = engine

    with TestClient(create_app()) as client:
        yield client

    # Restore original state
    routes_evaluate._engine = original_engine


def payload(profile_id: str = "mainstream_2024", **facts) -> dict:
    return {"id": "sc_api", "profile_id": profile_id, "facts": facts}


# =============================================================================
# Root Endpoints
# =============================================================================

class TestRootEndpoints:
    def test_root(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "evaluate" in data["endpoints"]

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


# =============================================================================
# Evaluation
# =============================================================================

class TestEvaluate:
    def test_evaluate_valid_statute(self, client: TestClient):
        response = client.post(
            "/evaluate",
            json=payload(instruments=[instrument()], context={"commerce_bucket": "interstate"}),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "CONSTITUTIONAL"
        assert data["remedies"] == ["no_action"]
        first = data["trace"]["evaluated_rules"][0]
        assert first["pass"] is True
        assert first["rule_id"] == "R-ArtI-§7-BicameralismPresentment"
        assert data["trace"]["precedence_steps"][0]["basis"] == "AmendmentSupersedes"

    def test_evaluate_structural_failure(self, client: TestClient):
        n = instrument(meta={"house_passage": False, "senate_passage": True, "presented_to_president": True})
        response = client.post("/evaluate", json=payload(instruments=[n]))
        assert response.status_code == 200
        assert response.json()["code"] == "STRUCTURALLY_INVALID"

    def test_evaluate_empty_scenario(self, client: TestClient):
        response = client.post("/evaluate", json=payload())
        assert response.status_code == 200
        assert response.json()["code"] == "INSUFFICIENT_FACTS"

    def test_evaluate_unknown_profile(self, client: TestClient):
        response = client.post("/evaluate", json=payload("nope", instruments=[instrument()]))
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_evaluate_invalid_scenario(self, client: TestClient):
        response = client.post("/evaluate", json=payload(actions=[action("NotAnAction")]))
        assert response.status_code == 422

    def test_evaluate_search(self, client: TestClient):
        search = action(
            "SearchSeizure",
            actor=FEDERAL_AGENCY,
            warrant=True,
            probability_of_illegality=0.2,
            warrant_particularity=True,
        )
        response = client.post("/evaluate", json=payload(actions=[search]))
        data = response.json()
        assert data["code"] == "UNCONSTITUTIONAL"
        assert data["scope"] == "as_applied"
        [result] = data["trace"]["evaluated_rules"]
        assert result["metrics"]["probable_cause_threshold"] == 0.5


# =============================================================================
# Rules and Profiles
# =============================================================================

class TestRulesEndpoints:
    def test_list_rules(self, client: TestClient, engine: RuleEngine):
        response = client.get("/rules")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(engine.registry)
        assert [r["rule_id"] for r in data["rules"]] == engine.registry.ids()

    def test_filter_by_target(self, client: TestClient):
        response = client.get("/rules", params={"target": "office"})
        data = response.json()
        assert {r["target"] for r in data["rules"]} == {"office"}
        assert data["total"] == 2

    def test_get_rule(self, client: TestClient):
        response = client.get("/rules/R-AmendIV-SearchSeizure")
        assert response.status_code == 200
        data = response.json()
        assert data["clause"]["id"] == "Amend.IV"
        assert data["target"] == "action"

    def test_get_unknown_rule(self, client: TestClient):
        response = client.get("/rules/R-Nope")
        assert response.status_code == 404


class TestProfilesEndpoints:
    def test_list_profiles(self, client: TestClient):
        response = client.get("/profiles")
        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["profiles"]]
        assert ids == ["mainstream_2024", "originalist_strict"]

    def test_get_profile(self, client: TestClient):
        response = client.get("/profiles/originalist_strict")
        assert response.status_code == 200
        assert response.json()["parameters"]["probable_cause_threshold"] == 0.6

    def test_get_unknown_profile(self, client: TestClient):
        response = client.get("/profiles/nope")
        assert response.status_code == 404


class TestEngineFactory:
    def test_pinned_evaluation_date(self, monkeypatch):
        from conlaw.core.api import routes_evaluate
        from conlaw.core.config import get_settings

        monkeypatch.setenv("CONLAW_EVALUATION_DATE", "2001-09-11")
        get_settings.cache_clear()
        monkeypatch.setattr(routes_evaluate, "_engine", None)
        monkeypatch.setattr(routes_evaluate, "_loader", None)
        try:
            engine = routes_evaluate.get_engine()
            assert engine.clock() == date(2001, 9, 11)
            assert "mainstream_2024" in engine.profiles
        finally:
            get_settings.cache_clear()
