"""Tests for ontology models."""

from datetime import date

import pytest
from pydantic import ValidationError

from conlaw.core.ontology import (
    Action,
    ClauseKind,
    ClauseResult,
    GovernmentLevel,
    InterpretationProfile,
    NormativeInstrument,
    Person,
    ProfileParameters,
    Scenario,
    Subject,
    VerdictCode,
    clause_after,
)
from conlaw.core.ontology import clauses

from conftest import action, instrument


class TestClauses:
    def test_article_clauses_share_original_ratification(self):
        assert clauses.ART_I_8_COMMERCE.kind == ClauseKind.ARTICLE
        assert clauses.ART_I_8_COMMERCE.ratified_on == date(1788, 6, 21)

    def test_bill_of_rights_ratification(self):
        assert clauses.AMEND_IV.kind == ClauseKind.AMENDMENT
        assert clauses.AMEND_IV.ratified_on == date(1791, 12, 15)

    def test_clause_after(self):
        assert clause_after(clauses.AMEND_XXI, clauses.AMEND_XVIII)
        assert not clause_after(clauses.AMEND_XVIII, clauses.AMEND_XXI)

    def test_clause_refs_are_frozen(self):
        with pytest.raises(ValidationError):
            clauses.AMEND_I.title = "Changed"

    def test_engine_clause_exists(self):
        assert clauses.ENGINE.id == "Engine"


class TestScenario:
    def test_empty_scenario_has_empty_sequences(self):
        scenario = Scenario(id="sc", profile_id="mainstream_2024")
        assert scenario.facts.instruments == []
        assert scenario.facts.actions == []
        assert scenario.facts.offices == []
        assert scenario.facts.context.commerce_bucket is None

    def test_instrument_from_dict(self):
        n = NormativeInstrument.model_validate(instrument(subject_tags=["raise_revenue"]))
        assert n.is_federal
        assert n.has_tag("raise_revenue")
        assert n.enacted_on == date(2023, 3, 1)
        assert n.meta.house_passage is True

    def test_instrument_meta_defaults_to_unknown(self):
        data = instrument()
        del data["meta"]
        n = NormativeInstrument.model_validate(data)
        assert n.meta.house_passage is None

    def test_action_actor_government_unit(self):
        a = Action.model_validate(action("SearchSeizure"))
        assert a.actor_level == GovernmentLevel.STATE

    def test_action_actor_person(self):
        a = Action.model_validate(action("SearchSeizure", actor={"id": "p1", "age": 40}))
        assert isinstance(a.actor, Person)
        assert a.actor_level is None

    def test_fact_bag_lookup(self):
        subject = Subject(facts={"warrant": True, "exception": None})
        assert subject.fact("warrant") is True
        assert subject.fact("exception", "none") == "none"
        assert subject.fact("missing", 3) == 3
        assert subject.has_fact("warrant")
        assert not subject.has_fact("exception")

    def test_fact_bag_rejects_nested_objects(self):
        with pytest.raises(ValidationError):
            Subject(facts={"nested": {"a": 1}})

    def test_invalid_action_type_rejected(self):
        with pytest.raises(ValidationError):
            Action.model_validate(action("NotAnAction"))


class TestClauseResult:
    def test_pass_derived_from_result(self):
        ok = ClauseResult.of(clauses.AMEND_I, "R-1", VerdictCode.CONSTITUTIONAL)
        bad = ClauseResult.of(clauses.AMEND_I, "R-1", VerdictCode.UNCONSTITUTIONAL, "nope")
        assert ok.passed is True
        assert bad.passed is False
        assert bad.notes == "nope"

    def test_inconsistent_pass_rejected(self):
        with pytest.raises(ValidationError):
            ClauseResult(
                clause=clauses.AMEND_I,
                rule_id="R-1",
                result=VerdictCode.INSUFFICIENT_FACTS,
                passed=True,
            )

    def test_serializes_pass_alias(self):
        result = ClauseResult.of(clauses.AMEND_I, "R-1", VerdictCode.CONSTITUTIONAL)
        data = result.model_dump(by_alias=True)
        assert data["pass"] is True
        assert "passed" not in data

    def test_dumps_pass_alias_by_default(self):
        result = ClauseResult.of(clauses.AMEND_I, "R-1", VerdictCode.UNCONSTITUTIONAL)
        data = result.model_dump()
        assert data["pass"] is False
        assert "passed" not in data
        assert "\"pass\":false" in result.model_dump_json()

    def test_accepts_pass_alias_on_input(self):
        result = ClauseResult.model_validate({
            "clause": clauses.AMEND_I.model_dump(),
            "rule_id": "R-1",
            "result": "NONJUSTICIABLE",
            "pass": False,
        })
        assert result.result == VerdictCode.NONJUSTICIABLE


class TestProfile:
    def test_all_parameters_optional(self):
        profile = InterpretationProfile(id="bare")
        assert profile.parameters.probable_cause_threshold is None
        assert profile.parameters.commerce_categories_enabled == []

    def test_unknown_parameters_kept(self):
        params = ProfileParameters.model_validate({"future_option": 3})
        assert params.model_extra == {"future_option": 3}

    def test_scrutiny_test_validated(self):
        with pytest.raises(ValidationError):
            ProfileParameters.model_validate({
                "equal_protection_tiers": {
                    "suspect": {"classes": ["race"], "test": "extreme"},
                    "quasi_suspect": {"classes": [], "test": "intermediate"},
                    "other": {"classes": [], "test": "rational"},
                }
            })

    def test_profile_is_frozen(self, profile: InterpretationProfile):
        with pytest.raises(ValidationError):
            profile.id = "other"
