"""Routes for constitutional evaluation."""

import logging
from datetime import date
from typing import Callable

from fastapi import APIRouter, HTTPException

from conlaw.core.config import get_settings
from conlaw.core.errors import ProfileConfigError, ProfileNotFoundError
from conlaw.core.ontology import EngineVerdict, Scenario
from conlaw.rule_service import ProfileLoader, RuleEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/evaluate", tags=["Evaluation"])

# Global instances
_loader: ProfileLoader | None = None
_engine: RuleEngine | None = None


def get_loader() -> ProfileLoader:
    """Get or create the profile loader instance."""
    global _loader
    if _loader is None:
        settings = get_settings()
        _loader = ProfileLoader(settings.profiles_path)
        try:
            _loader.load()
        except ProfileConfigError as e:
            logger.warning("No interpretation profiles loaded: %s", e)
    return _loader


def get_engine() -> RuleEngine:
    """Get or create the rule engine instance."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = RuleEngine(
            get_loader().as_mapping(),
            clock=_pinned_clock(settings.evaluation_date),
        )
    return _engine


def _pinned_clock(pinned: date | None) -> Callable[[], date] | None:
    if pinned is None:
        return None

    def clock() -> date:
        return pinned

    return clock


@router.post("", response_model=EngineVerdict)
async def evaluate_scenario(scenario: Scenario) -> EngineVerdict:
    """Evaluate a scenario against every registered rule.

    Returns the aggregated verdict with the full trace of clause results and
    precedence decisions.
    """
    engine = get_engine()
    try:
        return engine.evaluate(scenario)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
