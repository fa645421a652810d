"""API module - FastAPI routes."""

from .routes_evaluate import router as evaluate_router
from .routes_rules import router as rules_router

__all__ = [
    "evaluate_router",
    "rules_router",
]
