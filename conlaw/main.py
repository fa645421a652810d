"""FastAPI application entry point."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conlaw import __version__
from conlaw.core.api import evaluate_router, rules_router
from conlaw.core.api.routes_evaluate import get_engine
from conlaw.core.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    logger.info("Starting %s...", settings.app_name)
    logger.info("Profiles path: %s", settings.profiles_path)

    engine = get_engine()
    logger.info(
        "Engine ready: %d rule(s), profiles: %s",
        len(engine.registry),
        ", ".join(sorted(engine.profiles)) or "none",
    )

    yield

    # Shutdown
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Evaluates fact scenarios against a catalog of constitutional rules",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware - configurable via CORS_ORIGINS env var
    cors_origins_str = os.getenv("CORS_ORIGINS", "*")
    cors_origins = cors_origins_str.split(",") if cors_origins_str != "*" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(evaluate_router)  # /evaluate
    app.include_router(rules_router)     # /rules, /profiles

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "endpoints": {
                "evaluate": "/evaluate - Evaluate a scenario",
                "rules": "/rules - Rule catalog inspection",
                "profiles": "/profiles - Interpretation profiles",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
