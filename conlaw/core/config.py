"""Application configuration."""

import logging
import sys
from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_PROFILES_PATH = (
    Path(__file__).resolve().parent.parent / "rule_service" / "data" / "interpretation_profiles.yaml"
)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    app_name: str = "Constitutional Rule Engine"
    debug: bool = False

    # Paths
    profiles_path: str = str(DEFAULT_PROFILES_PATH)

    # Pin the evaluation date for reproducible verdicts; today when unset.
    evaluation_date: date | None = None

    log_level: str = "INFO"

    model_config = {"env_prefix": "CONLAW_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Send ``conlaw`` log records to stderr at the given level."""
    logger = logging.getLogger("conlaw")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
