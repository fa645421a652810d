"""Core module - ontology, configuration, errors and API."""

from .config import Settings, configure_logging, get_settings
from .errors import (
    ConfigurationError,
    ConlawError,
    DuplicateRuleError,
    MissingProfileParameterError,
    ProfileConfigError,
    ProfileNotFoundError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "ConlawError",
    "ConfigurationError",
    "ProfileNotFoundError",
    "ProfileConfigError",
    "DuplicateRuleError",
    "MissingProfileParameterError",
]
