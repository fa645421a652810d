"""Exceptions raised by the engine and its collaborators."""


class ConlawError(Exception):
    """Base class for engine errors."""

    pass


class ConfigurationError(ConlawError):
    """Setup mistake that aborts an evaluation before any rule runs."""

    pass


class ProfileNotFoundError(ConfigurationError):
    """Raised when a scenario names an interpretation profile that is not loaded."""

    def __init__(self, profile_id: str, available: list[str] | None = None):
        self.profile_id = profile_id
        self.available = available or []
        message = f"Interpretation profile not found: {profile_id}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ProfileConfigError(ConfigurationError):
    """Raised when profile configuration cannot be read or parsed."""

    pass


class DuplicateRuleError(ConfigurationError):
    """Raised when two registered rules share an id."""

    pass


class MissingProfileParameterError(ConlawError):
    """Raised by a rule that needs a profile option the profile does not set."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Profile does not define required parameter '{parameter}'")
