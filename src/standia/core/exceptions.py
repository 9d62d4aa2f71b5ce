"""Exception hierarchy for Stand IA."""


class StandiaError(Exception):
    """Base class for all Stand IA errors."""


class ConfigurationError(StandiaError):
    """Raised when the application is misconfigured."""


class MissingCredentialsError(ConfigurationError):
    """Raised when no Gemini API key is available.

    This is the only fatal error: no request can be attempted without it,
    so the UI refuses to start.
    """


class ValidationError(StandiaError):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """


class GenerationInProgressError(StandiaError):
    """Raised when a submit is attempted while a request is in flight."""


class PhaseError(StandiaError):
    """Raised for requests outside the four generation phases."""
