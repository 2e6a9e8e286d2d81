class AtlassianJWTError(Exception):
    """Base exception for Atlassian Connect JWT errors."""

    pass


class MissingConfigurationError(AtlassianJWTError):
    """Raised when a request is signed without a bound configuration."""

    pass


class SigningError(AtlassianJWTError):
    """Raised when the JWT for an outgoing request cannot be signed."""

    pass
