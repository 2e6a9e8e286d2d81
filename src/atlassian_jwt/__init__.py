"""Atlassian Connect JWT authentication for outgoing requests."""

__version__ = "0.1.0"

from .auth import AUTH_SCHEME, JWT_ALGORITHM, sign_claims
from .claims import TOKEN_LIFETIME_SECONDS, AtlassianClaims, build_claims
from .config import AtlassianConnectConfig, ConfigHolder
from .exceptions import AtlassianJWTError, MissingConfigurationError, SigningError
from .models import SecurityContext
from .protocols import AuthSetter
from .qsh import canonical_request, compute_qsh, request_qsh
from .transport import JWTAuthAdapter, clone_request

__all__ = [
    "AUTH_SCHEME",
    "JWT_ALGORITHM",
    "TOKEN_LIFETIME_SECONDS",
    "AtlassianClaims",
    "AtlassianConnectConfig",
    "AtlassianJWTError",
    "AuthSetter",
    "ConfigHolder",
    "JWTAuthAdapter",
    "MissingConfigurationError",
    "SecurityContext",
    "SigningError",
    "build_claims",
    "canonical_request",
    "clone_request",
    "compute_qsh",
    "request_qsh",
    "sign_claims",
]
