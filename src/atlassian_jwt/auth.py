"""Token signing for Atlassian Connect JWT authentication."""

import logging

import jwt  # PyJWT library

from .claims import AtlassianClaims
from .exceptions import SigningError

logger = logging.getLogger("atlassian-jwt")

JWT_ALGORITHM = "HS256"
AUTH_SCHEME = "JWT"


def sign_claims(claims: AtlassianClaims, shared_secret: str | bytes) -> str:
    """
    Sign claims into a compact JWT.

    Args:
        claims: The claims to sign
        shared_secret: Shared secret received during installation

    Returns:
        JWT token string

    Raises:
        SigningError: If the secret is empty or the token cannot be encoded
    """
    if not shared_secret:
        raise SigningError("Cannot sign token: shared secret is empty")

    try:
        # Sign with HMAC-SHA256 using the shared secret
        return jwt.encode(claims.to_dict(), shared_secret, algorithm=JWT_ALGORITHM)
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise SigningError(f"Failed to sign token: {e}") from e


def authorization_header(token: str) -> str:
    """Return the ``Authorization`` header value for a token."""
    return f"{AUTH_SCHEME} {token}"
