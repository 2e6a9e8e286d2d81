"""Claims carried by an Atlassian Connect JWT."""

import time
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import AtlassianConnectConfig

# Tokens for outgoing requests are valid for three minutes
TOKEN_LIFETIME_SECONDS = 180


@dataclass(frozen=True)
class AtlassianClaims:
    """The mandatory claims of an Atlassian Connect JWT."""

    qsh: str  # Query string hash of the signed request
    iss: str  # Add-on key
    iat: int  # Issued at, Unix seconds
    exp: int  # Expires at, Unix seconds

    def to_dict(self) -> dict[str, Any]:
        """Return the claims as a JWT payload."""
        return asdict(self)


def build_claims(
    config: "AtlassianConnectConfig", qsh: str, now: int | None = None
) -> AtlassianClaims:
    """Build the claims for a request issued by an add-on.

    An empty add-on key is not rejected here; callers decide whether an
    unnamed issuer is acceptable.

    Args:
        config: Configuration whose ``key`` becomes the issuer
        qsh: Query string hash of the request
        now: Issue time in Unix seconds (defaults to the current time)

    Returns:
        Claims valid from ``now`` for ``TOKEN_LIFETIME_SECONDS``
    """
    issued_at = int(time.time()) if now is None else int(now)
    return AtlassianClaims(
        qsh=qsh,
        iss=config.key,
        iat=issued_at,
        exp=issued_at + TOKEN_LIFETIME_SECONDS,
    )
