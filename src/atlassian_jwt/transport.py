"""Transport adapter that signs every outgoing request with an Atlassian JWT."""

import logging
from typing import Any

from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.structures import CaseInsensitiveDict

from .exceptions import MissingConfigurationError
from .protocols import AuthSetter

logger = logging.getLogger("atlassian-jwt")


def clone_request(request: PreparedRequest) -> PreparedRequest:
    """Return a copy of a request that owns its own headers.

    Other attributes are shared with the original since signing only
    touches the headers.

    Args:
        request: The request to copy

    Returns:
        The copy
    """
    clone = request.copy()
    clone.headers = CaseInsensitiveDict(request.headers or {})
    return clone


class JWTAuthAdapter(BaseAdapter):
    """Transport adapter that authenticates requests before sending them.

    The request given to :meth:`send` is never modified: a copy is signed by
    the bound :class:`AuthSetter` and handed to the base adapter.

    Example:
        session = requests.Session()
        adapter = JWTAuthAdapter(config)
        session.mount("https://example.atlassian.net", adapter)

    Signing failures are raised to the caller and nothing is sent.
    """

    def __init__(
        self, auth: AuthSetter | None = None, base: BaseAdapter | None = None
    ) -> None:
        """Initialize the adapter.

        Args:
            auth: Sets the Authorization header on each request
            base: Adapter that performs the HTTP call (defaults to HTTPAdapter)
        """
        super().__init__()
        self.auth = auth
        self.base = base if base is not None else HTTPAdapter()

    def send(self, request: PreparedRequest, **kwargs: Any) -> Response:
        """Sign a copy of the request and send it through the base adapter.

        Args:
            request: The request to send
            **kwargs: Passed through to the base adapter (timeout, verify, ...)

        Returns:
            The response of the base adapter, unchanged

        Raises:
            MissingConfigurationError: If no AuthSetter is bound
            SigningError: If the request cannot be signed
        """
        if self.auth is None:
            raise MissingConfigurationError("JWT transport has no configuration")

        signed = clone_request(request)
        self.auth.set_auth_header(signed)
        logger.debug(f"Sending signed request: {signed.method} {signed.url}")

        return self.base.send(signed, **kwargs)

    def close(self) -> None:
        """Close the base adapter."""
        self.base.close()
