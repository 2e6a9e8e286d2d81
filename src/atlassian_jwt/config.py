"""Configuration module for Atlassian Connect JWT authentication."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

import requests
from dotenv import dotenv_values
from requests import PreparedRequest
from requests.adapters import BaseAdapter

from .auth import authorization_header, sign_claims
from .claims import AtlassianClaims, build_claims
from .exceptions import MissingConfigurationError
from .models import SecurityContext
from .qsh import canonical_path, request_qsh
from .transport import JWTAuthAdapter
from .utils import getenv, is_atlassian_cloud_url, log_operation, mask_sensitive
from .utils.urls import base_path as url_base_path

logger = logging.getLogger("atlassian-jwt")

ENV_VARIABLES = (
    "ATLASSIAN_CONNECT_KEY",
    "ATLASSIAN_CONNECT_CLIENT_KEY",
    "ATLASSIAN_CONNECT_SHARED_SECRET",
    "ATLASSIAN_CONNECT_BASE_URL",
)


@dataclass(frozen=True)
class AtlassianConnectConfig:
    """Atlassian Connect add-on configuration.

    Holds the identity and shared secret an add-on receives when it is
    installed on a Jira or Confluence instance. Instances are immutable;
    use :class:`ConfigHolder` to swap credentials at runtime.
    """

    key: str = ""  # Add-on key from the app descriptor
    client_key: str = ""  # Key of the installed product instance
    shared_secret: str = field(default="", repr=False)  # Signing secret
    base_url: str = ""  # Base URL of the product instance

    @property
    def base_path(self) -> str:
        """Path prefix of the base URL, e.g. ``/wiki`` for Confluence Cloud."""
        return url_base_path(self.base_url)

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.base_url)

    @property
    def is_configured(self) -> bool:
        """Check if the add-on key and shared secret are both set."""
        return bool(self.key and self.shared_secret)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "AtlassianConnectConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Optional .env file whose values take precedence over
                the process environment

        Returns:
            AtlassianConnectConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        env: dict[str, str] = {}
        if env_file:
            env = {k: v for k, v in dotenv_values(env_file).items() if v}
        values = {name: getenv(env, name) for name in ENV_VARIABLES}

        missing = [name for name, value in values.items() if not value]
        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        return cls(
            key=values["ATLASSIAN_CONNECT_KEY"],
            client_key=values["ATLASSIAN_CONNECT_CLIENT_KEY"],
            shared_secret=values["ATLASSIAN_CONNECT_SHARED_SECRET"],
            base_url=values["ATLASSIAN_CONNECT_BASE_URL"].rstrip("/"),
        )

    @classmethod
    def from_security_context(
        cls, data: dict[str, Any]
    ) -> "AtlassianConnectConfig":
        """Create configuration from the ``installed`` lifecycle payload.

        Args:
            data: The decoded JSON body of the callback

        Returns:
            AtlassianConnectConfig with the credentials of the installation

        Raises:
            ValueError: If the payload lacks a required field
        """
        context = SecurityContext.from_api_response(data)
        return cls(
            key=context.key,
            client_key=context.client_key,
            shared_secret=context.shared_secret,
            base_url=context.base_url.rstrip("/"),
        )

    def path(self, request: PreparedRequest) -> str:
        """Return the canonical path of a request relative to the base URL."""
        return canonical_path(urlsplit(request.url or "").path, self.base_path)

    def qsh(self, request: PreparedRequest) -> str:
        """Return the query string hash of a request."""
        return request_qsh(request, self.base_url)

    def claims(self, qsh: str) -> AtlassianClaims:
        """Return the claims this add-on issues for a query string hash."""
        return build_claims(self, qsh)

    def token(self, request: PreparedRequest) -> str:
        """Return a signed JWT for a request.

        Args:
            request: The request the token is bound to

        Returns:
            The compact JWT

        Raises:
            SigningError: If the token cannot be signed
        """
        return sign_claims(self.claims(self.qsh(request)), self.shared_secret)

    def set_auth_header(self, request: PreparedRequest) -> None:
        """Set the Authorization header with a valid Atlassian JWT.

        Args:
            request: The request to authenticate; it is modified in place

        Raises:
            SigningError: If the token cannot be signed
        """
        with log_operation(logger, "set_auth_header", issuer=self.key):
            token = self.token(request)
        logger.debug(
            f"Signed {request.method} {self.path(request)} "
            f"(token: {mask_sensitive(token, 8)})"
        )
        request.headers["Authorization"] = authorization_header(token)

    def session(self, base: BaseAdapter | None = None) -> requests.Session:
        """Return a session whose requests are signed with this configuration.

        Args:
            base: Adapter performing the HTTP calls (defaults to HTTPAdapter)

        Returns:
            A requests session with the JWT adapter mounted for http and https
        """
        session = requests.Session()
        adapter = JWTAuthAdapter(self, base=base)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session


class ConfigHolder:
    """Holds the current configuration and swaps it as a whole.

    Readers always see a complete configuration; field-by-field updates are
    not possible since configurations are immutable.
    """

    def __init__(self, config: AtlassianConnectConfig | None = None) -> None:
        self._config = config
        self._lock = threading.Lock()

    @property
    def config(self) -> AtlassianConnectConfig | None:
        """The current configuration, or None before installation."""
        with self._lock:
            return self._config

    def update(self, config: AtlassianConnectConfig | None) -> None:
        """Replace the current configuration."""
        with self._lock:
            self._config = config
        logger.info(
            "Atlassian Connect configuration "
            + (f"updated for client '{config.client_key}'" if config else "cleared")
        )

    def set_auth_header(self, request: PreparedRequest) -> None:
        """Sign a request with the current configuration.

        Raises:
            MissingConfigurationError: If no configuration has been set
            SigningError: If the token cannot be signed
        """
        config = self.config
        if config is None:
            raise MissingConfigurationError("No Atlassian Connect configuration set")
        config.set_auth_header(request)
