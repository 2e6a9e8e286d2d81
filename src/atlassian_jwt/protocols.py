"""Module for authentication protocol definitions."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from requests import PreparedRequest


@runtime_checkable
class AuthSetter(Protocol):
    """Protocol for anything that can authenticate an outgoing request."""

    @abstractmethod
    def set_auth_header(self, request: PreparedRequest) -> None:
        """
        Set the Authorization header of a request.

        Args:
            request: The request to authenticate; it is modified in place

        Raises:
            SigningError: If the token cannot be signed
            MissingConfigurationError: If no configuration is available
        """
