"""
Atlassian Connect lifecycle models.

This module provides Pydantic models for the payloads an add-on receives
from the host product.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class SecurityContext(BaseModel):
    """
    Model representing the body of the ``installed`` lifecycle callback.

    Only ``key``, ``clientKey``, ``sharedSecret`` and ``baseUrl`` are needed
    to sign requests; the remaining fields are informational.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    key: str
    client_key: str = Field(alias="clientKey")
    shared_secret: str = Field(alias="sharedSecret", repr=False)
    base_url: str = Field(alias="baseUrl")
    public_key: str | None = Field(default=None, alias="publicKey", repr=False)
    server_version: str | None = Field(default=None, alias="serverVersion")
    plugins_version: str | None = Field(default=None, alias="pluginsVersion")
    product_type: str | None = Field(default=None, alias="productType")
    description: str | None = None
    event_type: str | None = Field(default=None, alias="eventType")

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "SecurityContext":
        """
        Create a SecurityContext from a lifecycle callback payload.

        Args:
            data: The decoded JSON body sent by the product

        Returns:
            A SecurityContext instance

        Raises:
            pydantic.ValidationError: If a required field is missing
        """
        context = cls.model_validate(data)
        logger.debug(
            f"Parsed security context for client '{context.client_key}' "
            f"({context.product_type or 'unknown product'})"
        )
        return context
