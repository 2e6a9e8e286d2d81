"""URL-related utility functions for Atlassian Connect add-ons."""

import re
from urllib.parse import urlparse


def base_path(url: str | None) -> str:
    """Return the path prefix of a product base URL.

    Confluence Cloud lives under ``/wiki``, so a base URL of
    ``https://example.atlassian.net/wiki`` yields ``/wiki``.

    Args:
        url: The product base URL

    Returns:
        The path component without a trailing slash, empty when there is none
    """
    if not url:
        return ""
    return urlparse(url).path.rstrip("/")


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False otherwise
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private addresses are never Cloud
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        hostname.endswith(".atlassian.net")
        or hostname.endswith(".jira.com")
        or hostname.endswith(".jira-dev.com")
        or hostname == "api.atlassian.com"
        or hostname.endswith(".atlassian-us-gov-mod.net")  # US Gov Moderate (FedRAMP)
        or hostname.endswith(".atlassian-us-gov.net")  # US Gov (FedRAMP)
    )
