"""
Shared fixtures for Atlassian Connect JWT tests.
"""

from unittest.mock import MagicMock

import pytest
from requests import Response
from requests.adapters import BaseAdapter

from atlassian_jwt import AtlassianConnectConfig
from tests.utils.factories import SHARED_SECRET


@pytest.fixture
def connect_config() -> AtlassianConnectConfig:
    """A fully populated add-on configuration for a Confluence Cloud site."""
    return AtlassianConnectConfig(
        key="com.example.addon",
        client_key="client-key-1234",
        shared_secret=SHARED_SECRET,
        base_url="https://example.atlassian.net/wiki",
    )


@pytest.fixture
def spy_adapter() -> MagicMock:
    """Base adapter that records sent requests and answers 200 without I/O."""
    adapter = MagicMock(spec=BaseAdapter)

    def send(request, **kwargs):
        response = Response()
        response.status_code = 200
        response._content = b"{}"
        response.url = request.url
        response.request = request
        return response

    adapter.send.side_effect = send
    return adapter
