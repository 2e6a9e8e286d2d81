"""Tests for the URL utilities module."""

import pytest

from atlassian_jwt.utils.urls import base_path, is_atlassian_cloud_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.atlassian.net/wiki", "/wiki"),
        ("https://example.atlassian.net/wiki/", "/wiki"),
        ("https://example.com/confluence/", "/confluence"),
        ("https://example.atlassian.net", ""),
        ("https://example.atlassian.net/", ""),
        ("", ""),
        (None, ""),
    ],
    ids=[
        "path-prefix",
        "trailing-slash",
        "server-context-path",
        "no-path",
        "root-path",
        "empty",
        "none",
    ],
)
def test_base_path(url, expected):
    assert base_path(url) == expected


def test_is_atlassian_cloud_url_empty():
    """Test that is_atlassian_cloud_url returns False for empty URL."""
    assert is_atlassian_cloud_url("") is False
    assert is_atlassian_cloud_url(None) is False


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.atlassian.net", True),
        ("https://test-instance.atlassian.net/wiki", True),
        ("https://example.jira.com", True),
        ("https://api.atlassian.com/ex/jira/123", True),
        ("https://example.atlassian-us-gov-mod.net", True),
        ("https://jira.company.com", False),
        ("https://atlassian.net.evil.com", False),
        ("http://localhost:8080", False),
        ("http://127.0.0.1:2990/jira", False),
        ("http://192.168.1.10/jira", False),
        ("http://10.0.0.5/jira", False),
        ("http://172.16.0.1/jira", False),
    ],
)
def test_is_atlassian_cloud_url(url, expected):
    assert is_atlassian_cloud_url(url) is expected
