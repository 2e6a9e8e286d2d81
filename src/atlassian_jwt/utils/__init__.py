"""
Utility functions for the Atlassian Connect JWT package.
"""

from .env import getenv, is_env_truthy
from .logging import log_operation, mask_sensitive, setup_logging
from .urls import base_path, is_atlassian_cloud_url

__all__ = [
    "base_path",
    "getenv",
    "is_atlassian_cloud_url",
    "is_env_truthy",
    "log_operation",
    "mask_sensitive",
    "setup_logging",
]
