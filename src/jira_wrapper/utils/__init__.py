"""
Utility functions for jira-wrapper.
"""

from .date import parse_date
from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import is_atlassian_cloud_url, issue_path

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "is_atlassian_cloud_url",
    "issue_path",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
