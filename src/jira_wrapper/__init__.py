"""jira-wrapper: a typed client for the Jira Cloud REST API."""

import logging
import os

from jira_wrapper.utils.logging import setup_logging

__version__ = "0.1.0"

if os.getenv("JIRA_WRAPPER_VERBOSE", "").lower() in ("true", "1", "yes"):
    setup_logging(logging.DEBUG)

from jira_wrapper.exceptions import (  # noqa: E402
    IssueParseError,
    JiraWrapperError,
    TransitionNotFoundError,
)
from jira_wrapper.jira import JiraConfig, JiraFetcher  # noqa: E402

__all__ = [
    "IssueParseError",
    "JiraConfig",
    "JiraFetcher",
    "JiraWrapperError",
    "TransitionNotFoundError",
    "__version__",
]
