"""
Pydantic models for Jira API responses and requests.
"""

from .base import ApiModel
from .constants import (  # noqa: F401 - Keep constants available
    BACKLOG_STATUS,
    DEFAULT_LINK_PHRASE,
    DEFAULT_LINK_RELATION,
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    NONE_VALUE,
    NOT_ASSIGNED,
    UNKNOWN,
)
from .jira import (
    IssueType,
    JiraField,
    JiraIssue,
    JiraIssueCreateRequest,
    JiraIssueType,
    JiraParentIssue,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraTransition,
    JiraUser,
    JiraWorklog,
    LinkedIssueSpec,
    Priority,
)

__all__ = [
    # Base models
    "ApiModel",
    # Constants
    "BACKLOG_STATUS",
    "DEFAULT_LINK_PHRASE",
    "DEFAULT_LINK_RELATION",
    "EMPTY_STRING",
    "JIRA_DEFAULT_ID",
    "JIRA_DEFAULT_KEY",
    "NONE_VALUE",
    "NOT_ASSIGNED",
    "UNKNOWN",
    # Jira models
    "IssueType",
    "JiraField",
    "JiraIssue",
    "JiraIssueCreateRequest",
    "JiraIssueType",
    "JiraParentIssue",
    "JiraPriority",
    "JiraProject",
    "JiraStatus",
    "JiraTransition",
    "JiraUser",
    "JiraWorklog",
    "LinkedIssueSpec",
    "Priority",
]
