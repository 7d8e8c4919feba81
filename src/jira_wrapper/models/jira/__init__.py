"""
Jira data models for jira-wrapper.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .field import JiraField
from .issue import JiraIssue, JiraParentIssue
from .link import LinkedIssueSpec
from .project import JiraProject
from .request import IssueType, JiraIssueCreateRequest, Priority
from .workflow import JiraTransition
from .worklog import JiraWorklog

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    # Entity-specific models
    "JiraField",
    "JiraWorklog",
    "JiraProject",
    "JiraTransition",
    "JiraIssue",
    "JiraParentIssue",
    # Requests
    "IssueType",
    "Priority",
    "JiraIssueCreateRequest",
    "LinkedIssueSpec",
]
