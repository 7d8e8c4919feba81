"""Jira API module for jira_wrapper.

This module provides the Jira client and the operation mixins it is built from.
"""

# flake8: noqa

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .search import SearchMixin
from .transitions import TransitionsMixin, resolve_transition
from .users import UsersMixin
from .worklog import WorklogMixin


class JiraFetcher(
    FieldsMixin,
    TransitionsMixin,
    WorklogMixin,
    CommentsMixin,
    LinksMixin,
    SearchMixin,
    IssuesMixin,
    UsersMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - FieldsMixin: Field catalog loading
    - TransitionsMixin: Workflow transitions and resolution
    - WorklogMixin: Worklog operations
    - CommentsMixin: Comment operations
    - LinksMixin: Issue link operations
    - SearchMixin: JQL search with pagination
    - IssuesMixin: Issue parsing, creation and updates
    - UsersMixin: Assignable user lookup

    Example:
        >>> jira = JiraFetcher.from_credentials(
        ...     "https://example.atlassian.net", "me@example.com", "token"
        ... )
        >>> issues = jira.search("project = PROJ ORDER BY created DESC", 250)
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient", "resolve_transition"]
