"""Module for Jira protocol definitions.

Mixins that call into each other declare the collaborator's interface through
these protocols; ``JiraFetcher`` provides the implementations.
"""

from abc import abstractmethod
from typing import Any, Protocol

from ..models.jira import (
    JiraField,
    JiraIssue,
    JiraTransition,
    JiraWorklog,
    LinkedIssueSpec,
)


class FieldsOperationsProto(Protocol):
    """Protocol defining field catalog operations interface."""

    @abstractmethod
    def load_fields(self, refresh: bool = False) -> list[JiraField]:
        """Load the field catalog (id and display name of every field)."""


class WorklogOperationsProto(Protocol):
    """Protocol defining worklog operations interface."""

    @abstractmethod
    def get_worklog_models(self, issue_key: str) -> list[JiraWorklog]:
        """Get the worklog entries of an issue."""


class IssueParsingProto(Protocol):
    """Protocol defining the issue parser interface."""

    @abstractmethod
    def parse_issues(
        self,
        response: dict[str, Any] | list[dict[str, Any]],
        field_catalog: list[JiraField],
        include_worklog: bool = False,
    ) -> list[JiraIssue]:
        """Parse the issues of one search response page."""


class TransitionsOperationsProto(Protocol):
    """Protocol defining transition operations interface."""

    @abstractmethod
    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """Get the transitions currently available for an issue."""

    @abstractmethod
    def change_transition(
        self,
        issue_key: str,
        destination: str,
        transitions: list[JiraTransition] | None = None,
    ) -> bool:
        """Move an issue through the first transition matching ``destination``."""


class LinksOperationsProto(Protocol):
    """Protocol defining issue link operations interface."""

    @abstractmethod
    def add_related(self, issue_key: str, linked_issues: list[LinkedIssueSpec]) -> bool:
        """Link an issue to each of ``linked_issues``."""
