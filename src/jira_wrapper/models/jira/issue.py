"""
Jira issue models.

This module provides the Pydantic model of a parsed Jira issue together with
the extraction steps that turn a raw ``search`` result row into one. The steps
are independent of each other so that callers may run them concurrently and
assemble the issue once all of them have finished.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from jira_wrapper.exceptions import IssueParseError
from jira_wrapper.utils import parse_date

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .field import JiraField, coerce_field_value, is_custom_field
from .project import JiraProject
from .worklog import JiraWorklog

logger = logging.getLogger(__name__)

# Heads that must be present in every raw issue; anything else may be missing
REQUIRED_ISSUE_HEADS = ("key", "id", "fields")
REQUIRED_FIELD_HEADS = (
    "summary",
    "created",
    "status",
    "priority",
    "issuetype",
    "project",
)


class JiraParentIssue(ApiModel):
    """
    Reference from a sub-task to its parent issue.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraParentIssue":
        """Create a JiraParentIssue from the ``parent`` field of an issue."""
        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
        )


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Instances are built once per search result row and are not modified
    afterwards; collections are tuples so their contents are fixed as well.
    """

    model_config = ConfigDict(frozen=True)

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    status: JiraStatus = Field(default_factory=JiraStatus)
    priority: JiraPriority = Field(default_factory=JiraPriority)
    assignee: JiraUser = Field(default_factory=JiraUser)
    reporter: JiraUser = Field(default_factory=JiraUser)
    creator: JiraUser = Field(default_factory=JiraUser)
    created: datetime | None = None
    updated: datetime | None = None
    resolved: datetime | None = None
    labels: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    project: JiraProject = Field(default_factory=JiraProject)
    issue_type: JiraIssueType = Field(default_factory=JiraIssueType)
    parent: JiraParentIssue | None = None
    worklogs: tuple[JiraWorklog, ...] = ()
    custom_fields: tuple[JiraField, ...] = ()

    @property
    def is_subtask(self) -> bool:
        """True if and only if the issue has a parent."""
        return self.parent is not None

    def get_custom_field(self, id_or_name: str) -> JiraField | None:
        """
        Find an attached custom field by id or, failing that, by display name.

        Args:
            id_or_name: A field id ('customfield_10010') or a display name
                (case-insensitive)

        Returns:
            The first matching field or None
        """
        for field in self.custom_fields:
            if field.id == id_or_name:
                return field
        lowered = id_or_name.lower()
        for field in self.custom_fields:
            if field.name.lower() == lowered:
                return field
        return None

    @staticmethod
    def check_required_heads(data: Any) -> None:
        """
        Raise IssueParseError unless every required head of a raw issue is set.

        A head holding null counts as missing.
        """
        issue_key = data.get("key") if isinstance(data, dict) else None
        for head in REQUIRED_ISSUE_HEADS:
            if not isinstance(data, dict) or data.get(head) is None:
                raise IssueParseError(issue_key, head)

        fields = data["fields"]
        if not isinstance(fields, dict):
            raise IssueParseError(issue_key, "fields")
        for head in REQUIRED_FIELD_HEADS:
            if fields.get(head) is None:
                raise IssueParseError(issue_key, head)

    @classmethod
    def extract_scalars(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Extract every directly mapped attribute of a raw issue.

        Args:
            data: One element of the ``issues`` array of a search response

        Returns:
            Keyword arguments for the JiraIssue constructor

        Raises:
            IssueParseError: If a required field head is missing
        """
        cls.check_required_heads(data)
        fields = data["fields"]

        # Labels are a set; keep first-seen order
        labels: list[str] = []
        for label in fields.get("labels") or []:
            if label and str(label) not in labels:
                labels.append(str(label))

        parent = None
        parent_data = fields.get("parent")
        if isinstance(parent_data, dict):
            parent = JiraParentIssue.from_api_response(parent_data)

        description = fields.get("description")

        return {
            "id": str(data["id"]),
            "key": str(data["key"]),
            "summary": str(fields["summary"]),
            "description": str(description) if description is not None else None,
            "status": JiraStatus.from_api_response(fields["status"]),
            "priority": JiraPriority.from_api_response(fields["priority"]),
            "assignee": JiraUser.from_api_response(fields.get("assignee")),
            "reporter": JiraUser.from_api_response(fields.get("reporter")),
            "creator": JiraUser.from_api_response(fields.get("creator")),
            "created": parse_date(fields["created"]),
            "updated": parse_date(fields.get("updated")),
            "resolved": parse_date(fields.get("resolutiondate")),
            "labels": tuple(labels),
            "project": JiraProject.from_api_response(fields["project"]),
            "issue_type": JiraIssueType.from_api_response(fields["issuetype"]),
            "parent": parent,
        }

    @staticmethod
    def extract_components(fields: dict[str, Any]) -> tuple[str, ...]:
        """Extract component names in the order Jira lists them."""
        components = []
        for component in fields.get("components") or []:
            if isinstance(component, dict):
                name = component.get("name")
                if name:
                    components.append(str(name))
            elif component:
                components.append(str(component))
        return tuple(components)

    @staticmethod
    def extract_custom_fields(
        fields: dict[str, Any], field_catalog: list[JiraField]
    ) -> tuple[JiraField, ...]:
        """
        Resolve the custom fields of a raw issue against the field catalog.

        Each resolved entry is a clone of the catalog entry, so values never
        leak between issues or back into the catalog. Fields unknown to the
        catalog are named after their id. Tokens that are neither strings,
        objects nor numbers are skipped.

        Args:
            fields: The ``fields`` object of a raw issue
            field_catalog: Entries returned by the field catalog loader

        Returns:
            Resolved fields, in the order they appear in ``fields``
        """
        catalog: dict[str, JiraField] = {}
        for entry in field_catalog:
            catalog.setdefault(entry.id, entry)

        resolved = []
        for field_id, raw_value in fields.items():
            if not is_custom_field(field_id):
                continue
            value = coerce_field_value(raw_value)
            if value is None:
                continue
            entry = catalog.get(field_id)
            if entry is None:
                logger.debug(f"Custom field {field_id} is not in the field catalog")
                entry = JiraField(id=field_id, name=field_id)
            resolved.append(entry.clone(value))
        return tuple(resolved)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Runs the extraction steps one after the other. Worklogs are not
        fetched here; pass already loaded entries through ``worklogs``.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``field_catalog`` (list of JiraField) and ``worklogs``
                (list of JiraWorklog)

        Returns:
            A JiraIssue instance

        Raises:
            IssueParseError: If a required field head is missing
        """
        field_catalog: list[JiraField] = kwargs.get("field_catalog") or []
        worklogs: list[JiraWorklog] = kwargs.get("worklogs") or []

        scalars = cls.extract_scalars(data)
        fields = data["fields"]
        return cls(
            **scalars,
            components=cls.extract_components(fields),
            custom_fields=cls.extract_custom_fields(fields, field_catalog),
            worklogs=tuple(worklogs),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
            "status": self.status.name,
            "priority": self.priority.name,
            "issue_type": self.issue_type.name,
            "project": self.project.key,
            "assignee": self.assignee.display_name,
            "reporter": self.reporter.display_name,
            "creator": self.creator.display_name,
            "is_subtask": self.is_subtask,
        }

        if self.description:
            result["description"] = self.description

        if self.created:
            result["created"] = self.created.isoformat()

        if self.updated:
            result["updated"] = self.updated.isoformat()

        if self.resolved:
            result["resolved"] = self.resolved.isoformat()

        if self.labels:
            result["labels"] = list(self.labels)

        if self.components:
            result["components"] = list(self.components)

        if self.parent:
            result["parent"] = self.parent.key

        if self.worklogs:
            result["worklogs"] = [w.to_simplified_dict() for w in self.worklogs]

        if self.custom_fields:
            result["custom_fields"] = {f.name: f.value for f in self.custom_fields}

        return result
