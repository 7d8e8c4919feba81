"""
Jira request models.

Write operations send sparse JSON documents: only the keys the caller supplied
are serialized. The builders here make that explicit instead of assembling
dictionaries ad hoc.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .field import JiraField


class Priority(str, Enum):
    """Priority names available on the Jira instance."""

    TRIVIAL = "Trivial"
    LOWEST = "Lowest"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    HIGHEST = "Highest"


class IssueType(str, Enum):
    """Issue type names available on the Jira instance."""

    TASK = "Task"
    BUG = "Bug"
    OPS_ALERT = "OPS_Alert"


def enum_value(value: str | Enum) -> str:
    """Return the Jira name of an enum member, or the string unchanged."""
    return value.value if isinstance(value, Enum) else str(value)


class JiraIssueCreateRequest(BaseModel):
    """
    Body of ``POST rest/api/2/issue``.

    Optional members left as None are omitted from the payload, and custom
    fields are serialized under their field id next to the system fields.
    """

    project_key: str
    summary: str
    issue_type: str
    priority: str | None = None
    description: str | None = None
    labels: list[str] | None = None
    components: list[str] | None = None
    custom_fields: list[JiraField] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        project_key: str,
        issue_type: str | Enum,
        summary: str,
        description: str | None = None,
        priority: str | Enum | None = None,
        labels: list[str] | None = None,
        components: list[str] | None = None,
        custom_fields: list[JiraField] | None = None,
    ) -> "JiraIssueCreateRequest":
        """Create a request, normalizing enum members and label spelling."""
        return cls(
            project_key=project_key,
            summary=summary,
            issue_type=enum_value(issue_type),
            priority=enum_value(priority) if priority is not None else None,
            description=description,
            # Jira labels cannot contain spaces
            labels=[label.replace(" ", "") for label in labels]
            if labels is not None
            else None,
            components=list(components) if components is not None else None,
            custom_fields=list(custom_fields or []),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the ``{"fields": {...}}`` document Jira expects."""
        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "summary": self.summary,
            "issuetype": {"name": self.issue_type},
        }
        if self.description is not None:
            fields["description"] = self.description
        if self.priority is not None:
            fields["priority"] = {"name": self.priority}
        if self.labels is not None:
            fields["labels"] = self.labels
        if self.components is not None:
            fields["components"] = [{"name": name} for name in self.components]
        for field in self.custom_fields:
            if field.value is not None:
                fields[field.id] = field.value
        return {"fields": fields}
