"""
Jira worklog models.

This module provides Pydantic models for Jira worklogs (time tracking entries).
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from jira_wrapper.utils import parse_date

from ..base import ApiModel
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class JiraWorklog(ApiModel):
    """
    Model representing a Jira worklog entry.

    Worklog entries are read-only snapshots of the time logged on an issue.
    """

    model_config = ConfigDict(frozen=True)

    account_id: str = EMPTY_STRING
    display_name: str = EMPTY_STRING
    created: datetime | None = None
    updated: datetime | None = None
    started: datetime | None = None
    time_spent_seconds: int = Field(default=0, ge=0)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraWorklog":
        """
        Create a JiraWorklog from a Jira API response.

        Args:
            data: The worklog data from the Jira API

        Returns:
            A JiraWorklog instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        author = data.get("author") or {}

        time_spent_seconds = data.get("timeSpentSeconds", 0)
        try:
            time_spent_seconds = (
                max(int(time_spent_seconds), 0) if time_spent_seconds is not None else 0
            )
        except (ValueError, TypeError):
            time_spent_seconds = 0

        return cls(
            account_id=str(author.get("accountId") or EMPTY_STRING),
            display_name=str(author.get("displayName") or EMPTY_STRING),
            created=parse_date(data.get("created")),
            updated=parse_date(data.get("updated")),
            started=parse_date(data.get("started")),
            time_spent_seconds=time_spent_seconds,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "author": self.display_name,
            "time_spent_seconds": self.time_spent_seconds,
        }

        if self.started:
            result["started"] = self.started.isoformat()

        if self.created:
            result["created"] = self.created.isoformat()

        if self.updated:
            result["updated"] = self.updated.isoformat()

        return result
