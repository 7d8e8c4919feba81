"""
Jira workflow models.

This module provides Pydantic models for Jira workflow entities,
such as transitions between statuses.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing one workflow edge available from an issue's status.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: The transition data from the Jira API

        Returns:
            A JiraTransition instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        to_status = None
        if to := data.get("to"):
            if isinstance(to, dict):
                to_status = JiraStatus.from_api_response(to)

        # Ensure ID is a string
        transition_id = data.get("id", JIRA_DEFAULT_ID)
        if transition_id is not None:
            transition_id = str(transition_id)

        return cls(
            id=transition_id,
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
        }

        if self.to_status:
            result["to_status"] = self.to_status.name

        return result
