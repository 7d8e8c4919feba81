"""Module for Jira worklog operations."""

import logging
from typing import Any

from ..models.jira import JiraWorklog
from ..utils.urls import issue_path
from .client import JiraClient

logger = logging.getLogger("jira-wrapper")


class WorklogMixin(JiraClient):
    """Mixin for Jira worklog operations."""

    def get_worklog(self, issue_key: str) -> dict[str, Any]:
        """
        Get the raw worklog data for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Raw worklog data from the API
        """
        return self._get_json(issue_path(issue_key, "worklog", api_version=3))

    def get_worklog_models(self, issue_key: str) -> list[JiraWorklog]:
        """
        Get all worklog entries for an issue as JiraWorklog models.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraWorklog models
        """
        worklog_data = self.get_worklog(issue_key)
        result: list[JiraWorklog] = []

        if isinstance(worklog_data, dict) and worklog_data.get("worklogs"):
            for log_data in worklog_data["worklogs"]:
                result.append(JiraWorklog.from_api_response(log_data))

        logger.debug(f"Fetched {len(result)} worklog entries for {issue_key}")
        return result

    def get_time_spent_seconds(self, issue_key: str) -> int:
        """Total time logged on an issue, in seconds."""
        return sum(w.time_spent_seconds for w in self.get_worklog_models(issue_key))
