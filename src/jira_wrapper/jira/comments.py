"""Module for Jira comment operations."""

import logging

from requests.exceptions import HTTPError

from ..utils.urls import issue_path
from .client import JiraClient

logger = logging.getLogger("jira-wrapper")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> bool:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text, in Jira wiki markup

        Returns:
            True once Jira accepted the comment
        """
        payload = {"update": {"comment": [{"add": {"body": comment}}]}}
        try:
            self.jira.put(issue_path(issue_key), data=payload)
        except HTTPError as http_err:
            logger.error(f"HTTP error adding comment to {issue_key}: {http_err}")
            raise
        logger.debug(f"Added comment to {issue_key}")
        return True
