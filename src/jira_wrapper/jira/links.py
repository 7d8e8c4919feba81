"""Module for Jira issue link operations."""

import logging

from requests.exceptions import HTTPError

from ..models.jira import LinkedIssueSpec
from ..utils.urls import issue_path
from .client import JiraClient

logger = logging.getLogger("jira-wrapper")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def add_related(self, issue_key: str, linked_issues: list[LinkedIssueSpec]) -> bool:
        """
        Link an issue to other issues.

        One request is sent per link, in the order given. A failure stops the
        loop; links added before it stay in place.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            linked_issues: Links to add, each naming the outward issue and
                the link type

        Returns:
            True once every link was added
        """
        path = issue_path(issue_key)
        for link in linked_issues:
            try:
                self.jira.put(path, data=link.to_update_payload())
            except HTTPError as http_err:
                logger.error(
                    f"HTTP error linking {issue_key} to {link.linked_key}: {http_err}"
                )
                raise
            logger.debug(
                f"Linked {issue_key} {link.outward} {link.linked_key} ({link.relation_name})"
            )
        return True
