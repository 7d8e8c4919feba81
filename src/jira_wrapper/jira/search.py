"""Module for Jira search operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from ..models.jira import JiraIssue
from .client import JiraClient
from .constants import SEARCH_PAGE_SIZE, SEARCH_RESOURCE
from .protocols import FieldsOperationsProto, IssueParsingProto

logger = logging.getLogger("jira-wrapper")


class SearchMixin(JiraClient, FieldsOperationsProto, IssueParsingProto):
    """Mixin for Jira search operations."""

    def search(
        self,
        jql: str,
        max_results: int = SEARCH_PAGE_SIZE,
        include_worklog: bool = False,
    ) -> list[JiraIssue]:
        """
        Search for issues using JQL (Jira Query Language).

        Up to ``SEARCH_PAGE_SIZE`` results are fetched with a single request.
        Larger searches first probe the total number of matches, then walk
        pages of ``SEARCH_PAGE_SIZE`` from offset 0 until
        ``min(max_results, total)`` issues have been requested.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues to return
            include_worklog: Fetch the worklog of every returned issue

        Returns:
            Parsed issues in ascending offset order

        Raises:
            HTTPError: If a request fails; nothing is returned in that case
            IssueParseError: If any returned issue lacks a required field
        """
        try:
            field_catalog = self.load_fields()
            path = self._resource(SEARCH_RESOURCE)

            if max_results <= SEARCH_PAGE_SIZE:
                response = self._search_page(path, jql, 0, max_results)
                return self.parse_issues(response, field_catalog, include_worklog)

            probe = self._search_page(path, jql, 0, 0)
            total = int(probe.get("total", 0))
            limit = min(max_results, total)
            logger.debug(
                f"JQL '{jql}' matches {total} issues, fetching {limit} of them"
            )

            issues: list[JiraIssue] = []
            for start_at in range(0, limit, SEARCH_PAGE_SIZE):
                page_size = min(SEARCH_PAGE_SIZE, limit - start_at)
                response = self._search_page(path, jql, start_at, page_size)
                issues.extend(
                    self.parse_issues(response, field_catalog, include_worklog)
                )
            return issues[:max_results]
        except HTTPError as http_err:
            logger.error(f"HTTP error searching issues with JQL '{jql}': {http_err}")
            raise

    def get_issue(self, issue_key: str, include_worklog: bool = False) -> JiraIssue | None:
        """
        Get a single issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            include_worklog: Also fetch the worklog of the issue

        Returns:
            The issue, or None when no issue has that key
        """
        issues = self.search(f"key={issue_key}", 1, include_worklog)
        return issues[0] if issues else None

    def _search_page(
        self, path: str, jql: str, start_at: int, max_results: int
    ) -> dict[str, Any]:
        params = {"jql": jql, "startAt": start_at, "maxResults": max_results}
        response = self._get_json(path, params=params)
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from search: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)
        return response
