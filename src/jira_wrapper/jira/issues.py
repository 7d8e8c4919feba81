"""Module for Jira issue operations."""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, wait
from enum import Enum
from typing import Any

from requests.exceptions import HTTPError

from ..models.constants import BACKLOG_STATUS
from ..models.jira import (
    JiraField,
    JiraIssue,
    JiraIssueCreateRequest,
    JiraWorklog,
    LinkedIssueSpec,
)
from ..models.jira.request import enum_value
from ..utils.urls import issue_path
from .client import JiraClient
from .constants import ISSUE_RESOURCE, PARSE_WORKERS
from .protocols import (
    LinksOperationsProto,
    TransitionsOperationsProto,
    WorklogOperationsProto,
)

logger = logging.getLogger("jira-wrapper")


class IssuesMixin(
    JiraClient,
    WorklogOperationsProto,
    TransitionsOperationsProto,
    LinksOperationsProto,
):
    """Mixin for Jira issue operations."""

    def parse_issues(
        self,
        response: dict[str, Any] | list[dict[str, Any]],
        field_catalog: list[JiraField],
        include_worklog: bool = False,
    ) -> list[JiraIssue]:
        """
        Parse every issue of a search response.

        Args:
            response: A search response (with an ``issues`` array) or a bare
                list of raw issues
            field_catalog: Catalog used to name custom fields
            include_worklog: Fetch the worklog of every issue

        Returns:
            Parsed issues in response order

        Raises:
            IssueParseError: If any issue lacks a required field; no partial
                result is returned
        """
        raw_issues = response.get("issues", []) if isinstance(response, dict) else response
        with ThreadPoolExecutor(max_workers=PARSE_WORKERS) as executor:
            return [
                self.parse_issue(raw, field_catalog, include_worklog, executor=executor)
                for raw in raw_issues or []
            ]

    def parse_issue(
        self,
        raw_issue: dict[str, Any],
        field_catalog: list[JiraField],
        include_worklog: bool = False,
        executor: Executor | None = None,
    ) -> JiraIssue:
        """
        Convert one raw issue into a JiraIssue.

        The scalar attributes, the custom fields, the components and the
        worklog are extracted as four concurrent tasks. The issue is assembled
        only after all of them have finished; each task returns its own result
        and none of them touches shared state.

        Args:
            raw_issue: One element of the ``issues`` array of a search response
            field_catalog: Catalog used to name custom fields
            include_worklog: Fetch the issue's worklog with an extra request
            executor: Executor running the tasks; a private one is created
                when omitted

        Returns:
            The parsed issue

        Raises:
            IssueParseError: If a required field is missing
            HTTPError: If the worklog request fails
        """
        if executor is None:
            with ThreadPoolExecutor(max_workers=PARSE_WORKERS) as own_executor:
                return self.parse_issue(
                    raw_issue, field_catalog, include_worklog, executor=own_executor
                )

        # Malformed issues fail here, before any worklog request is sent
        JiraIssue.check_required_heads(raw_issue)
        fields = raw_issue["fields"]
        issue_key = str(raw_issue["key"])

        scalars = executor.submit(JiraIssue.extract_scalars, raw_issue)
        custom_fields = executor.submit(
            JiraIssue.extract_custom_fields, fields, field_catalog
        )
        components = executor.submit(JiraIssue.extract_components, fields)
        worklogs = executor.submit(
            self._fetch_worklogs, issue_key if include_worklog else None
        )
        wait([scalars, custom_fields, components, worklogs])

        return JiraIssue(
            **scalars.result(),
            custom_fields=custom_fields.result(),
            components=components.result(),
            worklogs=worklogs.result(),
        )

    def _fetch_worklogs(self, issue_key: str | None) -> tuple[JiraWorklog, ...]:
        if not issue_key:
            return ()
        return tuple(self.get_worklog_models(issue_key))

    def create_issue(
        self,
        project_key: str,
        issue_type: str | Enum,
        priority: str | Enum,
        summary: str,
        description: str | None,
        status: str = BACKLOG_STATUS,
        labels: list[str] | None = None,
        components: list[str] | None = None,
        custom_fields: list[JiraField] | None = None,
        linked_issues: list[LinkedIssueSpec] | None = None,
    ) -> str:
        """
        Create a new issue, move it to ``status`` and link it.

        The steps run one after the other and are not transactional: when
        moving or linking fails the issue stays created (in its initial
        status, or partially linked) and the error is raised to the caller.
        Nothing is rolled back.

        Args:
            project_key: The project key (e.g. 'PROJ')
            issue_type: Issue type name or IssueType member
            priority: Priority name or Priority member
            summary: Summary of the issue
            description: Description of the issue
            status: Column to move the new issue to; "Backlog"
                (case-insensitive) leaves it where Jira created it
            labels: Labels to set; spaces are removed from each label
            components: Component names
            custom_fields: Custom fields carrying the values to set
            linked_issues: Links to add, in order

        Returns:
            The key of the created issue

        Raises:
            ValueError: If the project key, summary or issue type is empty
            TransitionNotFoundError: If no transition matches ``status``
            HTTPError: If any request fails
        """
        if not project_key:
            raise ValueError("Project key is required")
        if not summary:
            raise ValueError("Summary is required")
        if not enum_value(issue_type):
            raise ValueError("Issue type is required")

        request = JiraIssueCreateRequest.build(
            project_key=project_key,
            issue_type=issue_type,
            summary=summary,
            description=description,
            priority=priority,
            labels=labels,
            components=components,
            custom_fields=custom_fields,
        )

        try:
            result = self.jira.post(
                self._resource(ISSUE_RESOURCE), data=request.to_payload()
            )
        except HTTPError as http_err:
            logger.error(f"Error creating issue in project {project_key}: {http_err}")
            raise

        if not isinstance(result, dict) or not result.get("key"):
            msg = f"Unexpected response when creating issue: {result}"
            logger.error(msg)
            raise TypeError(msg)
        issue_key = str(result["key"])
        logger.info(f"Created issue {issue_key} in project {project_key}")

        try:
            if status.lower() != BACKLOG_STATUS.lower():
                self.change_transition(issue_key, status)
            if linked_issues:
                self.add_related(issue_key, linked_issues)
        except Exception as e:
            logger.error(
                f"Issue {issue_key} was created but could not be completed: {str(e)}"
            )
            raise

        return issue_key

    def add_labels(self, issue_key: str, labels: list[str]) -> bool:
        """
        Add labels to an issue, keeping the existing ones.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            labels: Labels to add

        Returns:
            True once Jira accepted the update
        """
        self._update_issue(
            issue_key, {"update": {"labels": [{"add": label} for label in labels]}}
        )
        return True

    def remove_labels(self, issue_key: str, labels: list[str]) -> bool:
        """
        Remove labels from an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            labels: Labels to remove

        Returns:
            True once Jira accepted the update
        """
        self._update_issue(
            issue_key,
            {"update": {"labels": [{"remove": label} for label in labels]}},
        )
        return True

    def assign_issue(self, issue_key: str, account_id: str) -> bool:
        """
        Assign an issue to a user.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            account_id: Account id of the new assignee

        Returns:
            True if Jira answered with an empty body, False if it returned
            a document (which it only does to report problems)
        """
        result = self._update_issue(
            issue_key, {"fields": {"assignee": {"accountId": account_id}}}
        )
        if result:
            logger.warning(f"Unexpected answer assigning {issue_key}: {result}")
            return False
        return True

    def update_issue_priority(self, issue_key: str, priority: str | Enum) -> bool:
        """
        Change the priority of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            priority: Priority name or Priority member

        Returns:
            True once Jira accepted the update
        """
        self._update_issue(
            issue_key,
            {"update": {"priority": [{"set": {"name": enum_value(priority)}}]}},
        )
        return True

    def _update_issue(self, issue_key: str, payload: dict[str, Any]) -> Any:
        """PUT an edit document to an issue and return Jira's answer."""
        logger.debug(f"Updating issue {issue_key}: {payload}")
        try:
            return self.jira.put(issue_path(issue_key), data=payload)
        except HTTPError as http_err:
            logger.error(f"HTTP error updating issue {issue_key}: {http_err}")
            raise
