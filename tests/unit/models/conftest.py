"""
Test fixtures for model testing.
"""

import copy
from typing import Any

import pytest

from jira_wrapper.models.jira import JiraField
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_FIELDS,
    MOCK_JIRA_ISSUE,
    MOCK_JIRA_SUBTASK,
    MOCK_JIRA_WORKLOG,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return a deep copy of the mock Jira issue so tests may edit it."""
    return copy.deepcopy(MOCK_JIRA_ISSUE)


@pytest.fixture
def jira_subtask_data() -> dict[str, Any]:
    return copy.deepcopy(MOCK_JIRA_SUBTASK)


@pytest.fixture
def jira_worklog_data() -> dict[str, Any]:
    return copy.deepcopy(MOCK_JIRA_WORKLOG["worklogs"][0])


@pytest.fixture
def field_catalog() -> list[JiraField]:
    return [JiraField.from_api_response(field) for field in MOCK_JIRA_FIELDS]
