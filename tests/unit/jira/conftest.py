"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_wrapper.jira.client import JiraClient
from jira_wrapper.jira.config import JiraConfig
from jira_wrapper.models.jira import JiraField
from tests.fixtures.jira_mocks import MOCK_JIRA_FIELDS


def resource_url(resource, api_root=None, api_version=None):
    """Mimic ``atlassian.Jira.resource_url`` on a Cloud instance."""
    return f"rest/api/{api_version or 2}/{resource}"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance for a Cloud site."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def field_catalog() -> list[JiraField]:
    """Field catalog matching MOCK_JIRA_FIELDS."""
    return [JiraField.from_api_response(field) for field in MOCK_JIRA_FIELDS]


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = resource_url
    mock_jira.put.return_value = None
    mock_jira.post.return_value = None
    yield mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a JiraClient instance with mocked dependencies."""
    with patch("jira_wrapper.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        client = JiraClient(config=mock_config)
        yield client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira, field_catalog):
    """Create a JiraFetcher instance with mocked dependencies.

    The field catalog is pre-loaded so that search and parse tests only see
    their own requests.
    """
    from jira_wrapper.jira import JiraFetcher

    with patch("jira_wrapper.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=mock_config)
        fetcher._field_catalog_cache = field_catalog
        yield fetcher
