"""Tests for the Jira Users mixin."""

import pytest

from jira_wrapper.jira import JiraFetcher
from jira_wrapper.jira.users import UsersMixin
from tests.fixtures.jira_mocks import MOCK_ASSIGNABLE_USERS

USERS_PATH = "rest/api/2/user/assignable/search"


class TestUsersMixin:
    """Tests for the UsersMixin class."""

    @pytest.fixture
    def users_mixin(self, jira_fetcher: JiraFetcher) -> UsersMixin:
        return jira_fetcher

    def test_get_project_users_until_empty_page(self, users_mixin):
        """Test that paging starts at offset 1 and stops at an empty page."""
        users_mixin.jira.get.side_effect = [MOCK_ASSIGNABLE_USERS, []]

        users = users_mixin.get_project_users("PROJ")

        assert [u.account_id for u in users] == ["acc-assignee", "acc-reporter"]
        assert users[0].display_name == "Ada Lovelace"
        assert users[0].email == "ada@example.com"
        params = [c.kwargs["params"] for c in users_mixin.jira.get.call_args_list]
        assert params == [
            {"project": "PROJ", "startAt": 1, "maxResults": 100},
            {"project": "PROJ", "startAt": 101, "maxResults": 100},
        ]
        assert all(
            c.args == (USERS_PATH,) for c in users_mixin.jira.get.call_args_list
        )

    def test_get_project_users_multiple_pages(self, users_mixin):
        """Test that users from every page are concatenated in order."""
        page_one = [{"accountId": f"a{i}", "displayName": f"U{i}"} for i in range(100)]
        page_two = [{"accountId": "last", "displayName": "Last"}]
        users_mixin.jira.get.side_effect = [page_one, page_two, []]

        users = users_mixin.get_project_users("PROJ")

        assert len(users) == 101
        assert users[-1].account_id == "last"
        assert users_mixin.jira.get.call_count == 3

    def test_get_project_users_none(self, users_mixin):
        users_mixin.jira.get.return_value = []

        assert users_mixin.get_project_users("EMPTY") == []
        users_mixin.jira.get.assert_called_once()

    def test_get_project_users_offset_cap(self, users_mixin):
        """Test that paging stops at the offset cap even if pages keep coming."""
        users_mixin.jira.get.return_value = [{"accountId": "a", "displayName": "A"}]

        users = users_mixin.get_project_users("PROJ")

        assert users_mixin.jira.get.call_count == 10_000
        assert len(users) == 10_000
        last_params = users_mixin.jira.get.call_args.kwargs["params"]
        assert last_params["startAt"] == 999_901
