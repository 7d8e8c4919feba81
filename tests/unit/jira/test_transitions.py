"""Tests for the Jira Transitions mixin."""

import pytest
import requests

from jira_wrapper.exceptions import TransitionNotFoundError
from jira_wrapper.jira import JiraFetcher
from jira_wrapper.jira.transitions import TransitionsMixin, resolve_transition
from jira_wrapper.models.jira import JiraTransition
from tests.fixtures.jira_mocks import MOCK_JIRA_TRANSITIONS

TRANSITIONS = [
    JiraTransition(id="1", name="To Do"),
    JiraTransition(id="2", name="In Progress"),
    JiraTransition(id="3", name="Done"),
]


class TestResolveTransition:
    """Tests for matching a destination against available transitions."""

    def test_substring_match(self):
        assert resolve_transition(TRANSITIONS, "Prog").id == "2"

    def test_exact_name(self):
        assert resolve_transition(TRANSITIONS, "Done").id == "3"

    def test_first_match_wins(self):
        transitions = [
            JiraTransition(id="7", name="Ready for QA"),
            JiraTransition(id="8", name="Ready for Release"),
        ]
        assert resolve_transition(transitions, "Ready").id == "7"

    def test_case_sensitive(self):
        with pytest.raises(TransitionNotFoundError):
            resolve_transition(TRANSITIONS, "done")

    def test_not_found_names_destination(self):
        with pytest.raises(TransitionNotFoundError, match="Closed") as exc_info:
            resolve_transition(TRANSITIONS, "Closed", issue_key="PROJ-1")

        assert exc_info.value.destination == "Closed"
        assert exc_info.value.issue_key == "PROJ-1"
        assert "PROJ-1" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_empty_transitions(self):
        with pytest.raises(TransitionNotFoundError):
            resolve_transition([], "Done")


class TestTransitionsMixin:
    """Tests for the TransitionsMixin class."""

    @pytest.fixture
    def transitions_mixin(self, jira_fetcher: JiraFetcher) -> TransitionsMixin:
        jira_fetcher.jira.get.return_value = MOCK_JIRA_TRANSITIONS
        return jira_fetcher

    def test_get_transitions(self, transitions_mixin):
        result = transitions_mixin.get_transitions("PROJ-1")

        transitions_mixin.jira.get.assert_called_once_with(
            "rest/api/3/issue/PROJ-1/transitions", params=None
        )
        assert [(t.id, t.name) for t in result] == [
            ("1", "To Do"),
            ("2", "In Progress"),
            ("3", "Done"),
        ]
        assert result[1].to_status is not None
        assert result[1].to_status.name == "In Progress"

    def test_get_transitions_list_format(self, transitions_mixin):
        transitions_mixin.jira.get.return_value = MOCK_JIRA_TRANSITIONS["transitions"]

        assert len(transitions_mixin.get_transitions("PROJ-1")) == 3

    def test_get_transitions_is_not_cached(self, transitions_mixin):
        transitions_mixin.get_transitions("PROJ-1")
        transitions_mixin.get_transitions("PROJ-1")

        assert transitions_mixin.jira.get.call_count == 2

    def test_apply_transition(self, transitions_mixin):
        assert transitions_mixin.apply_transition("PROJ-1", "31") is True

        transitions_mixin.jira.post.assert_called_once_with(
            "rest/api/3/issue/PROJ-1/transitions",
            data={"transition": {"id": "31"}},
        )

    def test_change_transition_fetches_transitions(self, transitions_mixin):
        assert transitions_mixin.change_transition("PROJ-1", "Prog") is True

        transitions_mixin.jira.post.assert_called_once_with(
            "rest/api/3/issue/PROJ-1/transitions",
            data={"transition": {"id": "2"}},
        )

    def test_change_transition_with_known_transitions(self, transitions_mixin):
        transitions_mixin.change_transition("PROJ-1", "Done", transitions=TRANSITIONS)

        transitions_mixin.jira.get.assert_not_called()
        _, kwargs = transitions_mixin.jira.post.call_args
        assert kwargs["data"] == {"transition": {"id": "3"}}

    def test_change_transition_not_found(self, transitions_mixin):
        with pytest.raises(TransitionNotFoundError, match="Closed"):
            transitions_mixin.change_transition("PROJ-1", "Closed")

        transitions_mixin.jira.post.assert_not_called()

    def test_resolve_ticket(self, transitions_mixin):
        """Test that the transition and the resolution go in one request."""
        assert transitions_mixin.resolve_ticket("PROJ-1", "Won't Do", "Done") is True

        transitions_mixin.jira.post.assert_called_once_with(
            "rest/api/2/issue/PROJ-1/transitions",
            data={
                "transition": {"id": "3"},
                "fields": {"resolution": {"name": "Won't Do"}},
            },
            params={"expand": "transitions.fields"},
        )

    def test_resolve_ticket_requires_exact_name(self, transitions_mixin):
        """Test that a partial column name does not match when resolving."""
        with pytest.raises(TransitionNotFoundError) as exc_info:
            transitions_mixin.resolve_ticket("PROJ-1", "Done", "Don")

        assert exc_info.value.destination == "Don"
        transitions_mixin.jira.post.assert_not_called()

    def test_resolve_ticket_http_error(self, transitions_mixin):
        transitions_mixin.jira.post.side_effect = requests.HTTPError("400")

        with pytest.raises(requests.HTTPError):
            transitions_mixin.resolve_ticket("PROJ-1", "Done", "Done")
