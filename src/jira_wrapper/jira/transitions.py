"""Module for Jira transition operations."""

import logging
from collections.abc import Iterable

from requests.exceptions import HTTPError

from ..exceptions import TransitionNotFoundError
from ..models.jira import JiraTransition
from ..utils.urls import issue_path
from .client import JiraClient

logger = logging.getLogger("jira-wrapper")


def resolve_transition(
    transitions: Iterable[JiraTransition], destination: str, issue_key: str = ""
) -> JiraTransition:
    """
    Pick the transition leading to ``destination``.

    The first transition, in the order Jira lists them, whose name contains
    ``destination`` wins. Matching is case-sensitive.

    Args:
        transitions: Transitions available for the issue
        destination: Column or status name, or a fragment of it
        issue_key: Issue the transitions belong to, used in the error message

    Returns:
        The matching transition

    Raises:
        TransitionNotFoundError: If no transition name contains ``destination``
    """
    for transition in transitions:
        if destination in transition.name:
            return transition
    raise TransitionNotFoundError(issue_key, destination)


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the transitions currently available for an issue.

        The list is fetched on every call since it depends on the issue's
        current status.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models in API order
        """
        try:
            transitions_data = self._get_json(
                issue_path(issue_key, "transitions", api_version=3)
            )
        except HTTPError as http_err:
            logger.error(f"HTTP error getting transitions for {issue_key}: {http_err}")
            raise

        transitions = []
        if isinstance(transitions_data, dict):
            transitions = transitions_data.get("transitions") or []
        elif isinstance(transitions_data, list):
            transitions = transitions_data

        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    def apply_transition(self, issue_key: str, transition_id: str) -> bool:
        """
        Move an issue through the transition with ``transition_id``.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: Id of one of the issue's available transitions

        Returns:
            True once Jira accepted the transition
        """
        logger.info(f"Applying transition {transition_id} to {issue_key}")
        try:
            self.jira.post(
                issue_path(issue_key, "transitions", api_version=3),
                data={"transition": {"id": str(transition_id)}},
            )
        except HTTPError as http_err:
            logger.error(
                f"HTTP error applying transition {transition_id} to {issue_key}: {http_err}"
            )
            raise
        return True

    def change_transition(
        self,
        issue_key: str,
        destination: str,
        transitions: list[JiraTransition] | None = None,
    ) -> bool:
        """
        Move an issue to the column whose transition name contains ``destination``.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            destination: Column or status name, or a fragment of it
            transitions: Transitions already fetched for the issue; fetched
                when omitted

        Returns:
            True once Jira accepted the transition

        Raises:
            TransitionNotFoundError: If no transition matches ``destination``
        """
        if transitions is None:
            transitions = self.get_transitions(issue_key)
        transition = resolve_transition(transitions, destination, issue_key=issue_key)
        return self.apply_transition(issue_key, transition.id)

    def resolve_ticket(self, issue_key: str, resolution: str, final_column: str) -> bool:
        """
        Close an issue with a resolution.

        Unlike ``change_transition`` the transition name must equal
        ``final_column`` exactly. The transition and the resolution are sent
        in a single request.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            resolution: Resolution name (e.g. 'Done', "Won't Do")
            final_column: Exact name of the closing transition

        Returns:
            True once Jira accepted the transition

        Raises:
            TransitionNotFoundError: If no transition is named ``final_column``
        """
        transition = next(
            (t for t in self.get_transitions(issue_key) if t.name == final_column),
            None,
        )
        if transition is None:
            raise TransitionNotFoundError(issue_key, final_column)

        payload = {
            "transition": {"id": transition.id},
            "fields": {"resolution": {"name": resolution}},
        }
        logger.info(f"Resolving {issue_key} as '{resolution}' via '{final_column}'")
        try:
            self.jira.post(
                issue_path(issue_key, "transitions"),
                data=payload,
                params={"expand": "transitions.fields"},
            )
        except HTTPError as http_err:
            logger.error(f"HTTP error resolving {issue_key}: {http_err}")
            raise
        return True
