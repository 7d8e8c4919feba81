"""Module for Jira user operations."""

import logging

from ..models.jira import JiraUser
from .client import JiraClient
from .constants import (
    ASSIGNABLE_USERS_RESOURCE,
    USER_PAGE_SIZE,
    USER_SEARCH_MAX_OFFSET,
    USER_SEARCH_START_AT,
)

logger = logging.getLogger("jira-wrapper")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_project_users(self, project_key: str) -> list[JiraUser]:
        """
        Get the users that can be assigned issues of a project.

        Pages of ``USER_PAGE_SIZE`` are requested until Jira returns an empty
        page or the offset reaches ``USER_SEARCH_MAX_OFFSET``.

        Args:
            project_key: The project key (e.g. 'PROJ')

        Returns:
            Assignable users in the order Jira returns them
        """
        path = self._resource(ASSIGNABLE_USERS_RESOURCE)
        users: list[JiraUser] = []

        for start_at in range(
            USER_SEARCH_START_AT, USER_SEARCH_MAX_OFFSET, USER_PAGE_SIZE
        ):
            page = self._get_json(
                path,
                params={
                    "project": project_key,
                    "startAt": start_at,
                    "maxResults": USER_PAGE_SIZE,
                },
            )
            if not page:
                break
            users.extend(
                JiraUser.from_api_response(user)
                for user in page
                if isinstance(user, dict)
            )

        logger.debug(f"Found {len(users)} assignable users in {project_key}")
        return users
