"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira

from ..models.jira import JiraField
from ..utils.ssl import configure_ssl_verification
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jira-wrapper")


class JiraClient:
    """Base client for Jira API interactions.

    Holds the ``atlassian.Jira`` REST client used as the transport by every
    operation mixin. Calls block until Jira answers; HTTP errors raised by the
    transport are never retried.
    """

    _field_catalog_cache: list[JiraField] | None

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        if not self.config.is_auth_configured():
            error_msg = "Jira client requires a URL, a username and an API token"
            raise ValueError(error_msg)

        self.jira = Jira(
            url=self.config.url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
        )

        configure_ssl_verification(
            url=self.config.url,
            session=self.jira._session,
            ssl_verify=self.config.ssl_verify,
        )

        self._field_catalog_cache = None

    @classmethod
    def from_credentials(
        cls, url: str, username: str, api_token: str, ssl_verify: bool = True
    ) -> "JiraClient":
        """Create a client for ``url`` authenticating with username and API token."""
        return cls(
            JiraConfig(
                url=url,
                username=username,
                api_token=api_token,
                ssl_verify=ssl_verify,
            )
        )

    def _resource(self, resource: str, api_version: int = 2) -> str:
        """Relative path of a REST resource, e.g. ``rest/api/3/field/search``."""
        return self.jira.resource_url(resource, api_version=api_version)

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON document."""
        logger.debug(f"GET {path} params={params}")
        return self.jira.get(path, params=params)
