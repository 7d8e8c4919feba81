"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..utils.logging import log_config_param
from ..utils.urls import is_atlassian_cloud_url

logger = logging.getLogger("jira-wrapper")


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Connections use basic authentication with a username (the account email on
    Jira Cloud) and an API token. Values are fixed once the client is built.
    """

    url: str  # Base URL for Jira
    username: str | None = None  # Email or username
    api_token: str | None = None  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "JiraConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Optional path of a ``.env`` file loaded before reading
                the environment; variables already set take precedence

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        if env_file:
            load_dotenv(env_file, override=False)

        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        if not (username and api_token):
            error_msg = "Jira authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=url,
            username=username,
            api_token=api_token,
            ssl_verify=ssl_verify,
        )
        config.log()
        return config

    def is_auth_configured(self) -> bool:
        """Check if the credentials needed for API calls are present.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        return bool(self.url and self.username and self.api_token)

    def log(self) -> None:
        """Log the configuration at INFO level with the token masked."""
        log_config_param(logger, "URL", self.url)
        log_config_param(logger, "username", self.username)
        log_config_param(logger, "API token", self.api_token, sensitive=True)
        log_config_param(logger, "SSL verify", str(self.ssl_verify))
