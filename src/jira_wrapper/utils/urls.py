"""URL-related utility functions for jira-wrapper."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if url is None or not url:
        return False

    parsed_url = urlparse(url)
    hostname = parsed_url.hostname or ""

    # Localhost and private network addresses are never Cloud
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
    )


def issue_path(issue_key: str, *parts: str, api_version: int | str = 2) -> str:
    """Build the REST path of an issue resource.

    Args:
        issue_key: The issue key (e.g. 'PROJ-123')
        parts: Optional sub-resources (e.g. 'transitions', 'worklog')
        api_version: REST API version segment

    Returns:
        A relative path such as ``rest/api/3/issue/PROJ-123/worklog``
    """
    segments = [f"rest/api/{api_version}/issue", issue_key, *parts]
    return "/".join(str(s).strip("/") for s in segments if s)
