"""Exceptions raised by jira-wrapper.

Transport failures are not wrapped: ``requests.exceptions.HTTPError`` and
connection errors reach the caller exactly as the REST client raised them.
"""


class JiraWrapperError(Exception):
    """Base class for errors raised by jira-wrapper itself."""


class TransitionNotFoundError(JiraWrapperError, ValueError):
    """No workflow transition of an issue matches the requested destination."""

    def __init__(self, issue_key: str, destination: str) -> None:
        self.issue_key = issue_key
        self.destination = destination
        super().__init__(
            f"Couldn't find a transition to '{destination}' for issue "
            f"{issue_key or '<unknown>'}, please check the name"
        )


class IssueParseError(JiraWrapperError, ValueError):
    """A raw issue from the API lacks a field required to build a JiraIssue."""

    def __init__(self, issue_key: str | None, field: str) -> None:
        self.issue_key = issue_key
        self.field = field
        super().__init__(
            f"Issue {issue_key or '<unknown>'} is missing required field '{field}'"
        )
