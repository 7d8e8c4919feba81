"""Raw Jira REST payloads used across the unit tests."""

MOCK_JIRA_FIELDS = [
    {"id": "summary", "name": "Summary"},
    {"id": "status", "name": "Status"},
    {"id": "labels", "name": "Labels"},
    {"id": "customfield_10010", "name": "Epic Link"},
    {"id": "customfield_10012", "name": "Story Points"},
    {"id": "customfield_10020", "name": "Team Colour"},
    {"id": "customfield_10030", "name": "Attempts"},
    {"id": "customfield_10040", "name": "Sprint"},
]

MOCK_JIRA_ISSUE = {
    "id": "10001",
    "key": "PROJ-123",
    "self": "https://example.atlassian.net/rest/api/2/issue/10001",
    "fields": {
        "summary": "Login page returns 500",
        "description": "Steps to reproduce: open /login",
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-02T11:30:00.000+0000",
        "resolutiondate": None,
        "status": {"id": "3", "name": "In Progress", "description": "Being worked on"},
        "priority": {"id": "2", "name": "High"},
        "issuetype": {"id": "10004", "name": "Bug"},
        "project": {"id": "10000", "key": "PROJ", "name": "Project"},
        "assignee": {
            "accountId": "acc-assignee",
            "displayName": "Ada Lovelace",
            "emailAddress": "ada@example.com",
        },
        "reporter": {"accountId": "acc-reporter", "displayName": "Alan Turing"},
        "creator": {"accountId": "acc-reporter", "displayName": "Alan Turing"},
        "labels": ["backend", "login", "backend"],
        "components": [{"id": "1", "name": "API"}, {"id": "2", "name": "Web"}],
        "customfield_10010": "PROJ-1",
        "customfield_10012": 5.5,
        "customfield_10020": {"id": "100", "value": "Blue"},
        "customfield_10030": 3,
        "customfield_10040": None,
        "customfield_10050": True,
        "customfield_10060": [{"id": 1}],
        "customfield_99999": "orphan",
    },
}

# Custom field ids of MOCK_JIRA_ISSUE that resolve to a value, in order
MOCK_RESOLVED_CUSTOM_FIELDS = [
    ("customfield_10010", "Epic Link", "PROJ-1"),
    ("customfield_10012", "Story Points", 5.5),
    ("customfield_10020", "Team Colour", "Blue"),
    ("customfield_10030", "Attempts", 3),
    ("customfield_99999", "customfield_99999", "orphan"),
]

MOCK_JIRA_SUBTASK = {
    "id": "10002",
    "key": "PROJ-124",
    "fields": {
        "summary": "Fix session cookie",
        "created": "2024-01-03T09:00:00.000+0000",
        "status": {"id": "1", "name": "To Do"},
        "priority": {"id": "3", "name": "Medium"},
        "issuetype": {"id": "10005", "name": "Sub-task"},
        "project": {"id": "10000", "key": "PROJ", "name": "Project"},
        "assignee": None,
        "parent": {"id": "10001", "key": "PROJ-123"},
        "customfield_10010": "PROJ-2",
    },
}

MOCK_JIRA_WORKLOG = {
    "startAt": 0,
    "maxResults": 20,
    "total": 2,
    "worklogs": [
        {
            "id": "20001",
            "author": {"accountId": "acc-assignee", "displayName": "Ada Lovelace"},
            "created": "2024-01-02T09:00:00.000+0000",
            "updated": "2024-01-02T09:00:00.000+0000",
            "started": "2024-01-02T08:00:00.000+0000",
            "timeSpent": "1h",
            "timeSpentSeconds": 3600,
        },
        {
            "id": "20002",
            "author": {"accountId": "acc-reporter", "displayName": "Alan Turing"},
            "created": "2024-01-03T09:00:00.000+0000",
            "started": "2024-01-03T08:30:00.000+0000",
            "timeSpent": "30m",
            "timeSpentSeconds": 1800,
        },
    ],
}

MOCK_JIRA_TRANSITIONS = {
    "expand": "transitions",
    "transitions": [
        {"id": "1", "name": "To Do", "to": {"id": "10000", "name": "To Do"}},
        {"id": "2", "name": "In Progress", "to": {"id": "3", "name": "In Progress"}},
        {"id": "3", "name": "Done", "to": {"id": "10001", "name": "Done"}},
    ],
}

MOCK_ASSIGNABLE_USERS = [
    {
        "accountId": "acc-assignee",
        "displayName": "Ada Lovelace",
        "emailAddress": "ada@example.com",
    },
    {"accountId": "acc-reporter", "displayName": "Alan Turing"},
]


def make_issue(key: str, issue_id: str | None = None, **field_overrides) -> dict:
    """Build a minimal raw issue carrying every required field."""
    fields = {
        "summary": f"Issue {key}",
        "created": "2024-01-01T10:00:00.000+0000",
        "status": {"id": "1", "name": "To Do"},
        "priority": {"id": "3", "name": "Medium"},
        "issuetype": {"id": "10001", "name": "Task"},
        "project": {"id": "10000", "key": key.split("-")[0], "name": "Project"},
    }
    fields.update(field_overrides)
    return {"id": issue_id or key.split("-")[1], "key": key, "fields": fields}
