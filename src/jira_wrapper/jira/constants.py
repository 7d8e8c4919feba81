"""Constants specific to Jira operations."""

# Page size of rest/api/2/search; also the largest single-request search
SEARCH_PAGE_SIZE = 100

# Page size of rest/api/3/field/search
FIELD_PAGE_SIZE = 50

# rest/api/2/user/assignable/search paging
USER_PAGE_SIZE = 100
USER_SEARCH_START_AT = 1
USER_SEARCH_MAX_OFFSET = 1_000_000

# One worker per independent extraction step of the issue parser
PARSE_WORKERS = 4

# REST resources, relative to rest/api/{version}/
FIELD_SEARCH_RESOURCE = "field/search"
SEARCH_RESOURCE = "search"
ISSUE_RESOURCE = "issue"
ASSIGNABLE_USERS_RESOURCE = "user/assignable/search"
