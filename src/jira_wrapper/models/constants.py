"""
Constants and default values for model conversions.

This module centralizes the default values and fallbacks used when
converting API responses to models.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"
NOT_ASSIGNED = "Not assigned"
NONE_VALUE = "None"

#
# Jira defaults
#
JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"

# Issue links
DEFAULT_LINK_RELATION = "Related"
DEFAULT_LINK_PHRASE = "is related to"

# Initial column of newly created issues; no transition is needed to stay there
BACKLOG_STATUS = "Backlog"
