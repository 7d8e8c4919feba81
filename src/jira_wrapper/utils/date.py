"""Utility functions for date operations."""

from datetime import datetime

import dateutil.parser


def parse_date(value: str | None) -> datetime | None:
    """
    Parse a Jira REST timestamp such as ``2024-01-01T10:00:00.000+0000``.

    Args:
        value: Timestamp text from an issue or worklog payload

    Returns:
        Timezone-aware datetime, or None when the value is missing or empty

    Raises:
        ValueError: If the text is not a timestamp
    """
    if not value:
        return None
    return dateutil.parser.isoparse(value)
