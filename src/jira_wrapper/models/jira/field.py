"""
Jira field models.

A ``JiraField`` is an entry of the field catalog (id and display name). Issues
never share catalog entries: each custom field attached to an issue is a clone
carrying that issue's value.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)

CUSTOM_FIELD_MARKER = "custom"

FieldValue = str | float | int


class JiraField(ApiModel):
    """
    Model representing a Jira field, optionally carrying a resolved value.
    """

    id: str
    name: str = EMPTY_STRING
    value: FieldValue | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraField":
        """
        Create a catalog JiraField from a field search result entry.

        Args:
            data: One element of the ``values`` array of ``field/search``

        Returns:
            A JiraField instance without a value
        """
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or EMPTY_STRING),
        )

    def clone(self, value: FieldValue | None = None) -> "JiraField":
        """Return an independent copy of this field carrying ``value``."""
        return self.model_copy(update={"value": value}, deep=True)

    @property
    def is_custom(self) -> bool:
        return CUSTOM_FIELD_MARKER in self.id


def is_custom_field(field_id: str) -> bool:
    """Check whether a raw issue field key denotes a custom field."""
    return CUSTOM_FIELD_MARKER in field_id


def coerce_field_value(raw: Any) -> FieldValue | None:
    """
    Convert a raw custom field token to the value stored on a JiraField.

    Strings, integers and floats are kept as they are. Objects contribute their
    ``value`` member ("" when it is absent), which is how Jira renders select
    lists and radio buttons. Any other token (null, boolean, array) is not
    supported and yields None.

    Args:
        raw: The raw JSON value of the field

    Returns:
        The converted value, or None when the token kind is not supported
    """
    # bool is a subclass of int and must not be taken for a number
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict):
        option_value = raw.get("value")
        if option_value is None:
            return EMPTY_STRING
        return option_value if isinstance(option_value, str) else str(option_value)
    if isinstance(raw, float):
        return raw
    if isinstance(raw, int):
        return raw
    return None
