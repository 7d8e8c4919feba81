"""
Jira issue link models.
"""

from typing import Any

from pydantic import BaseModel

from ..constants import DEFAULT_LINK_PHRASE, DEFAULT_LINK_RELATION


class LinkedIssueSpec(BaseModel):
    """
    Caller-supplied description of a link from an issue to ``linked_key``.
    """

    linked_key: str
    relation_name: str = DEFAULT_LINK_RELATION
    inward: str = DEFAULT_LINK_PHRASE
    outward: str = DEFAULT_LINK_PHRASE

    def to_update_payload(self) -> dict[str, Any]:
        """Build the ``update`` document adding this link to an issue."""
        return {
            "update": {
                "issuelinks": [
                    {
                        "add": {
                            "type": {
                                "name": self.relation_name,
                                "inward": self.inward,
                                "outward": self.outward,
                            },
                            "outwardIssue": {"key": self.linked_key},
                        }
                    }
                ]
            }
        }
