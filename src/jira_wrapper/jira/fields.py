"""Module for Jira field operations."""

import logging

from ..models.jira import JiraField
from .client import JiraClient
from .constants import FIELD_PAGE_SIZE, FIELD_SEARCH_RESOURCE

logger = logging.getLogger("jira-wrapper")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations.

    Field ids of custom fields differ between Jira instances; the catalog maps
    every id to its display name so parsed issues can expose readable names.
    """

    def load_fields(self, refresh: bool = False) -> list[JiraField]:
        """
        Load the field catalog.

        The total is read with a zero-result probe, then the catalog is paged
        through ``FIELD_PAGE_SIZE`` entries at a time.

        Args:
            refresh: When True, forces a reload instead of using the cache

        Returns:
            Catalog entries (no values) in the order Jira returns them
        """
        if self._field_catalog_cache is not None and not refresh:
            return self._field_catalog_cache

        path = self._resource(FIELD_SEARCH_RESOURCE, api_version=3)
        probe = self._get_json(path, params={"maxResults": 0})
        total = int(probe["total"])

        fields: list[JiraField] = []
        for start_at in range(0, total, FIELD_PAGE_SIZE):
            page = self._get_json(
                path, params={"startAt": start_at, "maxResults": FIELD_PAGE_SIZE}
            )
            values = page.get("values", [])
            for value in values:
                fields.append(JiraField.from_api_response(value))
            if not values:
                # The catalog shrank between the probe and this page
                break

        logger.debug(f"Loaded {len(fields)} of {total} Jira fields")
        self._field_catalog_cache = fields
        return fields

    def get_field_by_id(self, field_id: str) -> JiraField | None:
        """
        Get a catalog entry by field id.

        Args:
            field_id: The field id, e.g. 'customfield_10010'

        Returns:
            The catalog entry, or None if the id is unknown
        """
        for field in self.load_fields():
            if field.id == field_id:
                return field
        logger.warning(f"Field with ID '{field_id}' not found")
        return None

    def get_field_by_name(self, field_name: str) -> JiraField | None:
        """
        Get a catalog entry by display name (case-insensitive).

        Args:
            field_name: The display name, e.g. 'Story Points'

        Returns:
            The first matching catalog entry, or None
        """
        lowered = field_name.lower()
        for field in self.load_fields():
            if field.name.lower() == lowered:
                return field
        logger.warning(f"Field '{field_name}' not found")
        return None

    def get_custom_fields(self) -> list[JiraField]:
        """Get the catalog entries of custom fields."""
        return [field for field in self.load_fields() if field.is_custom]
