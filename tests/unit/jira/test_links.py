"""Tests for the Jira Links mixin."""

from unittest.mock import call

import pytest
import requests

from jira_wrapper.jira import JiraFetcher
from jira_wrapper.jira.links import LinksMixin
from jira_wrapper.models.jira import LinkedIssueSpec


def link_payload(key, name="Related", inward="is related to", outward="is related to"):
    return {
        "update": {
            "issuelinks": [
                {
                    "add": {
                        "type": {"name": name, "inward": inward, "outward": outward},
                        "outwardIssue": {"key": key},
                    }
                }
            ]
        }
    }


class TestLinksMixin:
    """Tests for the LinksMixin class."""

    @pytest.fixture
    def links_mixin(self, jira_fetcher: JiraFetcher) -> LinksMixin:
        return jira_fetcher

    def test_add_related_one_request_per_link(self, links_mixin):
        """Test that every link is sent on its own, in order."""
        result = links_mixin.add_related(
            "PROJ-1",
            [
                LinkedIssueSpec(linked_key="PROJ-2"),
                LinkedIssueSpec(
                    linked_key="OPS-9",
                    relation_name="Blocks",
                    inward="is blocked by",
                    outward="blocks",
                ),
            ],
        )

        assert result is True
        assert links_mixin.jira.put.call_args_list == [
            call("rest/api/2/issue/PROJ-1", data=link_payload("PROJ-2")),
            call(
                "rest/api/2/issue/PROJ-1",
                data=link_payload("OPS-9", "Blocks", "is blocked by", "blocks"),
            ),
        ]

    def test_add_related_empty(self, links_mixin):
        assert links_mixin.add_related("PROJ-1", []) is True
        links_mixin.jira.put.assert_not_called()

    def test_add_related_stops_at_first_failure(self, links_mixin):
        """Test that links after a failing one are not attempted."""
        links_mixin.jira.put.side_effect = [None, requests.HTTPError("404"), None]

        with pytest.raises(requests.HTTPError):
            links_mixin.add_related(
                "PROJ-1",
                [
                    LinkedIssueSpec(linked_key="PROJ-2"),
                    LinkedIssueSpec(linked_key="PROJ-404"),
                    LinkedIssueSpec(linked_key="PROJ-3"),
                ],
            )

        assert links_mixin.jira.put.call_count == 2
