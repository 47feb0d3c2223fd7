"""
Tests for issue and comment models.
"""

import pytest

from github_issue_transfer.models import Comment, Issue


@pytest.mark.unit
class TestIssueFromApi:
    """Test building issues from REST payloads."""

    def test_minimal_payload(self) -> None:
        issue = Issue.from_api({"number": 1, "title": "A"})

        assert issue == Issue(number=1, title="A")
        assert issue.body is None
        assert issue.assignee is None
        assert issue.is_open
        assert issue.comments == 0

    def test_null_collections(self) -> None:
        issue = Issue.from_api(
            {"number": 1, "title": "A", "assignee": None, "assignees": None, "labels": None, "comments": None}
        )

        assert issue.assignees == ()
        assert issue.labels == ()
        assert issue.comments == 0

    def test_label_names_and_assignee_logins(self) -> None:
        issue = Issue.from_api(
            {
                "number": 1,
                "title": "A",
                "labels": [{"name": "bug", "color": "ff0000"}, "plain"],
                "assignees": [{"login": "alice"}, {"login": "bob"}],
            }
        )

        assert issue.label_names() == ["bug", "plain"]
        assert issue.assignee_logins() == ["alice", "bob"]

    def test_closed_issue(self) -> None:
        issue = Issue.from_api({"number": 1, "title": "A", "state": "closed", "state_reason": "not_planned"})

        assert not issue.is_open
        assert issue.state_reason == "not_planned"

    def test_issues_are_immutable(self) -> None:
        issue = Issue(number=1, title="A")

        with pytest.raises(AttributeError):
            issue.title = "B"  # type: ignore[misc]


@pytest.mark.unit
class TestCommentFromApi:
    def test_body(self) -> None:
        assert Comment.from_api({"id": 3, "body": "hi"}) == Comment(body="hi")

    def test_missing_body(self) -> None:
        assert Comment.from_api({"id": 3}).body is None
