"""
Pytest configuration and fixtures.

Unit tests run the transfer engine against FakeRepository, an in-memory
IssueRepository that records every call in a shared event list. The rate
governor and retry policy record their sleeps in the same list, so tests can
assert on the exact interleaving of writes and delays.

Integration tests are skipped unless the environment names real repositories.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import pytest

from github_issue_transfer.exceptions import NotFoundError
from github_issue_transfer.governor import RateGovernor
from github_issue_transfer.models import Comment, Issue

if TYPE_CHECKING:
    from collections.abc import Callable

INTEGRATION_ENV_VARS = ("GITHUB_TEST_SOURCE_REPO", "GITHUB_TEST_DESTINATION_REPO")

Event = tuple[Any, ...]


class FakeRepository:
    """In-memory repository implementing the IssueRepository protocol."""

    def __init__(
        self,
        full_name: str,
        events: list[Event],
        issues: list[Issue] | None = None,
        comments: dict[int, list[Comment]] | None = None,
        *,
        exists: bool = True,
    ) -> None:
        self.full_name = full_name
        self.events = events
        self.issues: list[Issue] = list(issues or [])
        self.comments: dict[int, list[Comment]] = {k: list(v) for k, v in (comments or {}).items()}
        self.exists = exists
        # (method name, key) -> exception; key None matches every call of that method
        self.failures: dict[tuple[str, Any], Exception] = {}
        self._next_number = max((issue.number for issue in self.issues), default=0) + 1

    def fail(self, method: str, error: Exception, key: Any = None) -> None:  # noqa: ANN401
        self.failures[(method, key)] = error

    def _check(self, method: str, key: Any) -> None:  # noqa: ANN401
        error = self.failures.get((method, key)) or self.failures.get((method, None))
        if error is not None:
            raise error

    def _record(self, *event: Any) -> None:  # noqa: ANN401
        self.events.append((self.full_name, *event))

    def list_issues(self, page: int, per_page: int) -> list[Issue]:
        self._record("list_issues", page)
        if not self.exists:
            msg = f"Repository {self.full_name} not found"
            raise NotFoundError(msg, status=404, detail="Not Found")
        self._check("list_issues", page)
        start = (page - 1) * per_page
        return self.issues[start : start + per_page]

    def list_comments(self, issue_number: int, page: int, per_page: int) -> list[Comment]:
        self._record("list_comments", issue_number, page)
        self._check("list_comments", issue_number)
        if issue_number not in self.comments:
            msg = f"Issue #{issue_number} not found"
            raise NotFoundError(msg, status=404, detail="Not Found")
        start = (page - 1) * per_page
        return self.comments[issue_number][start : start + per_page]

    def create_issue(self, title: str, body: str | None, labels: list[str], assignees: list[str]) -> int:
        self._record("create_issue", title, body, labels, assignees)
        self._check("create_issue", title)
        number = self._next_number
        self._next_number += 1
        self.issues.append(Issue(number=number, title=title, body=body, labels=tuple(labels), assignees=tuple(assignees)))
        self.comments[number] = []
        return number

    def update_issue_state(self, issue_number: int, state: str, state_reason: str | None) -> None:
        self._record("update_issue_state", issue_number, state, state_reason)
        self._check("update_issue_state", issue_number)

    def create_comment(self, issue_number: int, body: str) -> None:
        self._record("create_comment", issue_number, body)
        self._check("create_comment", body)
        self.comments.setdefault(issue_number, []).append(Comment(body=body))

    def writes(self) -> list[Event]:
        """Recorded mutating calls against this repository, in order."""
        return [
            e
            for e in self.events
            if e[0] == self.full_name and e[1] in ("create_issue", "update_issue_state", "create_comment")
        ]


@pytest.fixture
def events() -> list[Event]:
    return []


@pytest.fixture
def governor(events: list[Event]) -> RateGovernor:
    """A rate governor that records its delays instead of sleeping."""
    return RateGovernor(sleep=lambda seconds: events.append(("sleep", seconds)))


@pytest.fixture
def make_repo(events: list[Event]) -> Callable[..., FakeRepository]:
    def factory(full_name: str, issues: list[Issue] | None = None, **kwargs: Any) -> FakeRepository:  # noqa: ANN401
        return FakeRepository(full_name, events, issues, **kwargs)

    return factory


@pytest.fixture(autouse=True)
def check_integration_test_env_vars(request: pytest.FixtureRequest) -> None:
    """Skip integration tests when the repositories they need are not configured."""
    if request.node.get_closest_marker("integration") is None:
        return

    missing = [name for name in INTEGRATION_ENV_VARS if not os.environ.get(name)]
    if missing:
        pytest.skip(f"Integration tests require environment variables: {', '.join(missing)}")
