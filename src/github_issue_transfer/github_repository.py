"""
GitHub implementation of the IssueRepository protocol.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

import requests
from github import GithubException

from .error_policy import api_error_from
from .models import Comment, Issue
from .retry import RetryPolicy

if TYPE_CHECKING:
    from github import Github

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

ACCEPT_HEADER: Final[str] = "application/vnd.github.full+json"


class GitHubIssueRepository:
    """Issues of one GitHub repository, accessed through the REST API.

    The raw endpoints are called with PyGithub's requester, which supplies
    authentication, the API base URL and typed exceptions. Every call is
    wrapped in the retry policy, and failures are translated into ApiError.
    """

    def __init__(self, client: Github, full_name: str, *, retry_policy: RetryPolicy | None = None) -> None:
        self.client: Github = client
        self.full_name: str = full_name
        self.retry_policy: RetryPolicy = retry_policy or RetryPolicy()

    @property
    def _issues_url(self) -> str:
        return f"/repos/{self.full_name}/issues"

    def _request(
        self,
        verb: str,
        url: str,
        context: str,
        *,
        parameters: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        idempotent: bool = True,
    ) -> Any:  # noqa: ANN401 - JSON payload
        """Send one request with retries and return the decoded JSON body.

        A non-idempotent request is only resent after a rate-limit rejection.
        A 5xx or a lost response may hide a write that already happened, so
        those fail on the first attempt.
        """

        def attempt() -> Any:  # noqa: ANN401
            try:
                _, data = self.client.requester.requestJsonAndCheck(
                    verb,
                    url,
                    parameters=parameters,
                    headers={"Accept": ACCEPT_HEADER},
                    input=payload,
                )
            except (GithubException, requests.exceptions.RequestException) as e:
                error = api_error_from(e, context)
                if not idempotent and not error.rate_limited:
                    error.transient = False
                raise error from e
            return data

        return self.retry_policy.call(attempt, context)

    def list_issues(self, page: int, per_page: int) -> list[Issue]:
        data = self._request(
            "GET",
            self._issues_url,
            f"getting issues page {page} of {self.full_name}",
            parameters={"state": "all", "per_page": per_page, "page": page},
        )
        return [Issue.from_api(item) for item in data or []]

    def list_comments(self, issue_number: int, page: int, per_page: int) -> list[Comment]:
        data = self._request(
            "GET",
            f"{self._issues_url}/{issue_number}/comments",
            f"getting comments page {page} of issue #{issue_number} in {self.full_name}",
            parameters={"per_page": per_page, "page": page},
        )
        return [Comment.from_api(item) for item in data or []]

    def create_issue(self, title: str, body: str | None, labels: list[str], assignees: list[str]) -> int:
        data = self._request(
            "POST",
            self._issues_url,
            f"creating issue '{title}' in {self.full_name}",
            payload={"title": title, "body": body, "labels": labels, "assignees": assignees},
            idempotent=False,
        )
        logger.info(f"Created issue: {data.get('url')}")
        return int(data["number"])

    def update_issue_state(self, issue_number: int, state: str, state_reason: str | None) -> None:
        data = self._request(
            "PATCH",
            f"{self._issues_url}/{issue_number}",
            f"patching issue #{issue_number} in {self.full_name}",
            payload={"state": state, "state_reason": state_reason},
        )
        logger.info(f"Patched issue: {data.get('url')}")

    def create_comment(self, issue_number: int, body: str) -> None:
        data = self._request(
            "POST",
            f"{self._issues_url}/{issue_number}/comments",
            f"creating comment on issue #{issue_number} in {self.full_name}",
            payload={"body": body},
            idempotent=False,
        )
        logger.info(f"Created issue comment: {data.get('url')}")
