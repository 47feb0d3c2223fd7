"""Protocol defining the contract for repositories issues are transferred between.

The transfer engine only talks to repositories through this protocol:

1. Paginated reads of issues and comments (source and destination)
2. Issue creation, state updates and comment creation (destination)

This separation allows:
- Testing the engine with in-memory implementations
- Keeping PyGithub specifics (requester, exception types) in one module
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Comment, Issue


class IssueRepository(Protocol):
    """Protocol for reading and writing the issues of one repository.

    Implementations raise ``NotFoundError`` when the repository or issue does
    not exist and ``ApiError`` for any other failure.

    Example implementations:
        - GitHubIssueRepository: GitHub REST API through PyGithub's requester
    """

    full_name: str
    """Repository path in ``owner/repo`` form, used in log messages."""

    def list_issues(self, page: int, per_page: int) -> list[Issue]:
        """Return one page (1-based) of issues in any state, in API order."""
        ...

    def list_comments(self, issue_number: int, page: int, per_page: int) -> list[Comment]:
        """Return one page (1-based) of the comments of an issue, oldest first."""
        ...

    def create_issue(self, title: str, body: str | None, labels: list[str], assignees: list[str]) -> int:
        """Create an issue and return the number assigned to it.

        Args:
            title: Issue title
            body: Issue body, None for no body
            labels: Label names to apply
            assignees: Logins of the users to assign

        Returns:
            The issue number in this repository
        """
        ...

    def update_issue_state(self, issue_number: int, state: str, state_reason: str | None) -> None:
        """Set the lifecycle state and state reason of an issue."""
        ...

    def create_comment(self, issue_number: int, body: str) -> None:
        """Add a comment to an issue."""
        ...
