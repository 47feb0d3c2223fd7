"""
Paginated reads of complete issue and comment collections.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, TypeVar

from .exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models import Comment, Issue
    from .protocols import IssueRepository

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

PER_PAGE: Final[int] = 100


def fetch_all_pages(
    fetch_page: Callable[[int, int], list[T]],
    description: str,
    *,
    per_page: int = PER_PAGE,
) -> list[T]:
    """Fetch every page of a collection and concatenate them in order.

    Pages are requested from 1 upwards until one holds fewer than ``per_page``
    items, so a full last page costs one extra (empty) request.

    Args:
        fetch_page: Called with (page, per_page), returns the items of that page
        description: What is being fetched, for log messages
        per_page: Page size

    Returns:
        All items, or an empty list if the collection does not exist (404)
    """
    items: list[T] = []
    page = 1
    try:
        while True:
            batch = fetch_page(page, per_page)
            items.extend(batch)
            if len(batch) < per_page:
                break
            page += 1
    except NotFoundError as e:
        logger.warning(f"Not found while getting {description}: {e}")
        return []

    logger.debug(f"Fetched {len(items)} {description} in {page} page(s)")
    return items


def fetch_issues(repo: IssueRepository) -> list[Issue]:
    """Fetch all issues of a repository, open and closed."""
    issues = fetch_all_pages(repo.list_issues, f"issues of {repo.full_name}")
    logger.debug(f"Issues in {repo.full_name}: {[issue.title for issue in issues]}")
    return issues


def fetch_comments(repo: IssueRepository, issue_number: int) -> list[Comment]:
    """Fetch all comments of an issue, oldest first."""

    def fetch_page(page: int, per_page: int) -> list[Comment]:
        return repo.list_comments(issue_number, page, per_page)

    return fetch_all_pages(fetch_page, f"comments of issue #{issue_number} in {repo.full_name}")
