"""
Replay of planned issues, their state and their comments in the destination.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import MigrationError
from .models import TransferStats
from .pagination import fetch_comments

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .governor import RateGovernor
    from .models import Issue
    from .protocols import IssueRepository

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)


class IssueReplicator:
    """Recreates source issues in the destination repository, one at a time.

    Each issue is fully replicated (creation, state, comments) before the next
    one starts. Any failure aborts the run; nothing already created is rolled
    back.
    """

    def __init__(
        self,
        source: IssueRepository,
        destination: IssueRepository,
        governor: RateGovernor,
        stats: TransferStats | None = None,
    ) -> None:
        self.source: IssueRepository = source
        self.destination: IssueRepository = destination
        self.governor: RateGovernor = governor
        self.stats: TransferStats = stats if stats is not None else TransferStats()

    def replicate(self, issue: Issue) -> int:
        """Replicate one issue and return its number in the destination."""
        logger.info(f"Creating issue: {issue.title} in {self.destination.full_name}")
        created_number = self.destination.create_issue(
            issue.title,
            issue.body,
            issue.label_names(),
            issue.assignee_logins(),
        )
        self.stats.issues_created += 1
        self.governor.wait()

        # Issues are always created open
        if not issue.is_open:
            logger.info(
                f"Patching issue #{created_number} '{issue.title}' from open to {issue.state} "
                f"in {self.destination.full_name}"
            )
            self.destination.update_issue_state(created_number, issue.state, issue.state_reason)
            self.stats.states_patched += 1
            self.governor.wait()

        if issue.comments > 0:
            try:
                self._replicate_comments(issue, created_number)
            except MigrationError:
                logger.error(
                    f"Comment transfer aborted for issue '{issue.title}'; destination issue "
                    f"#{created_number} is left with a partial comment set and will not be "
                    "backfilled by a re-run"
                )
                raise

        self.governor.wait()
        return created_number

    def _replicate_comments(self, issue: Issue, created_number: int) -> None:
        comments = fetch_comments(self.source, issue.number)
        logger.info(f"Issue '{issue.title}': {len(comments)} comment(s) to transfer")
        for comment in comments:
            logger.debug(f"Creating comment on #{created_number} '{issue.title}': {comment.body}")
            self.destination.create_comment(created_number, comment.body or "")
            self.stats.comments_created += 1
            self.governor.wait()

    def replicate_all(self, plan: Iterable[Issue]) -> list[tuple[int, int]]:
        """Replicate every planned issue in order.

        Returns:
            (source number, destination number) pairs of the created issues
        """
        created: list[tuple[int, int]] = []
        for issue in plan:
            created.append((issue.number, self.replicate(issue)))
        return created
