"""Transfer orchestrator that coordinates the source and destination repositories.

Transfer Flow
-------------
Phase 1: Planning
    - Fetch every issue (open and closed) of the source repository
    - Fetch every issue of the destination repository
    - Keep the source issues whose title is not used in the destination

Phase 2: Replication (skipped in dry-run mode)
    For each planned issue, in source order:
        a. Create the issue with title, body, labels and assignees
        b. Patch its state and state reason unless it is open
        c. Fetch its comments from the source and create them in order

    A fixed delay follows every write to pace requests against the
    destination.

Idempotence
-----------
Nothing is persisted between runs. Re-running recomputes the plan from the
live destination, so issues already transferred (matched by title) are
skipped. An issue whose comment transfer was interrupted matches by title
too, so its missing comments are not added by a re-run.

Error Handling
--------------
- 404 on a read: the collection is treated as empty
- Transient failures: retried with exponential back-off by the repository
- Anything else: logged and raised; the run stops and nothing is rolled back
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .error_policy import log_api_error
from .exceptions import ApiError
from .governor import RateGovernor
from .models import TransferResult, TransferStats
from .pagination import fetch_issues
from .planner import plan_transfer
from .replicator import IssueReplicator

if TYPE_CHECKING:
    from .models import Issue
    from .protocols import IssueRepository

logger = logging.getLogger(__name__)


class IssueTransfer:
    """Transfers missing issues from a source repository to a destination.

    Usage:
        source = GitHubIssueRepository(source_client, "owner/old")
        destination = GitHubIssueRepository(destination_client, "owner/new")
        result = IssueTransfer(source, destination).run()
    """

    source: IssueRepository
    destination: IssueRepository

    def __init__(
        self,
        source: IssueRepository,
        destination: IssueRepository,
        *,
        governor: RateGovernor | None = None,
        dry_run: bool = False,
    ) -> None:
        self.source = source
        self.destination = destination
        self.governor: RateGovernor = governor or RateGovernor()
        self.dry_run: bool = dry_run

    def plan(self, stats: TransferStats | None = None) -> list[Issue]:
        """Return the source issues not yet present in the destination, in source order."""
        stats = stats if stats is not None else TransferStats()
        source_issues = fetch_issues(self.source)
        destination_issues = fetch_issues(self.destination)
        stats.source_issues = len(source_issues)
        stats.destination_issues = len(destination_issues)

        plan = plan_transfer(source_issues, destination_issues)
        stats.issues_planned = len(plan)
        logger.info(f"Number of issue(s) to transfer: {len(plan)}")
        return plan

    def run(self) -> TransferResult:
        """Execute the transfer.

        Returns:
            TransferResult with statistics and the created issue numbers

        Raises:
            ApiError: If any API call fails fatally (after logging it)
        """
        stats = TransferStats()
        result = TransferResult(
            source_repo=self.source.full_name,
            destination_repo=self.destination.full_name,
            stats=stats,
            dry_run=self.dry_run,
        )
        logger.info(f"Transferring issues {self.source.full_name} -> {self.destination.full_name}")

        try:
            result.plan = self.plan(stats)
            if self.dry_run:
                logger.info("Dry run: no issues will be created")
                return result

            replicator = IssueReplicator(self.source, self.destination, self.governor, stats)
            result.created = replicator.replicate_all(result.plan)
        except ApiError as e:
            log_api_error(e)
            raise

        logger.info(
            f"Transfer complete: {stats.issues_created} issue(s), {stats.comments_created} comment(s) created"
        )
        return result
