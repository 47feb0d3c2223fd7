"""
Command-line interface for the GitHub issue transfer tool.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from . import github_utils as ghu
from .config import TransferConfig
from .exceptions import MigrationError
from .github_repository import GitHubIssueRepository
from .migrator import IssueTransfer
from .models import TransferResult
from .utils import setup_logging

logger: logging.Logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Transfer issues, their state and comments from one GitHub repository to another"
    )

    # Positional arguments, optional when set in the environment
    _ = parser.add_argument(
        "source_repo", nargs="?", help="Source repository path (owner/repo). Default: $GITHUB_FROM_REPO_URL"
    )
    _ = parser.add_argument(
        "destination_repo", nargs="?", help="Destination repository path (owner/repo). Default: $GITHUB_TO_REPO_URL"
    )

    _ = parser.add_argument(
        "--source-pass-token", help="Path for the source token in pass utility (default: $GITHUB_FROM_TOKEN)"
    )
    _ = parser.add_argument(
        "--destination-pass-token", help="Path for the destination token in pass utility (default: $GITHUB_TO_TOKEN)"
    )
    _ = parser.add_argument("--api-url", help=f"GitHub API base URL (default: $GITHUB_API_URL or {ghu.DEFAULT_API_URL})")
    _ = parser.add_argument(
        "--timeout", type=int, help=f"HTTP timeout in seconds (default: {ghu.DEFAULT_TIMEOUT_SECONDS})"
    )
    _ = parser.add_argument(
        "--dry-run", "-n", action="store_true", help="Only list the issues that would be transferred"
    )
    _ = parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return parser.parse_args(argv)


def _print_report(result: TransferResult) -> None:
    """Print a summary of the transfer run."""
    stats = result.stats
    print(f"Source:      {result.source_repo} ({stats.source_issues} issues)")
    print(f"Destination: {result.destination_repo} ({stats.destination_issues} issues)")

    if result.dry_run:
        print(f"Issues that would be transferred: {stats.issues_planned}")
        for issue in result.plan:
            print(f"  #{issue.number} [{issue.state}] {issue.title}")
        return

    print(f"Issues created:  {stats.issues_created}")
    print(f"States patched:  {stats.states_patched}")
    print(f"Comments added:  {stats.comments_created}")
    for source_number, destination_number in result.created:
        print(f"  #{source_number} -> #{destination_number}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_arguments(argv)

    verbose: bool = getattr(args, "verbose", False)
    setup_logging(verbose=verbose)
    _ = load_dotenv()

    try:
        config = TransferConfig.from_sources(
            source_repo=args.source_repo,
            destination_repo=args.destination_repo,
            source_pass_path=args.source_pass_token,
            destination_pass_path=args.destination_pass_token,
            api_url=args.api_url,
            timeout=args.timeout,
            dry_run=args.dry_run,
        )

        source = GitHubIssueRepository(
            ghu.get_client(config.source_token, base_url=config.api_url, timeout=config.timeout),
            config.source_repo,
        )
        destination = GitHubIssueRepository(
            ghu.get_client(config.destination_token, base_url=config.api_url, timeout=config.timeout),
            config.destination_repo,
        )

        result = IssueTransfer(source, destination, dry_run=config.dry_run).run()
    except MigrationError as e:
        logger.error(f"Transfer failed: {e}")  # noqa: TRY400
        sys.exit(1)
    except Exception:
        logger.exception("Transfer failed")
        sys.exit(1)

    _print_report(result)
    sys.exit(0)
