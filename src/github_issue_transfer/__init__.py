"""
GitHub Issue Transfer Tool

Copies issues from one GitHub repository to another, preserving title, body,
labels, assignees, state and comment order. Issues whose title already exists
in the destination are skipped, so runs can be repeated safely.
"""

from __future__ import annotations

from .cli import main
from .config import TransferConfig
from .exceptions import ApiError, ConfigurationError, MigrationError, NotFoundError
from .github_repository import GitHubIssueRepository
from .migrator import IssueTransfer
from .models import Comment, Issue, TransferResult, TransferStats
from .planner import plan_transfer
from .utils import setup_logging

# Package version
__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "Comment",
    "ConfigurationError",
    "GitHubIssueRepository",
    "Issue",
    "IssueTransfer",
    "MigrationError",
    "NotFoundError",
    "TransferConfig",
    "TransferResult",
    "TransferStats",
    "main",
    "plan_transfer",
    "setup_logging",
]
