"""
Run configuration, built once at startup and read-only afterwards.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from . import github_utils as ghu
from .exceptions import ConfigurationError
from .utils import PassError

logger: logging.Logger = logging.getLogger(__name__)

SOURCE_REPO_ENV_VAR: Final[str] = "GITHUB_FROM_REPO_URL"
DESTINATION_REPO_ENV_VAR: Final[str] = "GITHUB_TO_REPO_URL"
SOURCE_TOKEN_ENV_VAR: Final[str] = "GITHUB_FROM_TOKEN"  # noqa: S105
DESTINATION_TOKEN_ENV_VAR: Final[str] = "GITHUB_TO_TOKEN"  # noqa: S105
API_URL_ENV_VAR: Final[str] = "GITHUB_API_URL"

_REPO_PATH_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+")


def validate_repo_path(repo_path: str, role: str) -> str:
    """Return the stripped ``owner/repo`` path or raise ConfigurationError."""
    repo_path = repo_path.strip()
    if not _REPO_PATH_RE.fullmatch(repo_path):
        msg = f"Invalid {role} repository path '{repo_path}'. Expected format: 'owner/repository'"
        raise ConfigurationError(msg)
    return repo_path


@dataclass(frozen=True)
class TransferConfig:
    """Everything a transfer run needs to know about its two repositories."""

    source_repo: str
    destination_repo: str
    source_token: str | None = None
    destination_token: str | None = None
    api_url: str = ghu.DEFAULT_API_URL
    timeout: int = ghu.DEFAULT_TIMEOUT_SECONDS
    dry_run: bool = False

    @classmethod
    def from_sources(
        cls,
        *,
        source_repo: str | None = None,
        destination_repo: str | None = None,
        source_pass_path: str | None = None,
        destination_pass_path: str | None = None,
        api_url: str | None = None,
        timeout: int | None = None,
        dry_run: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> TransferConfig:
        """Build the configuration from explicit values, falling back to the environment.

        Raises:
            ConfigurationError: If a repository is missing or malformed
        """
        environ = os.environ if environ is None else environ

        source_repo = source_repo or environ.get(SOURCE_REPO_ENV_VAR)
        destination_repo = destination_repo or environ.get(DESTINATION_REPO_ENV_VAR)
        if not source_repo or not destination_repo:
            msg = (
                "Source or destination repository is not specified. Pass them as arguments "
                f"or set {SOURCE_REPO_ENV_VAR} and {DESTINATION_REPO_ENV_VAR}."
            )
            raise ConfigurationError(msg)

        source_repo = validate_repo_path(source_repo, "source")
        destination_repo = validate_repo_path(destination_repo, "destination")
        if source_repo == destination_repo:
            logger.warning(
                f"Source and destination repositories are the same ({source_repo}); nothing will be transferred"
            )

        try:
            source_token = ghu.get_token(SOURCE_TOKEN_ENV_VAR, source_pass_path, environ)
            destination_token = ghu.get_token(DESTINATION_TOKEN_ENV_VAR, destination_pass_path, environ)
        except (ValueError, PassError) as e:
            msg = f"Could not read GitHub token: {e}"
            raise ConfigurationError(msg) from e

        return cls(
            source_repo=source_repo,
            destination_repo=destination_repo,
            source_token=source_token,
            destination_token=destination_token,
            api_url=api_url or environ.get(API_URL_ENV_VAR) or ghu.DEFAULT_API_URL,
            timeout=timeout if timeout is not None else ghu.DEFAULT_TIMEOUT_SECONDS,
            dry_run=dry_run,
        )
