from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Final

from github import Auth, Github

from . import utils

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_API_URL: Final[str] = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 15


def get_token(env_var: str, pass_path: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Get a GitHub token from a pass path, falling back to an environment variable."""
    if pass_path:
        return utils.get_pass_value(pass_path)

    environ = os.environ if environ is None else environ
    token = environ.get(env_var)
    if token:
        return token

    logger.warning(f"No GitHub token specified nor found in {env_var}, using anonymous access")
    return None


def get_client(
    token: str | None = None,
    *,
    base_url: str = DEFAULT_API_URL,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
) -> Github:
    """Get a GitHub client using the token.

    PyGithub's built-in urllib3 retry is disabled: retries are handled by
    RetryPolicy around each call.
    """
    auth = Auth.Token(token) if token else None
    return Github(auth=auth, base_url=base_url, timeout=timeout, retry=None)
