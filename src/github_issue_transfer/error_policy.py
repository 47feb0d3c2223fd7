"""
Classification of GitHub API failures.

A 404 on a read means the collection does not exist and is treated as empty.
Rate limits, 5xx responses and transport failures are transient and may be
retried, except that creates are only resent after a rate-limit rejection.
Everything else is fatal for the run.
"""

from __future__ import annotations

import logging
from typing import Final

import requests
from github import GithubException, RateLimitExceededException

from .exceptions import ApiError, NotFoundError

logger: logging.Logger = logging.getLogger(__name__)

NOT_FOUND_STATUS: Final[int] = 404
TOO_MANY_REQUESTS_STATUS: Final[int] = 429
TRANSIENT_STATUSES: Final[frozenset[int]] = frozenset({TOO_MANY_REQUESTS_STATUS, 500, 502, 503, 504})


def is_transient_status(status: int | None) -> bool:
    """Return True for statuses worth retrying. None means no response was received."""
    return status is None or status in TRANSIENT_STATUSES


def _provider_detail(exc: GithubException) -> str | None:
    """Extract the provider's error message from a GithubException payload."""
    if isinstance(exc.data, dict):
        message = exc.data.get("message")  # pyright: ignore[reportUnknownMemberType]
        if message:
            return str(message)  # pyright: ignore[reportUnknownArgumentType]
    elif isinstance(exc.data, str) and exc.data:
        return exc.data
    return None


def api_error_from(exc: Exception, context: str) -> ApiError:
    """Translate a PyGithub or requests exception into an ApiError.

    Args:
        exc: The exception raised by the API client
        context: What was being attempted, e.g. "creating issue 'Foo' in owner/repo"

    Returns:
        NotFoundError for 404 responses, ApiError otherwise
    """
    if isinstance(exc, GithubException):
        status: int | None = exc.status
        detail = _provider_detail(exc)
        msg = f"Error {context}: {exc}"
        if status == NOT_FOUND_STATUS:
            return NotFoundError(msg, status=status, detail=detail)
        rate_limited = isinstance(exc, RateLimitExceededException) or status == TOO_MANY_REQUESTS_STATUS
        transient = rate_limited or is_transient_status(status)
        return ApiError(msg, status=status, detail=detail, transient=transient, rate_limited=rate_limited)

    if isinstance(exc, requests.exceptions.RequestException):
        msg = f"Error {context}: the request was made but no response was received ({exc})"
        return ApiError(msg, status=None, detail=None, transient=True)

    msg = f"Error {context}: {exc}"
    return ApiError(msg)


def log_api_error(error: ApiError) -> None:
    """Log a fatal API error with its message, status and provider detail."""
    logger.error(f"Error: {error}")
    if error.status is None:
        logger.error("Status: no response received")
    else:
        logger.error(f"Status: {error.status}")
    if error.detail:
        logger.error(f"Data: {error.detail}")
