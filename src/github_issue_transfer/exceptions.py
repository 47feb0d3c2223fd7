"""
Custom exception classes for the GitHub issue transfer tool.
"""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for transfer errors."""


class ConfigurationError(MigrationError):
    """Raised when required configuration is missing or malformed."""


class ApiError(MigrationError):
    """Raised when a call to the GitHub API fails.

    ``status`` is the HTTP status code, or None when no response was received.
    ``detail`` is the message supplied by the provider, if any.
    ``transient`` marks failures worth retrying (rate limits, 5xx, transport errors).
    ``rate_limited`` marks rejections sent before the request was processed (429 or
    an exceeded rate limit), the only failures after which a create may be resent.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        detail: str | None = None,
        transient: bool = False,
        rate_limited: bool = False,
    ) -> None:
        super().__init__(message)
        self.status: int | None = status
        self.detail: str | None = detail
        self.transient: bool = transient
        self.rate_limited: bool = rate_limited


class NotFoundError(ApiError):
    """Raised when the API answers 404 for a repository, issue or collection."""
