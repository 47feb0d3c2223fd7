"""Data models for issues and comments exchanged with the GitHub REST API.

The models hold the fields needed to recreate an issue in another repository.
They are built from the JSON payloads returned by the API and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_STATE = "open"


@dataclass(frozen=True)
class Issue:
    """An issue fetched from a repository.

    ``number`` is the identifier assigned by the repository the issue was
    fetched from. ``title`` is the key used to match issues across
    repositories.
    """

    number: int
    title: str
    body: str | None = None
    assignee: str | None = None
    assignees: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)
    state: str = DEFAULT_STATE
    state_reason: str | None = None
    comments: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Issue:
        """Build an Issue from a REST API issue payload."""
        assignee: dict[str, Any] | None = data.get("assignee")
        return cls(
            number=data["number"],
            title=data["title"],
            body=data.get("body"),
            assignee=assignee["login"] if assignee else None,
            assignees=tuple(user["login"] for user in data.get("assignees") or []),
            labels=tuple(_label_name(label) for label in data.get("labels") or []),
            state=data.get("state") or DEFAULT_STATE,
            state_reason=data.get("state_reason"),
            comments=data.get("comments") or 0,
        )

    @property
    def is_open(self) -> bool:
        return self.state == DEFAULT_STATE

    def label_names(self) -> list[str]:
        return list(self.labels)

    def assignee_logins(self) -> list[str]:
        return list(self.assignees)


@dataclass(frozen=True)
class Comment:
    """A comment on an issue. Comment order is significant."""

    body: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Comment:
        return cls(body=data.get("body"))


def _label_name(label: dict[str, Any] | str) -> str:
    # The issues endpoint returns label objects, but accepts plain names on input
    if isinstance(label, str):
        return label
    return label["name"]


@dataclass
class TransferStats:
    """Statistics collected during a transfer run."""

    source_issues: int = 0
    destination_issues: int = 0
    issues_planned: int = 0
    issues_created: int = 0
    states_patched: int = 0
    comments_created: int = 0


@dataclass
class TransferResult:
    """Result of a transfer run."""

    source_repo: str
    destination_repo: str
    stats: TransferStats
    plan: list[Issue] = field(default_factory=list)
    created: list[tuple[int, int]] = field(default_factory=list)  # (source number, destination number)
    dry_run: bool = False
