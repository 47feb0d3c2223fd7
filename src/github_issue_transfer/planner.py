"""
Computation of the issues still missing from the destination repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import Issue


def plan_transfer(source: Sequence[Issue], destination: Sequence[Issue]) -> list[Issue]:
    """Return the source issues whose title is not used by any destination issue.

    Titles are compared exactly (no case or whitespace normalization). Source
    order is preserved.
    """
    destination_titles = {issue.title for issue in destination}
    return [issue for issue in source if issue.title not in destination_titles]
