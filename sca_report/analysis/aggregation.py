"""Cross-project summary of unresolved issues."""

from __future__ import annotations

import logging
from typing import Iterable

from sca_report.models.identifier import Identifier
from sca_report.models.table import IssueRow, IssueTable

logger = logging.getLogger(__name__)


class IssueSummaryAggregator:
    """Accumulate issue rows, merging rows that refer to the same id.

    The aggregator is not thread-safe; candidates from concurrently built
    project tables must be added from a single thread.
    """

    def __init__(self) -> None:
        self._rows: dict[Identifier, IssueRow] = {}

    def add(self, candidate: IssueRow) -> None:
        """Add a candidate, merging it into an existing row with the same id."""
        existing = self._rows.get(candidate.id)
        if existing is None:
            self._rows[candidate.id] = candidate
        else:
            logger.debug("Merging issue rows of '%s'", candidate.id)
            self._rows[candidate.id] = existing.merge(candidate)

    def add_all(self, candidates: Iterable[IssueRow]) -> None:
        for candidate in candidates:
            self.add(candidate)

    @property
    def rows(self) -> dict[Identifier, IssueRow]:
        return dict(self._rows)

    def to_table(self) -> IssueTable:
        """Return the accumulated rows sorted by id."""
        return IssueTable(rows=sorted(self._rows.values(), key=lambda row: row.id))


def build_issue_table(candidates: Iterable[IssueRow]) -> IssueTable:
    """Fold issue row candidates into an issue table sorted by id."""
    aggregator = IssueSummaryAggregator()
    aggregator.add_all(candidates)
    return aggregator.to_table()
