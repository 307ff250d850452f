"""Run-scoped collection of reported issues."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from schemalint.common import IssueReport, RunOutcome
from schemalint.engine.ignores import IgnoreMatcher, is_ignored

logger = logging.getLogger(__name__)

IssueSink = Callable[[IssueReport], None]


class ReportAggregator:
    """Filters issues through the ignore matchers and records what is left.

    Holds mutable state for a single run; build a new one per run or call
    :meth:`reset` before reusing it.
    """

    def __init__(self, matchers: Sequence[IgnoreMatcher] = (), sink: IssueSink | None = None) -> None:
        self._matchers = tuple(matchers)
        self._sink = sink
        self._any_issues = False
        self._suggested_migrations: list[str] = []
        self._issues: list[IssueReport] = []

    def on_report(self, issue: IssueReport) -> None:
        if is_ignored(self._matchers, issue.rule, issue.identifier):
            logger.debug("ignored: %s %s", issue.rule, issue.identifier)
            return

        if self._sink is not None:
            self._sink(issue)

        if issue.suggested_migration:
            self._suggested_migrations.append(issue.suggested_migration)
        self._issues.append(issue)
        self._any_issues = True

    def finalize(self) -> RunOutcome:
        return RunOutcome(
            any_issues=self._any_issues,
            suggested_migrations=tuple(self._suggested_migrations),
            issues=tuple(self._issues),
        )

    def reset(self) -> None:
        self._any_issues = False
        self._suggested_migrations.clear()
        self._issues.clear()
