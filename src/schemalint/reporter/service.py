"""Console and JSON output for lint results."""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path
import sys
from typing import TextIO

from schemalint.common import IssueReport, RunOutcome


class ConsoleReporter:
    """Writes one line per issue: ``<identifier>: error <rule> : <message>``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report(self, issue: IssueReport) -> None:
        stream = self._stream or sys.stderr
        print(f"{issue.identifier}: error {issue.rule} : {issue.message}", file=stream)

    def summarize(self, outcome: RunOutcome, out: TextIO | None = None) -> None:
        stream = out or sys.stdout
        if not outcome.any_issues:
            print("No issues detected", file=stream)
            return

        if outcome.suggested_migrations:
            print("", file=stream)
            print("Suggested fix", file=stream)
            for migration in outcome.suggested_migrations:
                print(migration, file=stream)


def write_json_report(path: Path, outcome: RunOutcome) -> Path:
    """Dumps issues and suggested migrations to ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "any_issues": outcome.any_issues,
        "exit_code": outcome.exit_code,
        "issues": [asdict(issue) for issue in outcome.issues],
        "suggested_migrations": list(outcome.suggested_migrations),
    }
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path
