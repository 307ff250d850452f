"""lint 커맨드 핸들러."""

from __future__ import annotations

import argparse
from pathlib import Path

from schemalint.pipeline import run_lint


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("lint", help="설정된 규칙으로 스키마를 검사한다")
    parser.add_argument(
        "-c",
        "--config",
        required=False,
        help="Use this configuration instead of .schemalintrc.* in the working directory",
    )
    parser.add_argument("--report-out", required=False, help="JSON 리포트 출력 경로")
    parser.add_argument("--log-config", required=False, help="logging dictConfig YAML 경로")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    outcome = run_lint(
        config_path=Path(args.config) if args.config else None,
        report_path=Path(args.report_out) if args.report_out else None,
    )
    return outcome.exit_code
