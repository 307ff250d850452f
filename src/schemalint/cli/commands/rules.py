"""rules 커맨드 핸들러: 등록된 규칙 목록 출력."""

from __future__ import annotations

import argparse
from pathlib import Path

from schemalint.pipeline import list_rules


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("rules", help="사용 가능한 규칙을 나열한다")
    parser.add_argument("-c", "--config", required=False, help="플러그인 규칙을 포함할 설정 파일")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    rules = list_rules(Path(args.config) if args.config else None)

    for rule in rules:
        docs = getattr(rule, "docs", None)
        description = docs.description if docs is not None else ""
        print(f"{rule.name}: {description}")
        if docs is not None and docs.url:
            print(f"  {docs.url}")
    return 0
