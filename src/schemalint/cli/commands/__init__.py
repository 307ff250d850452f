"""CLI 커맨드 모듈."""

from __future__ import annotations

from types import ModuleType

from schemalint.cli.commands import lint, rules

COMMAND_MODULES: list[ModuleType] = [lint, rules]

__all__ = ["COMMAND_MODULES"]
