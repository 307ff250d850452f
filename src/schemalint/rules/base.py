"""Rule contract shared by built-in and plugin rules."""

from __future__ import annotations

from typing import Protocol

from schemalint.common import RuleContext, RuleDocs, Schema, TableDetails


class Rule(Protocol):
    """Contract for rule implementations.

    Rules are stateless; everything they need arrives through the
    :class:`RuleContext`, and issues go back through ``context.report``.
    """

    name: str
    docs: RuleDocs

    def process(self, context: RuleContext) -> None:
        ...


def is_rule(candidate: object) -> bool:
    """True when ``candidate`` has a string ``name`` and a callable ``process``."""
    return isinstance(getattr(candidate, "name", None), str) and callable(
        getattr(candidate, "process", None)
    )


def first_option(context: RuleContext, default: object = None) -> object:
    return context.options[0] if context.options else default


def table_identifier(schema: Schema, table: TableDetails, *parts: str) -> str:
    return ".".join((schema.name, table.name, *parts))
