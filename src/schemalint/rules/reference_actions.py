"""reference-actions: require ON UPDATE / ON DELETE actions on references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from schemalint.common import ColumnReference, IssueReport, RuleContext, RuleDocs, TableColumn
from schemalint.rules.base import first_option, table_identifier


@dataclass(frozen=True)
class TableReference:
    """A reference with all the columns it spans."""

    name: str
    on_update: str
    on_delete: str
    columns: tuple[str, ...]


def build_table_references(columns: tuple[TableColumn, ...]) -> list[TableReference]:
    """Groups column references by reference name, in first-seen order."""

    grouped: dict[str, tuple[ColumnReference, list[str]]] = {}
    for column in columns:
        for reference in column.references:
            _, spanned = grouped.setdefault(reference.name, (reference, []))
            spanned.append(column.name)

    return [
        TableReference(
            name=name,
            on_update=reference.on_update,
            on_delete=reference.on_delete,
            columns=tuple(spanned),
        )
        for name, (reference, spanned) in grouped.items()
    ]


class ReferenceActions:
    name = "reference-actions"
    docs = RuleDocs(description="Require references to have specific ON DELETE and ON UPDATE actions")

    def process(self, context: RuleContext) -> None:
        option: Mapping[str, Any] = first_option(context) or {}
        on_update = option.get("on_update")
        on_delete = option.get("on_delete")
        schema = context.schema_object

        for table in schema.tables:
            for reference in build_table_references(table.columns):
                identifier = table_identifier(schema, table, reference.name)
                if on_update is not None and reference.on_update != on_update:
                    context.report(
                        IssueReport(
                            rule=self.name,
                            identifier=identifier,
                            message=(
                                f'Reference action ON UPDATE expected to be "{on_update}" '
                                f'but got "{reference.on_update}"'
                            ),
                        )
                    )
                if on_delete is not None and reference.on_delete != on_delete:
                    context.report(
                        IssueReport(
                            rule=self.name,
                            identifier=identifier,
                            message=(
                                f'Reference action ON DELETE expected to be "{on_delete}" '
                                f'but got "{reference.on_delete}"'
                            ),
                        )
                    )


reference_actions = ReferenceActions()
