"""mandatory-columns: require every table to carry a set of columns."""

from __future__ import annotations

from typing import Any, Mapping

from schemalint.common import ConfigurationError, IssueReport, RuleContext, RuleDocs, TableDetails
from schemalint.rules.base import first_option, table_identifier


class MandatoryColumns:
    name = "mandatory-columns"
    docs = RuleDocs(description="Require tables to have specific columns")

    def process(self, context: RuleContext) -> None:
        expected_columns = _expected_columns(first_option(context))
        schema = context.schema_object

        for table in schema.tables:
            columns_by_name = {column.name: column for column in table.columns}
            for expected in expected_columns:
                self._check_column(context, table, columns_by_name, expected)

    def _check_column(
        self,
        context: RuleContext,
        table: TableDetails,
        columns_by_name: dict[str, Any],
        expected: Mapping[str, Any],
    ) -> None:
        schema = context.schema_object
        column_name = str(expected["name"])
        expected_props = {key: value for key, value in expected.items() if key != "name"}
        expected_type = expected_props.pop("expanded_type", None)

        column = columns_by_name.get(column_name)
        if column is None:
            if expected_type is None:
                message = f'Column "{column_name}" is missing'
            else:
                message = f'Column "{column_name}" of type "{expected_type}" is missing'
            context.report(
                IssueReport(
                    rule=self.name,
                    identifier=table_identifier(schema, table),
                    message=message,
                    suggested_migration=_add_column_migration(
                        schema.name, table.name, column_name, expected_type
                    ),
                )
            )
            return

        identifier = table_identifier(schema, table, column.name)
        if expected_type is not None and column.expanded_type != expected_type:
            context.report(
                IssueReport(
                    rule=self.name,
                    identifier=identifier,
                    message=(
                        f'Column "{column.name}" is of type "{column.expanded_type}" '
                        f'but expected "{expected_type}"'
                    ),
                )
            )

        actual_props = {key: getattr(column, key, None) for key in expected_props}
        if actual_props != expected_props:
            context.report(
                IssueReport(
                    rule=self.name,
                    identifier=identifier,
                    message=(
                        f'Column "{column.name}" has properties {actual_props} '
                        f"but expected {expected_props}"
                    ),
                )
            )


def _expected_columns(option: Any) -> list[Mapping[str, Any]]:
    """Accepts a list of ``{name, ...}`` or a ``{name: {...}}`` mapping."""
    if not option:
        return []
    if isinstance(option, Mapping):
        entries = [{"name": name, **(props or {})} for name, props in option.items()]
    else:
        entries = list(option)

    for entry in entries:
        if not isinstance(entry, Mapping) or not entry.get("name"):
            raise ConfigurationError(
                f'Rule "{MandatoryColumns.name}": each expected column needs a "name", got {entry!r}'
            )
    return entries


def _add_column_migration(
    schema_name: str, table_name: str, column_name: str, expanded_type: str | None
) -> str | None:
    if expanded_type is None:
        return None
    return f'ALTER TABLE "{schema_name}"."{table_name}" ADD COLUMN "{column_name}" {expanded_type};'


mandatory_columns = MandatoryColumns()
