"""row-level-security: require tables to enable or enforce row-level security."""

from __future__ import annotations

from typing import Any, Mapping

from schemalint.common import IssueReport, RuleContext, RuleDocs
from schemalint.rules.base import first_option, table_identifier


class RowLevelSecurity:
    name = "row-level-security"
    docs = RuleDocs(description="Require tables to enable or enforce row-level security")

    def process(self, context: RuleContext) -> None:
        # enabled is always required; enforced only on request
        option: Mapping[str, Any] = first_option(context) or {"enabled": True}
        enforced = option.get("enforced") is True
        schema = context.schema_object

        for table in schema.tables:
            identifier = table_identifier(schema, table)
            qualified = f'"{schema.name}"."{table.name}"'
            if not table.is_row_level_security_enabled:
                context.report(
                    IssueReport(
                        rule=self.name,
                        identifier=identifier,
                        message="Row-level security is disabled",
                        suggested_migration=f"ALTER TABLE {qualified} ENABLE ROW LEVEL SECURITY;",
                    )
                )
            if enforced and not table.is_row_level_security_enforced:
                context.report(
                    IssueReport(
                        rule=self.name,
                        identifier=identifier,
                        message="Row-level security is not enforced",
                        suggested_migration=f"ALTER TABLE {qualified} FORCE ROW LEVEL SECURITY;",
                    )
                )


row_level_security = RowLevelSecurity()
