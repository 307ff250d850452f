"""Shared data models for schemalint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

RuleState = Literal["error", "off"]

ACTIVE_STATE: RuleState = "error"


@dataclass(frozen=True)
class ColumnReference:
    name: str
    on_update: str
    on_delete: str
    table_name: str | None = None
    column_name: str | None = None
    schema_name: str | None = None


@dataclass(frozen=True)
class TableColumn:
    name: str
    expanded_type: str
    references: tuple[ColumnReference, ...] = ()
    is_nullable: bool = True
    default_value: str | None = None
    comment: str | None = None


@dataclass(frozen=True)
class TableDetails:
    name: str
    columns: tuple[TableColumn, ...] = ()
    is_row_level_security_enabled: bool = False
    is_row_level_security_enforced: bool = False
    comment: str | None = None


@dataclass(frozen=True)
class ViewDetails:
    name: str
    columns: tuple[TableColumn, ...] = ()
    comment: str | None = None


@dataclass(frozen=True)
class Schema:
    """Read-only snapshot of one database schema."""

    name: str
    tables: tuple[TableDetails, ...] = ()
    views: tuple[ViewDetails, ...] = ()


@dataclass(frozen=True)
class IssueReport:
    rule: str
    identifier: str
    message: str
    suggested_migration: str | None = None
    schema: str | None = None


ReportFunction = Callable[[IssueReport], None]


@dataclass(frozen=True)
class RuleDocs:
    description: str
    url: str | None = None


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule sees during a single ``process`` call."""

    schema_object: Schema
    report: ReportFunction
    options: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RunOutcome:
    any_issues: bool
    suggested_migrations: tuple[str, ...] = ()
    issues: tuple[IssueReport, ...] = ()

    @property
    def exit_code(self) -> int:
        return 1 if self.any_issues else 0


@dataclass(frozen=True)
class SchemaConfig:
    name: str
    rules: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IgnoreSpec:
    rule: str | None = None
    rule_pattern: str | None = None
    identifier: str | None = None
    identifier_pattern: str | None = None


@dataclass(frozen=True)
class RunConfig:
    connection: dict[str, Any]
    schemas: tuple[SchemaConfig, ...]
    rules: dict[str, Any] = field(default_factory=dict)
    plugins: tuple[str, ...] = ()
    ignores: tuple[IgnoreSpec, ...] = ()
    base_dir: str | None = None
