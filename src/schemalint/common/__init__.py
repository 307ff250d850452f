"""Common models and exceptions."""

from .exceptions import ConfigurationError, ExtractionError, UserInputError
from .models import (
    ACTIVE_STATE,
    ColumnReference,
    IgnoreSpec,
    IssueReport,
    ReportFunction,
    RuleContext,
    RuleDocs,
    RuleState,
    RunConfig,
    RunOutcome,
    Schema,
    SchemaConfig,
    TableColumn,
    TableDetails,
    ViewDetails,
)

__all__ = [
    "ACTIVE_STATE",
    "ColumnReference",
    "ConfigurationError",
    "ExtractionError",
    "IgnoreSpec",
    "IssueReport",
    "ReportFunction",
    "RuleContext",
    "RuleDocs",
    "RuleState",
    "RunConfig",
    "RunOutcome",
    "Schema",
    "SchemaConfig",
    "TableColumn",
    "TableDetails",
    "ViewDetails",
]
