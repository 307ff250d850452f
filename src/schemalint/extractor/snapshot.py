"""Schema snapshot read/write utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml

from schemalint.common import (
    ColumnReference,
    ExtractionError,
    Schema,
    TableColumn,
    TableDetails,
    UserInputError,
    ViewDetails,
)


def load_snapshot(path: Path) -> dict[str, Schema]:
    """Reads a YAML or JSON snapshot file into ``{schema name: Schema}``."""

    if not path.exists():
        raise UserInputError(f"Snapshot file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ExtractionError(f"Snapshot file is not valid YAML/JSON: {path} ({exc})") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("schemas"), dict):
        raise ExtractionError(f"Snapshot file must contain a 'schemas' mapping: {path}")

    try:
        return {
            str(name): schema_from_dict(str(name), body or {})
            for name, body in payload["schemas"].items()
        }
    except (KeyError, TypeError, AttributeError) as exc:
        raise ExtractionError(f"Malformed snapshot file {path}: {exc!r}") from exc


def schema_from_dict(name: str, payload: Mapping[str, Any]) -> Schema:
    tables = tuple(
        TableDetails(
            name=str(item["name"]),
            columns=_columns(item.get("columns", [])),
            is_row_level_security_enabled=bool(item.get("is_row_level_security_enabled", False)),
            is_row_level_security_enforced=bool(item.get("is_row_level_security_enforced", False)),
            comment=item.get("comment"),
        )
        for item in payload.get("tables", [])
    )

    views = tuple(
        ViewDetails(
            name=str(item["name"]),
            columns=_columns(item.get("columns", [])),
            comment=item.get("comment"),
        )
        for item in payload.get("views", [])
    )

    return Schema(name=name, tables=tables, views=views)


def write_snapshot(path: Path, schemas: Mapping[str, Schema]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "schemas": {
            name: {
                "tables": [
                    {
                        "name": table.name,
                        "is_row_level_security_enabled": table.is_row_level_security_enabled,
                        "is_row_level_security_enforced": table.is_row_level_security_enforced,
                        "comment": table.comment,
                        "columns": [_column_payload(column) for column in table.columns],
                    }
                    for table in schema.tables
                ],
                "views": [
                    {
                        "name": view.name,
                        "comment": view.comment,
                        "columns": [_column_payload(column) for column in view.columns],
                    }
                    for view in schema.views
                ],
            }
            for name, schema in schemas.items()
        }
    }

    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _columns(items: list[Mapping[str, Any]]) -> tuple[TableColumn, ...]:
    return tuple(
        TableColumn(
            name=str(item["name"]),
            expanded_type=str(item.get("expanded_type", "")),
            references=tuple(
                ColumnReference(
                    name=str(ref["name"]),
                    on_update=str(ref.get("on_update", "NO ACTION")),
                    on_delete=str(ref.get("on_delete", "NO ACTION")),
                    table_name=ref.get("table_name"),
                    column_name=ref.get("column_name"),
                    schema_name=ref.get("schema_name"),
                )
                for ref in item.get("references", [])
            ),
            is_nullable=bool(item.get("is_nullable", True)),
            default_value=item.get("default_value"),
            comment=item.get("comment"),
        )
        for item in items
    )


def _column_payload(column: TableColumn) -> dict[str, Any]:
    return {
        "name": column.name,
        "expanded_type": column.expanded_type,
        "is_nullable": column.is_nullable,
        "default_value": column.default_value,
        "comment": column.comment,
        "references": [
            {
                "name": ref.name,
                "on_update": ref.on_update,
                "on_delete": ref.on_delete,
                "table_name": ref.table_name,
                "column_name": ref.column_name,
                "schema_name": ref.schema_name,
            }
            for ref in column.references
        ],
    }
