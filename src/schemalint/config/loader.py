"""YAML run-configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from schemalint.common import IgnoreSpec, RunConfig, SchemaConfig, UserInputError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = (".schemalintrc.yaml", ".schemalintrc.yml", ".schemalintrc.json")


def find_config(directory: Path) -> Path:
    """Returns the first default config file found in ``directory``."""
    for name in DEFAULT_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise UserInputError(
        f"No configuration file found in {directory} (looked for {', '.join(DEFAULT_CONFIG_NAMES)})"
    )


def load_run_config(config_path: Path) -> RunConfig:
    """Loads and shapes a run configuration. Relative paths resolve against its directory."""

    data = _load_yaml(config_path)
    return run_config_from_dict(data, base_dir=config_path.resolve().parent)


def run_config_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> RunConfig:
    raw_schemas = data.get("schemas")
    if not isinstance(raw_schemas, list) or not raw_schemas:
        raise UserInputError("Configuration must list at least one schema under 'schemas'")

    schemas = tuple(_schema_config(item) for item in raw_schemas)

    rules = data.get("rules") or {}
    if not isinstance(rules, dict):
        raise UserInputError("'rules' must be a mapping of rule name to [state, ...options]")

    connection = data.get("connection") or {}
    if not isinstance(connection, dict):
        raise UserInputError("'connection' must be a mapping")

    ignores = tuple(
        IgnoreSpec(
            rule=item.get("rule"),
            rule_pattern=item.get("rule_pattern"),
            identifier=item.get("identifier"),
            identifier_pattern=item.get("identifier_pattern"),
        )
        for item in _list_of_dicts(data.get("ignores"), "ignores")
    )

    return RunConfig(
        connection=connection,
        schemas=schemas,
        rules=dict(rules),
        plugins=tuple(str(p) for p in data.get("plugins") or []),
        ignores=ignores,
        base_dir=str(base_dir) if base_dir is not None else None,
    )


def _schema_config(item: Any) -> SchemaConfig:
    if isinstance(item, str):
        return SchemaConfig(name=item)
    if not isinstance(item, dict) or not item.get("name"):
        raise UserInputError(f"Schema entry must have a name: {item!r}")

    rules = item.get("rules") or {}
    if not isinstance(rules, dict):
        raise UserInputError(f"Rules for schema {item['name']!r} must be a mapping")
    return SchemaConfig(name=str(item["name"]), rules=dict(rules))


def _list_of_dicts(value: Any, key: str) -> list[dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise UserInputError(f"'{key}' must be a list of mappings")
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise UserInputError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise UserInputError(f"Configuration file is not valid YAML/JSON: {path} ({exc})") from exc

    if not isinstance(result, dict):
        raise UserInputError(f"Configuration file must contain a mapping: {path}")

    logger.debug("loaded configuration %s", path)
    return result
