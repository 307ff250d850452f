"""Plugin loading: turn plugin references into rule-source mappings."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Iterable, Mapping

from schemalint.common import ConfigurationError
from schemalint.rules.base import Rule, is_rule

logger = logging.getLogger(__name__)


def load_plugin_rules(references: Iterable[str], base_dir: Path | None = None) -> list[dict[str, Rule]]:
    """Loads each plugin and returns its rules, one mapping per plugin, in order."""

    sources: list[dict[str, Rule]] = []
    for reference in references:
        module = _import_plugin(reference, base_dir or Path.cwd())
        rules = rules_from_module(module)
        if not rules:
            raise ConfigurationError(f"Plugin {reference!r} does not export any rules")
        logger.info("loaded plugin %s: %s", reference, ", ".join(rule.name for rule in rules.values()))
        sources.append(rules)
    return sources


def rules_from_module(module: ModuleType) -> dict[str, Rule]:
    """Uses the module's ``RULES`` mapping when present, else its public rule attributes."""

    declared = getattr(module, "RULES", None)
    if declared is not None:
        if not isinstance(declared, Mapping):
            raise ConfigurationError(f"{module.__name__}.RULES must be a mapping")
        return dict(declared)

    return {
        attr: value
        for attr, value in vars(module).items()
        if not attr.startswith("_") and not isinstance(value, type) and is_rule(value)
    }


def load_object(reference: str, base_dir: Path | None = None) -> object:
    """Resolves ``"module:attribute"`` (module may be a file path)."""

    module_ref, sep, attr = reference.rpartition(":")
    if not sep or not module_ref or not attr:
        raise ConfigurationError(f"Expected 'module:attribute', got {reference!r}")

    module = _import_plugin(module_ref, base_dir or Path.cwd())
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"{module_ref!r} has no attribute {attr!r}") from exc


def _import_plugin(reference: str, base_dir: Path) -> ModuleType:
    if reference.endswith(".py") or "/" in reference or "\\" in reference:
        return _import_from_path((base_dir / reference).resolve())

    try:
        return importlib.import_module(reference)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import plugin {reference!r}: {exc}") from exc


def _import_from_path(path: Path) -> ModuleType:
    if not path.is_file():
        raise ConfigurationError(f"Plugin file not found: {path}")

    module_name = f"schemalint_plugin_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, str(path))
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Cannot load plugin file: {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
