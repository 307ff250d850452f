"""Per-schema rule configuration resolution."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from schemalint.common import ConfigurationError
from schemalint.engine.registry import RuleRegistry

EffectiveRuleSet = dict[str, Sequence[Any]]


def resolve_rules(
    global_rules: Mapping[str, Any] | None,
    schema_rules: Mapping[str, Any] | None,
    registry: RuleRegistry,
) -> EffectiveRuleSet:
    """Overlays schema rules on global rules and checks every name against the registry.

    Key order is global keys first, then keys only present in the schema
    mapping. The schema entry wins for keys present on both sides.
    """

    merged: dict[str, Any] = {**(global_rules or {}), **(schema_rules or {})}

    for rule_name, entry in merged.items():
        if rule_name not in registry:
            raise ConfigurationError(f'Unknown rule: "{rule_name}"')
        _check_entry(rule_name, entry)

    return merged


def split_entry(entry: Sequence[Any]) -> tuple[str, tuple[Any, ...]]:
    """Returns ``(state, options)`` for a ``[state, *options]`` entry."""
    state, *options = entry
    return str(state), tuple(options)


def _check_entry(rule_name: str, entry: Any) -> None:
    if not isinstance(entry, (list, tuple)) or not entry:
        raise ConfigurationError(
            f'Rule "{rule_name}" must be configured as a non-empty list [state, ...options], '
            f"got {entry!r}"
        )
