"""Built-in rules and plugin loading."""

from .base import Rule, is_rule
from .loader import load_object, load_plugin_rules, rules_from_module
from .mandatory_columns import mandatory_columns
from .name_inflection import name_inflection
from .reference_actions import reference_actions
from .row_level_security import row_level_security

BUILTIN_RULES: dict[str, Rule] = {
    "mandatory_columns": mandatory_columns,
    "name_inflection": name_inflection,
    "reference_actions": reference_actions,
    "row_level_security": row_level_security,
}

__all__ = [
    "BUILTIN_RULES",
    "Rule",
    "is_rule",
    "load_object",
    "load_plugin_rules",
    "mandatory_columns",
    "name_inflection",
    "reference_actions",
    "row_level_security",
    "rules_from_module",
]
