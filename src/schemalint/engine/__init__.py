"""Rule evaluation engine."""

from .aggregator import ReportAggregator
from .executor import execute_rules
from .ignores import IgnoreMatcher, compile_ignores, is_ignored
from .registry import RuleRegistry
from .resolver import resolve_rules, split_entry
from .service import build_registry, evaluate, process_database

__all__ = [
    "IgnoreMatcher",
    "ReportAggregator",
    "RuleRegistry",
    "build_registry",
    "compile_ignores",
    "evaluate",
    "execute_rules",
    "is_ignored",
    "process_database",
    "resolve_rules",
    "split_entry",
]
