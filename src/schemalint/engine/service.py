"""Rule evaluation engine: registry, resolution, execution, aggregation."""

from __future__ import annotations

from typing import Iterable, Mapping

from schemalint.common import ExtractionError, RunConfig, RunOutcome
from schemalint.engine.aggregator import IssueSink, ReportAggregator
from schemalint.engine.executor import execute_rules
from schemalint.engine.ignores import compile_ignores
from schemalint.engine.registry import RuleRegistry
from schemalint.engine.resolver import EffectiveRuleSet, resolve_rules
from schemalint.extractor import SchemaExtractor
from schemalint.observability import get_logger
from schemalint.rules import BUILTIN_RULES

logger = get_logger(__name__)


def build_registry(
    builtin_rules: Mapping[str, object] | None = None,
    plugin_rules: Iterable[Mapping[str, object]] = (),
) -> RuleRegistry:
    """Built-in rules first, then each plugin source in order."""
    base = BUILTIN_RULES if builtin_rules is None else builtin_rules
    return RuleRegistry.build([base, *plugin_rules])


async def evaluate(
    config: RunConfig,
    extractor: SchemaExtractor,
    *,
    builtin_rules: Mapping[str, object] | None = None,
    plugin_rules: Iterable[Mapping[str, object]] = (),
    sink: IssueSink | None = None,
) -> RunOutcome:
    """Runs every configured schema through its effective rule set.

    Configuration problems surface before the extractor is called, so an
    unknown rule name never produces a partial set of reports.
    """

    registry = build_registry(builtin_rules, plugin_rules)
    matchers = compile_ignores(config.ignores)

    effective: list[tuple[str, EffectiveRuleSet]] = [
        (schema.name, resolve_rules(config.rules, schema.rules, registry))
        for schema in config.schemas
    ]

    schema_names = [name for name, _ in effective]
    _log_connection(config.connection, schema_names)
    extracted = await extractor.extract_schemas(config.connection, schema_names)

    aggregator = ReportAggregator(matchers, sink)
    for schema_name, rules in effective:
        logger.info("evaluating schema %s (%d rules configured)", schema_name, len(rules))
        schema_object = extracted.get(schema_name)
        if schema_object is None:
            raise ExtractionError(f"Extractor returned no snapshot for schema {schema_name!r}")
        execute_rules(schema_object, rules, registry, aggregator.on_report)

    outcome = aggregator.finalize()
    logger.info("evaluation completed: issues=%d", len(outcome.issues))
    return outcome


async def process_database(
    config: RunConfig,
    extractor: SchemaExtractor,
    *,
    builtin_rules: Mapping[str, object] | None = None,
    plugin_rules: Iterable[Mapping[str, object]] = (),
    sink: IssueSink | None = None,
) -> int:
    """Returns 0 when no issue survived the ignore list, 1 otherwise."""
    outcome = await evaluate(
        config,
        extractor,
        builtin_rules=builtin_rules,
        plugin_rules=plugin_rules,
        sink=sink,
    )
    return outcome.exit_code


def _log_connection(connection: Mapping[str, object], schema_names: list[str]) -> None:
    database = connection.get("database")
    if database:
        logger.info("connecting to %s on %s", database, connection.get("host", "localhost"))
    logger.info("extracting schemas: %s", ", ".join(schema_names))
