"""Invokes enabled rules against a schema snapshot."""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Any, Mapping, Sequence

from schemalint.common import ACTIVE_STATE, ConfigurationError, IssueReport, ReportFunction, RuleContext, Schema
from schemalint.engine.registry import RuleRegistry
from schemalint.engine.resolver import split_entry

logger = logging.getLogger(__name__)


def execute_rules(
    schema_object: Schema,
    effective_rules: Mapping[str, Sequence[Any]],
    registry: RuleRegistry,
    on_report: ReportFunction,
) -> list[str]:
    """Runs every rule whose state is ``error``, in key order. Returns the invoked rule names.

    Exceptions raised by a rule are not caught.
    """

    def report(issue: IssueReport) -> None:
        on_report(replace(issue, schema=schema_object.name))

    invoked: list[str] = []
    for rule_name, entry in effective_rules.items():
        state, options = split_entry(entry)
        if state != ACTIVE_STATE:
            logger.debug("skipped rule %s (state=%s)", rule_name, state)
            continue

        rule = registry.lookup(rule_name)
        if rule is None:
            raise ConfigurationError(f'Unknown rule: "{rule_name}"')

        logger.debug("running rule %s on schema %s", rule_name, schema_object.name)
        rule.process(RuleContext(schema_object=schema_object, report=report, options=options))
        invoked.append(rule_name)

    return invoked
