"""Registry, ignore matcher, resolver, executor and aggregator tests."""

from __future__ import annotations

import pytest

from schemalint.common import (
    ConfigurationError,
    IgnoreSpec,
    IssueReport,
    RuleContext,
    RuleDocs,
    Schema,
)
from schemalint.engine import (
    ReportAggregator,
    RuleRegistry,
    compile_ignores,
    execute_rules,
    is_ignored,
    resolve_rules,
)


class _RecordingRule:
    docs = RuleDocs(description="records its invocations")

    def __init__(self, name: str, emit: tuple[str, ...] = ()) -> None:
        self.name = name
        self.emit = emit
        self.calls: list[RuleContext] = []

    def process(self, context: RuleContext) -> None:
        self.calls.append(context)
        for identifier in self.emit:
            context.report(IssueReport(rule=self.name, identifier=identifier, message="bad"))


class _FailingRule:
    name = "failing"
    docs = RuleDocs(description="always fails")

    def process(self, context: RuleContext) -> None:
        raise RuntimeError("rule exploded")


# registry


def test_registry_later_source_wins() -> None:
    builtin = _RecordingRule("alpha")
    plugin = _RecordingRule("alpha")

    registry = RuleRegistry.build([{"alpha": builtin}, {"alpha": plugin}])

    assert registry.lookup("alpha") is plugin
    assert len(registry) == 1


def test_registry_indexes_by_rule_name() -> None:
    rule = _RecordingRule("kebab-name")
    registry = RuleRegistry.build([{"kebab_name": rule}])

    assert "kebab-name" in registry
    assert registry.lookup("kebab_name") is None
    assert registry.names() == ["kebab-name"]


def test_registry_rejects_object_without_process() -> None:
    with pytest.raises(ConfigurationError, match="not_a_rule"):
        RuleRegistry.build([{"not_a_rule": object()}])


# ignores


def test_ignore_exact_match_requires_both_fields() -> None:
    matchers = compile_ignores([IgnoreSpec(rule="mandatory-columns", identifier="public.users")])

    assert is_ignored(matchers, "mandatory-columns", "public.users")
    assert not is_ignored(matchers, "mandatory-columns", "public.orders")
    assert not is_ignored(matchers, "name-inflection", "public.users")


def test_ignore_patterns_are_unanchored_searches() -> None:
    matchers = compile_ignores([IgnoreSpec(rule_pattern="inflection", identifier_pattern=r"\.audit_")])

    assert is_ignored(matchers, "name-inflection", "public.audit_log")
    assert not is_ignored(matchers, "name-inflection", "public.log")


def test_ignore_any_matcher_suppresses() -> None:
    matchers = compile_ignores(
        [
            IgnoreSpec(rule="a", identifier="x"),
            IgnoreSpec(rule="b", identifier_pattern="^y"),
        ]
    )

    assert is_ignored(matchers, "b", "yes")
    assert not is_ignored(matchers, "a", "yes")


def test_ignore_exact_value_takes_precedence_over_pattern() -> None:
    matchers = compile_ignores([IgnoreSpec(rule="a", rule_pattern=".*", identifier="x")])

    assert is_ignored(matchers, "a", "x")
    assert not is_ignored(matchers, "b", "x")


@pytest.mark.parametrize(
    ("spec", "missing"),
    [
        (IgnoreSpec(identifier="public.users"), "rule or rule_pattern"),
        (IgnoreSpec(rule="mandatory-columns"), "identifier or identifier_pattern"),
    ],
)
def test_ignore_missing_field_fails_at_compile_time(spec: IgnoreSpec, missing: str) -> None:
    with pytest.raises(ConfigurationError, match=missing):
        compile_ignores([spec])


def test_ignore_invalid_pattern_fails_at_compile_time() -> None:
    with pytest.raises(ConfigurationError, match="invalid pattern"):
        compile_ignores([IgnoreSpec(rule_pattern="(", identifier="x")])


# resolver


def test_resolve_schema_entry_overrides_global_and_keeps_order() -> None:
    registry = RuleRegistry.build([{n: _RecordingRule(n) for n in ("a", "b", "c")}])

    effective = resolve_rules({"a": ["error"], "b": ["error", 1]}, {"c": ["off"], "b": ["off"]}, registry)

    assert list(effective) == ["a", "b", "c"]
    assert effective["b"] == ["off"]


def test_resolve_unknown_rule_is_fatal() -> None:
    registry = RuleRegistry.build([{"a": _RecordingRule("a")}])

    with pytest.raises(ConfigurationError, match='Unknown rule: "no-such-rule"'):
        resolve_rules({"a": ["error"]}, {"no-such-rule": ["error"]}, registry)


@pytest.mark.parametrize("entry", ["error", [], None])
def test_resolve_rejects_malformed_entry(entry: object) -> None:
    registry = RuleRegistry.build([{"a": _RecordingRule("a")}])

    with pytest.raises(ConfigurationError, match="non-empty list"):
        resolve_rules({"a": entry}, None, registry)


# executor


def test_execute_runs_only_error_state_with_options() -> None:
    active = _RecordingRule("active")
    disabled = _RecordingRule("disabled", emit=("s.t",))
    registry = RuleRegistry.build([{"active": active, "disabled": disabled}])
    reports: list[IssueReport] = []

    invoked = execute_rules(
        Schema(name="s"),
        {"disabled": ["off"], "active": ["error", {"x": 1}, "second"]},
        registry,
        reports.append,
    )

    assert invoked == ["active"]
    assert disabled.calls == []
    assert active.calls[0].options == ({"x": 1}, "second")
    assert reports == []


def test_execute_stamps_schema_on_reports() -> None:
    rule = _RecordingRule("emitter", emit=("public.users",))
    registry = RuleRegistry.build([{"emitter": rule}])
    reports: list[IssueReport] = []

    execute_rules(Schema(name="public"), {"emitter": ["error"]}, registry, reports.append)

    assert reports == [IssueReport(rule="emitter", identifier="public.users", message="bad", schema="public")]


def test_execute_propagates_rule_failure_and_stops() -> None:
    later = _RecordingRule("later")
    registry = RuleRegistry.build([{"failing": _FailingRule(), "later": later}])

    with pytest.raises(RuntimeError, match="rule exploded"):
        execute_rules(Schema(name="s"), {"failing": ["error"], "later": ["error"]}, registry, print)

    assert later.calls == []


def test_execute_rejects_rule_missing_from_registry() -> None:
    registry = RuleRegistry.build([{"active": _RecordingRule("active")}])

    with pytest.raises(ConfigurationError, match='Unknown rule: "ghost"'):
        execute_rules(Schema(name="s"), {"ghost": ["error"]}, registry, print)


# aggregator


def test_aggregator_drops_ignored_issues_silently() -> None:
    sunk: list[IssueReport] = []
    aggregator = ReportAggregator(compile_ignores([IgnoreSpec(rule="r", identifier="s.t")]), sunk.append)

    aggregator.on_report(IssueReport(rule="r", identifier="s.t", message="m", suggested_migration="FIX;"))

    outcome = aggregator.finalize()
    assert sunk == []
    assert outcome.any_issues is False
    assert outcome.suggested_migrations == ()
    assert outcome.exit_code == 0


def test_aggregator_records_issues_and_migrations_in_order() -> None:
    sunk: list[IssueReport] = []
    aggregator = ReportAggregator((), sunk.append)
    first = IssueReport(rule="r", identifier="s.a", message="m", suggested_migration="FIX A;")
    second = IssueReport(rule="r", identifier="s.b", message="m")
    third = IssueReport(rule="r", identifier="s.c", message="m", suggested_migration="FIX C;")

    for issue in (first, second, third):
        aggregator.on_report(issue)

    outcome = aggregator.finalize()
    assert sunk == [first, second, third]
    assert outcome.issues == (first, second, third)
    assert outcome.suggested_migrations == ("FIX A;", "FIX C;")
    assert outcome.exit_code == 1


def test_aggregator_reset_clears_state() -> None:
    aggregator = ReportAggregator()
    aggregator.on_report(IssueReport(rule="r", identifier="s", message="m", suggested_migration="X;"))

    aggregator.reset()

    outcome = aggregator.finalize()
    assert outcome.any_issues is False
    assert outcome.issues == ()
    assert outcome.suggested_migrations == ()
