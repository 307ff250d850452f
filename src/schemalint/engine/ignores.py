"""Compile ignore specifications into (rule, identifier) predicates."""

from __future__ import annotations

from dataclasses import asdict
import json
import re
from typing import Callable, Iterable, Sequence

from schemalint.common import ConfigurationError, IgnoreSpec

IgnoreMatcher = Callable[[str, str], bool]
_FieldMatcher = Callable[[str], bool]


def compile_ignores(specs: Iterable[IgnoreSpec]) -> list[IgnoreMatcher]:
    """Builds one predicate per spec. Raises ConfigurationError on an incomplete spec."""

    return [_compile_spec(spec) for spec in specs]


def is_ignored(matchers: Sequence[IgnoreMatcher], rule: str, identifier: str) -> bool:
    return any(matcher(rule, identifier) for matcher in matchers)


def _compile_spec(spec: IgnoreSpec) -> IgnoreMatcher:
    rule_match = _field_matcher(
        spec,
        exact=spec.rule,
        pattern=spec.rule_pattern,
        missing="Ignore object is missing a rule or rule_pattern property",
    )
    identifier_match = _field_matcher(
        spec,
        exact=spec.identifier,
        pattern=spec.identifier_pattern,
        missing="Ignore object is missing an identifier or identifier_pattern property",
    )

    def matcher(rule: str, identifier: str) -> bool:
        return rule_match(rule) and identifier_match(identifier)

    return matcher


def _field_matcher(
    spec: IgnoreSpec, *, exact: str | None, pattern: str | None, missing: str
) -> _FieldMatcher:
    # exact value wins when both are supplied
    if exact:
        return lambda value: value == exact

    if pattern:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise ConfigurationError(
                f"Ignore object has an invalid pattern {pattern!r} ({exc}): {_describe(spec)}"
            ) from exc
        return lambda value: compiled.search(value) is not None

    raise ConfigurationError(f"{missing}: {_describe(spec)}")


def _describe(spec: IgnoreSpec) -> str:
    return json.dumps({k: v for k, v in asdict(spec).items() if v is not None})
