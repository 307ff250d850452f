"""Rule registry: merges rule sources into a name-indexed table."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from schemalint.common import ConfigurationError
from schemalint.rules.base import Rule, is_rule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Name-indexed table of executable rules.

    Sources are merged in order, so a plugin source listed after the
    built-in rules shadows a built-in rule of the same name.
    """

    def __init__(self, rules: Mapping[str, Rule] | None = None) -> None:
        self._rules: dict[str, Rule] = dict(rules or {})

    @classmethod
    def build(cls, sources: Iterable[Mapping[str, object]]) -> RuleRegistry:
        merged: dict[str, object] = {}
        for source in sources:
            merged.update(source)

        indexed: dict[str, Rule] = {}
        for key, candidate in merged.items():
            if not is_rule(candidate):
                raise ConfigurationError(
                    f'Rule source entry "{key}" does not provide a name and a process method'
                )
            if candidate.name in indexed:
                logger.debug("rule %s shadowed by source entry %s", candidate.name, key)
            indexed[candidate.name] = candidate

        logger.debug("registered rules: %s", ", ".join(indexed))
        return cls(indexed)

    def lookup(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
