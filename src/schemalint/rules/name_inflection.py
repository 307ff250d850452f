"""name-inflection: enforce singular or plural table and view names."""

from __future__ import annotations

import re
from typing import Literal

import inflect

from schemalint.common import IssueReport, RuleContext, RuleDocs, TableDetails, ViewDetails
from schemalint.rules.base import first_option

Inflection = Literal["singular", "plural", "unknown"]

_WORD_BOUNDARY = re.compile(r"(?=[A-Z\-_])")
_SEPARATORS = re.compile(r"^[-_]+|[-_]+$")
_SINGULAR_S_ENDINGS = ("ss", "us", "is")

_engine = inflect.engine()


def detect_inflection(name: str) -> Inflection:
    """Classifies the last word of a (camelCase, snake_case or kebab-case) name."""

    words = [word for word in (_SEPARATORS.sub("", part) for part in _WORD_BOUNDARY.split(name)) if word]
    if not words:
        return "unknown"

    last_word = words[-1].lower()
    # address, analysis
    if last_word.endswith(_SINGULAR_S_ENDINGS):
        return "singular"
    # uninflected nouns such as "sheep" are both
    if _engine.plural_noun(last_word) == last_word:
        return "unknown"

    singular = _engine.singular_noun(last_word)
    if singular and singular != last_word and _engine.plural_noun(singular) == last_word:
        return "plural"
    return "singular"


class NameInflection:
    name = "name-inflection"
    docs = RuleDocs(
        description="Enforce singular or plural naming of tables and views",
        url="https://github.com/kristiandupont/schemalint/tree/master/src/rules#name-inflection",
    )

    def process(self, context: RuleContext) -> None:
        expected = str(first_option(context) or "singular")
        schema = context.schema_object

        entities: list[TableDetails | ViewDetails] = [*schema.tables, *schema.views]
        for entity in entities:
            plurality = detect_inflection(entity.name)
            if plurality in (expected, "unknown"):
                continue
            context.report(
                IssueReport(
                    rule=self.name,
                    identifier=f"{schema.name}.{entity.name}",
                    message=f"Expected {expected} names, but '{entity.name}' seems to be {plurality}",
                )
            )


name_inflection = NameInflection()
