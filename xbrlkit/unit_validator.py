"""Checks that facts use units appropriate to their concepts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from xbrlkit.report_types import Fact, ValidationFinding
from xbrlkit.unit_patterns import ConceptUnitPatterns, ExpectedUnitType, unit_matches_type

UNIT_RULE_ID = "SEC-UNIT-001"


@dataclass
class UnitRules:
    """Concepts explicitly assigned to each unit family by a profile."""

    monetary_concepts: list[str] = field(default_factory=list)
    share_concepts: list[str] = field(default_factory=list)
    pure_concepts: list[str] = field(default_factory=list)
    per_share_concepts: list[str] = field(default_factory=list)


class UnitValidator:
    """Validates unit consistency of facts, optionally with profile rules."""

    def __init__(self, rules: UnitRules | None = None) -> None:
        self._patterns = ConceptUnitPatterns()
        if rules is None:
            return
        for concepts, unit_type in (
            (rules.monetary_concepts, ExpectedUnitType.MONETARY),
            (rules.share_concepts, ExpectedUnitType.SHARES),
            (rules.pure_concepts, ExpectedUnitType.PURE),
            (rules.per_share_concepts, ExpectedUnitType.PER_SHARE),
        ):
            for concept in concepts:
                self._patterns.add_explicit(concept, unit_type)

    def validate_fact(
        self, fact: Fact, units: Iterable[tuple[str, str]]
    ) -> ValidationFinding | None:
        """A finding if the fact's unit does not suit its concept, else None.

        ``units`` holds (unit id, unit measure) pairs.
        """
        expected = self._patterns.expected_type(fact.concept)
        if expected is None:
            if not self._patterns.is_likely_monetary(fact.concept):
                return None
            expected = ExpectedUnitType.MONETARY

        if fact.unit_ref is None:
            return None
        measure = next(
            (measure for unit_id, measure in units if unit_id == fact.unit_ref), None
        )
        if measure is None or unit_matches_type(measure, expected):
            return None

        return ValidationFinding(
            rule_id=UNIT_RULE_ID,
            severity="error",
            message=(
                f"Unit inconsistency: concept '{fact.concept}' expects "
                f"{expected} unit but found '{measure}'"
            ),
            member=fact.member,
            subject=fact.concept,
        )

    def validate_facts(
        self, facts: Iterable[Fact], units: Iterable[tuple[str, str]]
    ) -> list[ValidationFinding]:
        """Findings for every fact whose unit does not suit its concept."""
        unit_list = list(units)
        return [
            finding
            for finding in (self.validate_fact(fact, unit_list) for fact in facts)
            if finding is not None
        ]


def validate_unit_consistency(
    facts: Iterable[Fact],
    units: Iterable[tuple[str, str]],
    unit_rules: UnitRules | None = None,
) -> list[ValidationFinding]:
    """Validate facts' units with default patterns plus any profile rules."""
    return UnitValidator(unit_rules).validate_facts(facts, units)