"""Mapping of concept names to the kind of unit their facts should carry."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class UnitKind(Enum):
    """Broad families of XBRL units."""

    MONETARY = "Monetary"
    SHARES = "Shares"
    PURE = "Pure"
    PER_SHARE = "PerShare"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class ExpectedUnitType:
    """The unit a concept is expected to use; custom types carry a pattern."""

    kind: UnitKind
    pattern: str | None = None

    MONETARY: ClassVar[ExpectedUnitType]
    SHARES: ClassVar[ExpectedUnitType]
    PURE: ClassVar[ExpectedUnitType]
    PER_SHARE: ClassVar[ExpectedUnitType]

    @classmethod
    def custom(cls, pattern: str) -> ExpectedUnitType:
        """A unit type matched by a substring of the unit measure."""
        return cls(UnitKind.CUSTOM, pattern)

    def __str__(self) -> str:
        if self.kind is UnitKind.CUSTOM:
            return f'Custom("{self.pattern}")'
        return self.kind.value


ExpectedUnitType.MONETARY = ExpectedUnitType(UnitKind.MONETARY)
ExpectedUnitType.SHARES = ExpectedUnitType(UnitKind.SHARES)
ExpectedUnitType.PURE = ExpectedUnitType(UnitKind.PURE)
ExpectedUnitType.PER_SHARE = ExpectedUnitType(UnitKind.PER_SHARE)


def _default_patterns() -> list[tuple[re.Pattern[str], ExpectedUnitType]]:
    rules = [
        (r".*shares.*", ExpectedUnitType.SHARES),
        (r".*pershare.*", ExpectedUnitType.PER_SHARE),
        (r".*per.*share.*", ExpectedUnitType.PER_SHARE),
        (r".*employees.*", ExpectedUnitType.PURE),
        (r".*percentage.*", ExpectedUnitType.PURE),
        (r".*ratio.*", ExpectedUnitType.PURE),
    ]
    return [(re.compile(pattern, re.IGNORECASE), unit) for pattern, unit in rules]


_MONETARY_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r".*(revenue|sales|income|profit|loss|expense|cost|asset|liabilit).*",
        r".*(cash|debt|equity|capital|dividend|payment|price).*",
        r".*(balance|amount|value|gain|proceed).*",
    )
)


class ConceptUnitPatterns:
    """Determines a concept's expected unit from explicit entries, then patterns."""

    def __init__(self) -> None:
        self._explicit: dict[str, ExpectedUnitType] = {}
        self._patterns = _default_patterns()

    def add_explicit(self, concept: str, unit_type: ExpectedUnitType) -> None:
        """Map a concept name directly to a unit type."""
        self._explicit[concept] = unit_type

    def add_pattern(self, pattern: str, unit_type: ExpectedUnitType) -> None:
        """Append a regular expression rule; raises re.error if it is invalid."""
        self._patterns.append((re.compile(pattern), unit_type))

    def expected_type(self, concept: str) -> ExpectedUnitType | None:
        """The expected unit type, explicit mappings first, then patterns in order."""
        explicit = self._explicit.get(concept)
        if explicit is not None:
            return explicit
        return next(
            (unit for regex, unit in self._patterns if regex.search(concept)), None
        )

    def is_likely_monetary(self, concept: str) -> bool:
        """Heuristic: the name suggests an amount of money and not shares."""
        if "share" in concept.lower():
            return False
        return any(regex.search(concept) for regex in _MONETARY_PATTERNS)


def unit_matches_type(unit_measure: str, expected: ExpectedUnitType) -> bool:
    """Whether a unit measure belongs to the expected unit type."""
    kind = expected.kind
    if kind is UnitKind.MONETARY:
        return unit_measure.startswith("iso4217:")
    if kind is UnitKind.SHARES:
        return unit_measure == "xbrli:shares"
    if kind is UnitKind.PURE:
        return unit_measure == "xbrli:pure"
    if kind is UnitKind.PER_SHARE:
        return "PerShare" in unit_measure or unit_measure.endswith("/share")
    return (expected.pattern or "") in unit_measure