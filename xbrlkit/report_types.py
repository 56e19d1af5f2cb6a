"""Canonical internal report model: facts, findings and assembled reports."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Fact:
    """A single reported XBRL fact."""

    concept: str = ""
    context_ref: str = ""
    unit_ref: str | None = None
    decimals: str | None = None
    value: str = ""
    member: str = ""


@dataclass
class ValidationFinding:
    """A problem or observation produced by a validation rule."""

    rule_id: str = ""
    severity: str = ""
    message: str = ""
    member: str | None = None
    subject: str | None = None


@dataclass
class CanonicalReport:
    """An assembled report: its member documents, facts and findings."""

    members: list[str] = field(default_factory=list)
    facts: list[Fact] = field(default_factory=list)
    findings: list[ValidationFinding] = field(default_factory=list)