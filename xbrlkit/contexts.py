"""XBRL contexts: entity, period and dimensional qualifiers of reported facts."""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from lxml import etree

DEFAULT_ENTITY_SCHEME = "http://www.sec.gov/CIK"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_context_id(raw: str) -> str:
    """Trim a context identifier and lower-case its ASCII letters."""
    return raw.strip().translate(_ASCII_LOWER)


@dataclass
class EntityIdentifier:
    """The reporting entity: an identifier value within a scheme."""

    scheme: str = ""
    value: str = ""


@dataclass(frozen=True)
class InstantPeriod:
    """A single point in time."""

    date: str


@dataclass(frozen=True)
class DurationPeriod:
    """A span of time between two dates."""

    start: str
    end: str


@dataclass(frozen=True)
class ForeverPeriod:
    """An unbounded period."""


Period = Union[InstantPeriod, DurationPeriod, ForeverPeriod]


@dataclass
class DimensionMember:
    """A dimension paired with an explicit member or a typed value."""

    dimension: str = ""
    member: str = ""
    is_typed: bool = False
    typed_value: str | None = None


@dataclass
class DimensionalContainer:
    """The dimension members held by a segment or scenario."""

    dimensions: list[DimensionMember] = field(default_factory=list)
    raw_xml: str | None = None


@dataclass
class Context:
    """A complete XBRL context."""

    id: str = ""
    entity: EntityIdentifier = field(default_factory=EntityIdentifier)
    entity_segment: DimensionalContainer | None = None
    period: Period = field(default_factory=ForeverPeriod)
    scenario: DimensionalContainer | None = None


class ContextSet:
    """Contexts indexed by their normalised identifier."""

    def __init__(self) -> None:
        self._contexts: dict[str, Context] = {}

    def insert(self, context: Context) -> None:
        """Add a context, replacing any with the same identifier."""
        self._contexts[context.id] = context

    def get(self, context_id: str) -> Context | None:
        """Look a context up by identifier, ignoring case and surrounding space."""
        return self._contexts.get(normalize_context_id(context_id))

    def __iter__(self) -> Iterator[Context]:
        return (self._contexts[key] for key in sorted(self._contexts))

    def __len__(self) -> int:
        return len(self._contexts)

    def __contains__(self, context_id: object) -> bool:
        return isinstance(context_id, str) and self.get(context_id) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextSet):
            return NotImplemented
        return self._contexts == other._contexts

    def __repr__(self) -> str:
        return f"ContextSet({sorted(self._contexts)!r})"


class ContextError(Exception):
    """A context could not be parsed."""


class ContextXmlError(ContextError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"XML parsing error: {detail}")
        self.detail = detail


class MissingElementError(ContextError):
    def __init__(self, element: str) -> None:
        super().__init__(f"Missing required element: {element}")
        self.element = element


class InvalidPeriodError(ContextError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid period format: {detail}")
        self.detail = detail


class InvalidEntityError(ContextError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid entity identifier: {detail}")
        self.detail = detail


def _is_element(node: object) -> bool:
    return isinstance(getattr(node, "tag", None), str)


def _local_name(node: etree._Element) -> str:
    return etree.QName(node).localname


def _find_child(node: etree._Element, name: str) -> etree._Element | None:
    return next(
        (child for child in node if _is_element(child) and _local_name(child) == name),
        None,
    )


def _trimmed_text(node: etree._Element | None) -> str | None:
    """The element's leading text, trimmed; None when absent or blank."""
    if node is None or node.text is None:
        return None
    text = node.text.strip()
    return text or None


def _parse_entity(node: etree._Element) -> EntityIdentifier:
    identifier = _find_child(node, "identifier")
    if identifier is None:
        raise MissingElementError("identifier")
    value = _trimmed_text(identifier)
    if value is None:
        raise InvalidEntityError("empty identifier")
    return EntityIdentifier(
        scheme=identifier.get("scheme", DEFAULT_ENTITY_SCHEME), value=value
    )


def _parse_period(node: etree._Element) -> Period:
    instant = _find_child(node, "instant")
    if instant is not None:
        date = _trimmed_text(instant)
        if date is None:
            raise InvalidPeriodError("empty instant")
        return InstantPeriod(date)

    start = _trimmed_text(_find_child(node, "startDate"))
    end = _trimmed_text(_find_child(node, "endDate"))
    if start is not None and end is not None:
        return DurationPeriod(start, end)
    if start is None and end is None:
        return ForeverPeriod()
    raise InvalidPeriodError("partial duration (only start or end date)")


def _typed_value(node: etree._Element) -> str:
    inner = next((child for child in node if _is_element(child)), None)
    return _trimmed_text(inner) or ""


def _parse_container(node: etree._Element) -> DimensionalContainer:
    dimensions: list[DimensionMember] = []
    for child in node:
        if not _is_element(child):
            continue
        dimension = child.get("dimension")
        if dimension is None:
            continue
        tag = _local_name(child)
        if tag == "explicitMember":
            dimensions.append(
                DimensionMember(dimension=dimension, member=_trimmed_text(child) or "")
            )
        elif tag == "typedMember":
            value = _typed_value(child)
            dimensions.append(
                DimensionMember(
                    dimension=dimension, member=value, is_typed=True, typed_value=value
                )
            )
    return DimensionalContainer(dimensions=dimensions)


def _parse_context(node: etree._Element, context_id: str) -> Context:
    entity_node = _find_child(node, "entity")
    if entity_node is None:
        raise MissingElementError("entity")
    entity = _parse_entity(entity_node)
    segment_node = _find_child(entity_node, "segment")

    period_node = _find_child(node, "period")
    if period_node is None:
        raise MissingElementError("period")
    period = _parse_period(period_node)

    scenario_node = _find_child(node, "scenario")
    return Context(
        id=normalize_context_id(context_id),
        entity=entity,
        entity_segment=None if segment_node is None else _parse_container(segment_node),
        period=period,
        scenario=None if scenario_node is None else _parse_container(scenario_node),
    )


def parse_contexts(xml: str) -> ContextSet:
    """Parse every context element found anywhere in an instance document."""
    contexts = ContextSet()
    if not xml.strip():
        return contexts

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        raise ContextXmlError(str(exc)) from exc

    for node in root.iter():
        if not _is_element(node) or _local_name(node) != "context":
            continue
        context_id = node.get("id")
        if context_id is not None:
            contexts.insert(_parse_context(node, context_id))
    return contexts


def get_dimensional_members(context: Context) -> list[DimensionMember]:
    """Dimension members of the segment followed by those of the scenario."""
    members: list[DimensionMember] = []
    for container in (context.entity_segment, context.scenario):
        if container is not None:
            members.extend(container.dimensions)
    return members


def has_dimensions(context: Context) -> bool:
    """Whether the context carries any dimensional information."""
    return bool(get_dimensional_members(context))