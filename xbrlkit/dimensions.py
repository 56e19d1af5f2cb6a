"""XBRL Dimensions taxonomy: dimensions, domains, hypercubes and their links."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Dimension:
    """An explicit dimension, or a typed one when ``value_type`` is set."""

    qname: str
    value_type: str | None = None
    default_domain: str | None = None
    required: bool = False

    @property
    def is_typed(self) -> bool:
        return self.value_type is not None


@dataclass
class DomainMember:
    """A member in a domain hierarchy."""

    qname: str = ""
    parent: str | None = None
    order: int = 0
    label: str | None = None


@dataclass
class Domain:
    """A domain containing a hierarchy of members."""

    qname: str = ""
    members: dict[str, DomainMember] = field(default_factory=dict)
    roots: list[str] = field(default_factory=list)

    def add_member(self, member: DomainMember) -> None:
        """Add a member; members without a parent become roots."""
        if member.parent is None:
            self.roots.append(member.qname)
        self.members[member.qname] = member

    def contains(self, qname: str) -> bool:
        """Whether the QName is a member of this domain."""
        return qname in self.members

    def descendants(self, qname: str) -> list[str]:
        """All descendants of a member, depth first, children in QName order."""
        result: list[str] = []
        for name in sorted(self.members):
            if self.members[name].parent == qname:
                result.append(name)
                result.extend(self.descendants(name))
        return result

    def path_to(self, qname: str) -> list[str]:
        """The path from a root down to the member, empty if unknown."""
        path: list[str] = []
        current = qname
        while (member := self.members.get(current)) is not None:
            path.append(current)
            if member.parent is None:
                break
            current = member.parent
        path.reverse()
        return path


@dataclass
class Hypercube:
    """A hypercube: the dimensions that apply to a concept."""

    qname: str = ""
    dimensions: dict[str, bool] = field(default_factory=dict)
    label: str | None = None

    def add_dimension(self, qname: str, required: bool) -> None:
        self.dimensions[qname] = required

    def dimension_qnames(self) -> list[str]:
        """All dimension QNames, sorted."""
        return sorted(self.dimensions)

    def required_dimensions(self) -> list[str]:
        """QNames of the required dimensions, sorted."""
        return sorted(name for name, required in self.dimensions.items() if required)


@dataclass
class ConceptHypercubes:
    """Hypercubes attached to a concept; the flag is true for closed (all) cubes."""

    concept_qname: str = ""
    hypercubes: dict[str, bool] = field(default_factory=dict)


class DimensionValidationError(Exception):
    """A dimension-member pair failed validation."""


class UnknownDimensionError(DimensionValidationError):
    def __init__(self, dimension: str) -> None:
        super().__init__(f"unknown dimension: {dimension}")
        self.dimension = dimension


class NoDomainError(DimensionValidationError):
    def __init__(self, dimension: str) -> None:
        super().__init__(f"dimension {dimension} has no domain defined")
        self.dimension = dimension


class InvalidMemberError(DimensionValidationError):
    def __init__(self, dimension: str, member: str, domain: str) -> None:
        super().__init__(
            f"invalid member {member} for dimension {dimension} in domain {domain}"
        )
        self.dimension = dimension
        self.member = member
        self.domain = domain


@dataclass
class DimensionTaxonomy:
    """The complete dimension taxonomy of a DTS."""

    dimensions: dict[str, Dimension] = field(default_factory=dict)
    domains: dict[str, Domain] = field(default_factory=dict)
    hypercubes: dict[str, Hypercube] = field(default_factory=dict)
    concept_hypercubes: dict[str, ConceptHypercubes] = field(default_factory=dict)
    dimension_domains: dict[str, str] = field(default_factory=dict)

    def add_dimension(self, dimension: Dimension) -> None:
        self.dimensions[dimension.qname] = dimension

    def add_domain(self, domain: Domain) -> None:
        self.domains[domain.qname] = domain

    def add_hypercube(self, hypercube: Hypercube) -> None:
        self.hypercubes[hypercube.qname] = hypercube

    def associate_concept_hypercube(
        self, concept_qname: str, hypercube_qname: str, is_all: bool
    ) -> None:
        entry = self.concept_hypercubes.setdefault(
            concept_qname, ConceptHypercubes(concept_qname=concept_qname)
        )
        entry.hypercubes[hypercube_qname] = is_all

    def link_dimension_domain(self, dimension_qname: str, domain_qname: str) -> None:
        self.dimension_domains[dimension_qname] = domain_qname

    def hypercubes_for_concept(self, concept_qname: str) -> list[str]:
        """Hypercube QNames attached to the concept, sorted."""
        entry = self.concept_hypercubes.get(concept_qname)
        return sorted(entry.hypercubes) if entry else []

    def required_dimensions_for_concept(self, concept_qname: str) -> list[str]:
        """Required dimensions of a concept: every dimension of a closed cube,
        only the required ones of an open cube."""
        required: set[str] = set()
        entry = self.concept_hypercubes.get(concept_qname)
        if entry:
            for cube_qname, is_all in entry.hypercubes.items():
                cube = self.hypercubes.get(cube_qname)
                if cube is None:
                    continue
                required.update(
                    cube.dimension_qnames() if is_all else cube.required_dimensions()
                )
        return sorted(required)

    def validate_member(self, dimension_qname: str, member_qname: str) -> None:
        """Raise a DimensionValidationError unless the member is valid."""
        dimension = self.dimensions.get(dimension_qname)
        if dimension is None:
            raise UnknownDimensionError(dimension_qname)
        if dimension.is_typed:
            return
        domain_qname = self.dimension_domains.get(dimension_qname)
        if domain_qname is not None:
            domain = self.domains.get(domain_qname)
            if domain is not None:
                if domain.contains(member_qname):
                    return
                raise InvalidMemberError(dimension_qname, member_qname, domain_qname)
        raise NoDomainError(dimension_qname)