"""Discoverable taxonomy set construction and profile-aware checks."""

from __future__ import annotations

from collections.abc import Iterable

from xbrlkit.taxonomy_types import DtsDescriptor, NamespaceMapping

_DIGITS = frozenset("0123456789")


def build_dts(
    accepted_namespaces: Iterable[NamespaceMapping], entry_points: Iterable[str]
) -> DtsDescriptor:
    """Build a descriptor keeping the accepted namespaces named as entry points."""
    points = list(entry_points)
    wanted = set(points)
    namespaces = [ns for ns in accepted_namespaces if ns.uri in wanted]
    return DtsDescriptor(entry_points=points, namespaces=namespaces)


def _year_of(entry_point: str) -> str | None:
    return next(
        (
            segment
            for segment in entry_point.split("/")
            if len(segment) == 4 and set(segment) <= _DIGITS
        ),
        None,
    )


def mixed_taxonomy_years(entry_points: Iterable[str]) -> bool:
    """Whether the entry points refer to more than one taxonomy year."""
    years = {year for year in map(_year_of, entry_points) if year is not None}
    return len(years) > 1


def nonstandard_entry_points(
    dts: DtsDescriptor, standard_taxonomy_uris: Iterable[str]
) -> list[str]:
    """Entry points of the descriptor that are not standard taxonomy locations."""
    standard = set(standard_taxonomy_uris)
    match dts:
        case DtsDescriptor(entry_points=points):
            return [point for point in points if point not in standard]
        case _:
            raise TypeError("expected a DtsDescriptor")