"""Taxonomy descriptors and entry-point loading."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class NamespaceMapping:
    """A namespace prefix bound to its URI."""

    prefix: str = ""
    uri: str = ""


@dataclass
class DtsDescriptor:
    """Entry points and namespaces making up a discoverable taxonomy set."""

    entry_points: list[str] = field(default_factory=list)
    namespaces: list[NamespaceMapping] = field(default_factory=list)


def load_entry_points(entry_points: Iterable[str]) -> DtsDescriptor:
    """Build a descriptor from entry points alone, with no namespaces."""
    return DtsDescriptor(entry_points=list(entry_points), namespaces=[])