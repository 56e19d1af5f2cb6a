"""Normalisation of dimension and unit identifiers."""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _normalize(raw: str) -> str:
    return raw.strip().translate(_ASCII_LOWER)


def normalize_dimension(raw: str) -> str:
    """Trim a dimension identifier and lower-case its ASCII letters."""
    return _normalize(raw)


def normalize_unit(raw: str) -> str:
    """Trim a unit identifier and lower-case its ASCII letters."""
    return _normalize(raw)


def has_linkbase_support() -> bool:
    """Whether full linkbase processing is available."""
    return False