"""XBRL contexts, streaming facts, dimension taxonomies and unit validation."""

__version__ = "0.1.0a1"