"""Errors raised while loading a dimension taxonomy."""

from __future__ import annotations


class TaxonomyLoaderError(Exception):
    """A taxonomy could not be loaded."""


class TaxonomyIoError(TaxonomyLoaderError):
    """A file could not be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"io error reading {path}: {cause}")
        self.path = path
        self.cause = cause
        self.__cause__ = cause


class XmlParseError(TaxonomyLoaderError):
    """A document was not well-formed XML."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"xml parse error: {detail}")
        self.detail = detail


class UnsupportedUrlError(TaxonomyLoaderError):
    """A URL used a scheme other than http or https."""

    def __init__(self, url: str) -> None:
        super().__init__(f"unsupported URL: {url}")
        self.url = url


class HttpError(TaxonomyLoaderError):
    """An HTTP request failed or returned an error status."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__(f"HTTP request failed for {url}: {detail}")
        self.url = url
        self.detail = detail


class UrlParseError(TaxonomyLoaderError):
    """A URL could not be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"URL parsing error: {detail}")
        self.detail = detail


class MissingElementError(TaxonomyLoaderError):
    """A required element or attribute was absent."""

    def __init__(self, element: str) -> None:
        super().__init__(f"missing required element: {element}")
        self.element = element


class InvalidSchemaRefError(TaxonomyLoaderError):
    """A schema reference could not be used."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"invalid schema reference: {reference}")
        self.reference = reference


class InvalidLinkbaseRefError(TaxonomyLoaderError):
    """A linkbase reference could not be used."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"invalid linkbase reference: {reference}")
        self.reference = reference