"""Exceptions raised by the catalog core."""


class CatalogError(Exception):
    """Base class for catalog failures reported back to tool callers."""


class CatalogFetchError(CatalogError):
    """The upstream README could not be retrieved."""
