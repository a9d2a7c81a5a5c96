from __future__ import annotations


class DishmatchError(Exception):
    """Base class for errors raised by dishmatch."""


class InvalidInput(DishmatchError):
    """Raised when a caller passes missing or malformed menu text, profile or catalog."""


class CatalogError(DishmatchError):
    """Raised when an ingredient catalog cannot be loaded or is inconsistent."""
