"""
Exception hierarchy.
"""


class Orrery3DError(Exception):
    """Base class for every error raised by the package."""


class CatalogError(Orrery3DError, ValueError):
    """The body catalog violates one of its invariants."""


class BodyNotFoundError(Orrery3DError, KeyError):
    """No body with the requested name is registered."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"no body named {self.name!r}"


class BackendError(Orrery3DError, RuntimeError):
    """Graphics backend failure: unknown backend, shader compile/link error."""
