"""
Error hierarchy for colspec.
"""

from __future__ import annotations

from typing import Iterable


class SchemaBuilderError(RuntimeError):
    """Base error for schema builder failures."""


class UnknownDriverError(SchemaBuilderError, LookupError):
    """Raised when a connection reports a driver with no registered builder."""

    def __init__(self, driver: str, known_drivers: Iterable[str] = ()) -> None:
        self.driver = driver
        self.known_drivers = tuple(sorted(known_drivers))
        known = ", ".join(self.known_drivers) or "none"
        super().__init__(
            f"No schema builder registered for driver '{driver}' (known drivers: {known})."
        )


class BuilderImportError(SchemaBuilderError, ImportError):
    """Raised when a driver table entry cannot be imported as a builder class."""


class InvalidColumnArgumentError(SchemaBuilderError, ValueError):
    """Raised when a column factory receives an invalid argument combination."""


class UnsupportedColumnTypeError(SchemaBuilderError, KeyError):
    """Raised when a dialect has no physical spelling for an abstract type."""

    def __str__(self) -> str:
        # plain message rather than KeyError's repr
        return str(self.args[0]) if self.args else ""


class ConnectionResolutionError(SchemaBuilderError):
    """Raised when a connection reference cannot be resolved to a handle."""
