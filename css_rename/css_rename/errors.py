"""Errors raised by substitution maps and their builders."""

from __future__ import annotations


class RenamingError(Exception):
    """Base class for every renaming failure."""


class InvalidArgumentError(RenamingError, ValueError):
    """A key passed to ``get`` was missing, not a string, or empty."""


class ConflictingMappingError(RenamingError, ValueError):
    """Seeding would change a value that has already been assigned."""


class NamespaceExhaustedError(RenamingError):
    """No further identifier can be generated with the configured characters."""


class UnsupportedDelegateError(RenamingError, TypeError):
    """A decorator was given a delegate lacking a capability it needs."""


class BuilderConsumedError(RenamingError, RuntimeError):
    """A builder was used again after ``build()``."""
