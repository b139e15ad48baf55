"""Consistent CSS class renaming."""

from css_rename.errors import (
    BuilderConsumedError,
    ConflictingMappingError,
    InvalidArgumentError,
    NamespaceExhaustedError,
    RenamingError,
    UnsupportedDelegateError,
)
from css_rename.renamer import ClassRenamer, RenamingConfig


__all__ = [
    "BuilderConsumedError",
    "ClassRenamer",
    "ConflictingMappingError",
    "InvalidArgumentError",
    "NamespaceExhaustedError",
    "RenamingConfig",
    "RenamingError",
    "UnsupportedDelegateError",
]
