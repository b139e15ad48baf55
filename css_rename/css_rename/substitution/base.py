"""Capability contracts shared by every substitution map."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from css_rename.errors import InvalidArgumentError, UnsupportedDelegateError


@runtime_checkable
class SubstitutionMap(Protocol):
    """Translates an original CSS identifier into its output identifier."""

    def get(self, key: str) -> str: ...


@runtime_checkable
class InitializableSubstitutionMap(SubstitutionMap, Protocol):
    """A substitution map that can be seeded with mappings from a previous run."""

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None: ...


@runtime_checkable
class MultipleMappingSubstitutionMap(SubstitutionMap, Protocol):
    """A substitution map that can report every mapping behind a single lookup.

    A splitting map may rename ``goog-component`` as ``a-b``. The lookup then
    depends on two mappings, ``goog -> a`` and ``component -> b``, and the
    compound key itself is not guaranteed to appear among them.
    """

    def get_value_with_mappings(self, key: str) -> ValueWithMappings: ...


@dataclass(frozen=True)
class ValueWithMappings:
    """The value of a lookup plus the mappings that produced it."""

    value: str
    mappings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the mappings later.
        object.__setattr__(self, "mappings", MappingProxyType(dict(self.mappings)))

    @classmethod
    def for_single_mapping(cls, key: str, value: str) -> ValueWithMappings:
        return cls(value=value, mappings={key: value})

    @classmethod
    def from_pairs(cls, value: str, pairs: Iterable[tuple[str, str]]) -> ValueWithMappings:
        """Build from ``(key, value)`` pairs, keeping the first value seen per key."""
        mappings: dict[str, str] = {}
        for key, mapped in pairs:
            mappings.setdefault(key, mapped)
        return cls(value=value, mappings=mappings)


def check_key(key: object) -> str:
    """Return *key* if it is a non-empty string, otherwise raise InvalidArgumentError."""
    if key is None:
        raise InvalidArgumentError("CSS key cannot be None")
    if not isinstance(key, str):
        raise InvalidArgumentError(f"CSS key must be a string, got {type(key).__name__}")
    if not key:
        raise InvalidArgumentError("CSS key cannot be empty")
    return key


def require_capability(delegate: object, capability: type, owner: str) -> None:
    """Raise UnsupportedDelegateError unless *delegate* satisfies *capability*."""
    if not isinstance(delegate, capability):
        raise UnsupportedDelegateError(
            f"{owner} requires a delegate implementing {capability.__name__}, "
            f"got {type(delegate).__name__}"
        )
