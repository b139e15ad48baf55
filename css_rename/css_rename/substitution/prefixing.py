"""Substitution maps that prefix the values of a delegate map."""

from __future__ import annotations

from collections.abc import Mapping

from css_rename.errors import UnsupportedDelegateError
from css_rename.substitution.base import (
    InitializableSubstitutionMap,
    MultipleMappingSubstitutionMap,
    SubstitutionMap,
    ValueWithMappings,
    require_capability,
)


class PrefixingSubstitutionMap:
    """Prepends a fixed prefix to every value produced by the delegate."""

    def __init__(self, delegate: SubstitutionMap, prefix: str) -> None:
        require_capability(delegate, SubstitutionMap, type(self).__name__)
        if not isinstance(prefix, str):
            raise TypeError(f"prefix must be a string, got {type(prefix).__name__}")
        self._delegate = delegate
        self._prefix = prefix

    @property
    def delegate(self) -> SubstitutionMap:
        return self._delegate

    @property
    def prefix(self) -> str:
        return self._prefix

    def get(self, key: str) -> str:
        return self._prefix + self._delegate.get(key)

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        """Seed the delegate, dropping the prefix from values that carry it."""
        if not mappings:
            return
        if not isinstance(self._delegate, InitializableSubstitutionMap):
            raise UnsupportedDelegateError(
                f"Cannot seed {type(self).__name__}: delegate "
                f"{type(self._delegate).__name__} does not accept initial mappings"
            )
        self._delegate.initialize_with_mappings(
            {key: self._strip_prefix(value) for key, value in mappings.items()}
        )

    def _strip_prefix(self, value: str) -> str:
        if self._prefix and value.startswith(self._prefix):
            return value[len(self._prefix) :]
        return value


class MultipleMappingPrefixingSubstitutionMap(PrefixingSubstitutionMap):
    """Prefixing map over a delegate that reports the mappings behind each lookup.

    Only the top-level value is prefixed; the delegate's mappings are passed on
    as produced, so they hold unprefixed values.
    """

    def __init__(self, delegate: MultipleMappingSubstitutionMap, prefix: str) -> None:
        require_capability(delegate, MultipleMappingSubstitutionMap, type(self).__name__)
        super().__init__(delegate, prefix)
        self._multi_delegate = delegate

    def get_value_with_mappings(self, key: str) -> ValueWithMappings:
        without_prefix = self._multi_delegate.get_value_with_mappings(key)
        return ValueWithMappings(
            value=self.prefix + without_prefix.value, mappings=without_prefix.mappings
        )


def prefixing_map(delegate: SubstitutionMap, prefix: str) -> PrefixingSubstitutionMap:
    """Return the prefixing map matching the capabilities of *delegate*."""
    if isinstance(delegate, MultipleMappingSubstitutionMap):
        return MultipleMappingPrefixingSubstitutionMap(delegate, prefix)
    return PrefixingSubstitutionMap(delegate, prefix)
