"""Substitution map that renames the parts of compound class names separately."""

from __future__ import annotations

from collections.abc import Mapping

from css_rename.errors import ConflictingMappingError, UnsupportedDelegateError
from css_rename.substitution.base import (
    InitializableSubstitutionMap,
    SubstitutionMap,
    ValueWithMappings,
    check_key,
    require_capability,
)


DEFAULT_SEPARATOR = "-"


class SplittingSubstitutionMap:
    """Splits keys on a separator and renames each fragment through the delegate.

    ``goog-component`` may become ``a-b``: the delegate sees ``goog`` and
    ``component`` independently, so a fragment shared by many compound names
    is renamed the same way everywhere. Empty fragments, produced by leading,
    trailing or doubled separators, are kept as they are.
    """

    def __init__(self, delegate: SubstitutionMap, separator: str = DEFAULT_SEPARATOR) -> None:
        require_capability(delegate, SubstitutionMap, type(self).__name__)
        if not isinstance(separator, str) or not separator:
            raise ValueError("separator must be a non-empty string")
        self._delegate = delegate
        self._separator = separator

    @property
    def delegate(self) -> SubstitutionMap:
        return self._delegate

    @property
    def separator(self) -> str:
        return self._separator

    def get(self, key: str) -> str:
        return self.get_value_with_mappings(key).value

    def get_value_with_mappings(self, key: str) -> ValueWithMappings:
        check_key(key)

        # Common case: nothing to split.
        if self._separator not in key:
            return ValueWithMappings.for_single_mapping(key, self._delegate.get(key))

        parts: list[str] = []
        pairs: list[tuple[str, str]] = []
        for fragment in key.split(self._separator):
            if not fragment:
                parts.append(fragment)
                continue
            value = self._delegate.get(fragment)
            pairs.append((fragment, value))
            parts.append(value)

        return ValueWithMappings.from_pairs(self._separator.join(parts), pairs)

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        """Seed the delegate with the fragment mappings behind each entry.

        A compound entry such as ``foo-bar -> a-b`` seeds ``foo -> a`` and
        ``bar -> b``.
        """
        if not mappings:
            return
        if not isinstance(self._delegate, InitializableSubstitutionMap):
            raise UnsupportedDelegateError(
                f"Cannot seed {type(self).__name__}: delegate "
                f"{type(self._delegate).__name__} does not accept initial mappings"
            )

        fragments: dict[str, str] = {}
        for key, value in mappings.items():
            for fragment, renamed in self._split_entry(check_key(key), check_key(value)):
                previous = fragments.setdefault(fragment, renamed)
                if previous != renamed:
                    raise ConflictingMappingError(
                        f"Fragment {fragment!r} seeded as both {previous!r} and {renamed!r}"
                    )
        self._delegate.initialize_with_mappings(fragments)

    def _split_entry(self, key: str, value: str) -> list[tuple[str, str]]:
        if self._separator not in key:
            return [(key, value)]

        key_parts = key.split(self._separator)
        value_parts = value.split(self._separator)
        if len(key_parts) != len(value_parts) or any(
            bool(k) != bool(v) for k, v in zip(key_parts, value_parts)
        ):
            raise ConflictingMappingError(
                f"Cannot seed {key!r} -> {value!r}: fragments do not line up "
                f"on separator {self._separator!r}"
            )
        return [(k, v) for k, v in zip(key_parts, value_parts) if k]
