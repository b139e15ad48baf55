"""Renaming strategies, skip predicates and preset renaming types."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from enum import Enum

from css_rename.errors import UnsupportedDelegateError
from css_rename.substitution import (
    IdentitySubstitutionMap,
    InitializableSubstitutionMap,
    MinimalSubstitutionMap,
    SimpleSubstitutionMap,
    SplittingSubstitutionMap,
    SubstitutionMap,
)
from css_rename.substitution.base import check_key, require_capability


SkipPredicate = Callable[[str], bool]
RenamingFunction = Callable[[str], str]


class RenamingStrategy(str, Enum):
    NONE = "none"
    DEBUG = "debug"
    MINIMAL = "minimal"


class CallableSubstitutionMap:
    """Adapts a plain renaming function, remembering its first answer per key."""

    def __init__(self, function: RenamingFunction) -> None:
        if not callable(function):
            raise TypeError("function must be callable")
        self._function = function
        self._renamed: dict[str, str] = {}

    def get(self, key: str) -> str:
        check_key(key)
        if key not in self._renamed:
            self._renamed[key] = self._function(key)
        return self._renamed[key]

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        self._renamed.update(mappings)


class SkippingSubstitutionMap:
    """Maps keys matching the skip predicate to themselves, delegating the rest.

    Placed under a splitting map, this leaves excepted fragments of a compound
    name untouched while the other fragments are renamed.
    """

    def __init__(self, delegate: SubstitutionMap, skip: SkipPredicate) -> None:
        require_capability(delegate, SubstitutionMap, type(self).__name__)
        self._delegate = delegate
        self._skip = skip

    def get(self, key: str) -> str:
        check_key(key)
        if self._skip(key):
            return key
        return self._delegate.get(key)

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        renamed = {key: value for key, value in mappings.items() if not self._skip(key)}
        if not renamed:
            return
        if not isinstance(self._delegate, InitializableSubstitutionMap):
            raise UnsupportedDelegateError(
                f"Cannot seed {type(self).__name__}: delegate "
                f"{type(self._delegate).__name__} does not accept initial mappings"
            )
        self._delegate.initialize_with_mappings(renamed)


def _never(name: str) -> bool:
    return False


def create_skip_predicate(except_: Iterable[str | re.Pattern[str]] | None = None) -> SkipPredicate:
    """Build a predicate matching names that must be neither renamed nor generated.

    Strings match exactly; compiled patterns match anywhere in the name.
    """
    if not except_:
        return _never

    names: set[str] = set()
    patterns: list[re.Pattern[str]] = []
    for item in except_:
        if isinstance(item, re.Pattern):
            patterns.append(item)
        else:
            names.add(item)

    def skip(name: str) -> bool:
        return name in names or any(pattern.search(name) for pattern in patterns)

    return skip


def create_substitution_map(
    strategy: RenamingStrategy | str | RenamingFunction,
    skip: SkipPredicate | None = None,
) -> SubstitutionMap:
    """Return the base substitution map for *strategy*."""
    if callable(strategy):
        return CallableSubstitutionMap(strategy)

    try:
        resolved = RenamingStrategy(strategy)
    except ValueError:
        raise ValueError(f'Unknown strategy "{strategy}".') from None

    if resolved is RenamingStrategy.NONE:
        return IdentitySubstitutionMap()
    if resolved is RenamingStrategy.DEBUG:
        return SimpleSubstitutionMap()
    return MinimalSubstitutionMap(reserved=skip)


class RenamingType(Enum):
    """Preset renaming chains, one per ``--rename`` style option value."""

    # No renaming is done.
    NONE = "none"
    # A trailing underscore is added to each part of a CSS class.
    DEBUG = "debug"
    # Each part of a CSS class is renamed to the shortest available name.
    CLOSURE = "closure"

    def create_map(self) -> SubstitutionMap:
        if self is RenamingType.NONE:
            return IdentitySubstitutionMap()
        if self is RenamingType.DEBUG:
            return SplittingSubstitutionMap(SimpleSubstitutionMap())
        return SplittingSubstitutionMap(MinimalSubstitutionMap())
