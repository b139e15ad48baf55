"""Substitution map decorator that records which values it maps."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from css_rename.errors import BuilderConsumedError, UnsupportedDelegateError
from css_rename.substitution.base import (
    InitializableSubstitutionMap,
    SubstitutionMap,
    require_capability,
)


logger = logging.getLogger(__name__)

RecordPredicate = Callable[[str], bool]


def _always(key: str) -> bool:
    return True


class RecordingSubstitutionMap:
    """Delegates every lookup and keeps the mappings it produced, in query order.

    Instances come from :class:`RecordingSubstitutionMapBuilder`. The recorded
    table can be written out and later fed back through
    :meth:`RecordingSubstitutionMapBuilder.with_mappings` to keep renaming
    stable across incremental builds.
    """

    def __init__(
        self,
        delegate: SubstitutionMap,
        should_record: RecordPredicate,
        initial_mappings: Mapping[str, str],
    ) -> None:
        self._delegate = delegate
        self._should_record = should_record
        self._mappings: dict[str, str] = dict(initial_mappings)

    @property
    def delegate(self) -> SubstitutionMap:
        return self._delegate

    @property
    def should_record(self) -> RecordPredicate:
        return self._should_record

    def get(self, key: str) -> str:
        value = self._delegate.get(key)
        if key not in self._mappings and self._should_record(key):
            self._mappings[key] = value
        return value

    def get_mappings(self) -> Mapping[str, str]:
        """Return the recorded mappings in the order they were created."""
        return MappingProxyType(dict(self._mappings))


class RecordingSubstitutionMapBuilder:
    """Configures a :class:`RecordingSubstitutionMap`; usable for a single ``build()``."""

    def __init__(self) -> None:
        self._delegate: SubstitutionMap | None = None
        self._should_record: RecordPredicate = _always
        self._mappings: dict[str, str] = {}
        self._built = False

    def with_substitution_map(self, delegate: SubstitutionMap) -> RecordingSubstitutionMapBuilder:
        """Specify the underlying map. Later calls replace earlier ones."""
        self._check_not_built()
        require_capability(delegate, SubstitutionMap, "RecordingSubstitutionMap")
        self._delegate = delegate
        return self

    def should_record_mapping_for_code_generation(
        self, predicate: RecordPredicate
    ) -> RecordingSubstitutionMapBuilder:
        """Specify which keys get recorded. Later calls replace earlier ones."""
        self._check_not_built()
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        self._should_record = predicate
        return self

    def with_mappings(self, mappings: Mapping[str, str]) -> RecordingSubstitutionMapBuilder:
        """Add mappings to seed the delegate with. Later calls add to earlier ones.

        This reconstitutes a map from a table previously returned by
        :meth:`RecordingSubstitutionMap.get_mappings`.
        """
        self._check_not_built()
        self._mappings.update(mappings)
        return self

    def build(self) -> RecordingSubstitutionMap:
        """Freeze the configuration into a new map. The builder cannot be used again."""
        self._check_not_built()
        if self._delegate is None:
            raise UnsupportedDelegateError("RecordingSubstitutionMap requires a substitution map")

        delegate, should_record, mappings = self._delegate, self._should_record, self._mappings
        if mappings:
            if not isinstance(delegate, InitializableSubstitutionMap):
                raise UnsupportedDelegateError(
                    f"Cannot seed RecordingSubstitutionMap: delegate "
                    f"{type(delegate).__name__} does not accept initial mappings"
                )
            delegate.initialize_with_mappings(mappings)
            logger.info("Seeded recording map with %d mapping(s)", len(mappings))

        self._built = True
        self._delegate, self._mappings = None, {}
        return RecordingSubstitutionMap(delegate, should_record, mappings)

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderConsumedError("This builder has already been built")
