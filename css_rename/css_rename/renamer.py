"""Composes substitution maps into a complete class renaming pass."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from css_rename.strategy import (
    RenamingFunction,
    RenamingStrategy,
    SkippingSubstitutionMap,
    create_skip_predicate,
    create_substitution_map,
)
from css_rename.substitution import (
    RecordingSubstitutionMap,
    RecordingSubstitutionMapBuilder,
    SplittingSubstitutionMap,
    SubstitutionMap,
    prefixing_map,
)
from css_rename.substitution.splitting import DEFAULT_SEPARATOR


RENAME_BY_CHOICES: tuple[str, ...] = ("whole", "part")


@dataclass(frozen=True)
class RenamingConfig:
    """How class names are renamed.

    ``by="part"`` splits names on ``separator`` and renames each part on its
    own. Names in ``except_`` (strings or compiled patterns) are left alone
    and are never produced by the minimal strategy.
    """

    strategy: RenamingStrategy | str | RenamingFunction = RenamingStrategy.NONE
    by: str = "whole"
    prefix: str = ""
    except_: tuple[str | re.Pattern[str], ...] = field(default_factory=tuple)
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if self.by not in RENAME_BY_CHOICES:
            raise ValueError(f'Unknown mode "{self.by}".')
        if not callable(self.strategy):
            try:
                RenamingStrategy(self.strategy)
            except ValueError:
                raise ValueError(f'Unknown strategy "{self.strategy}".') from None
        object.__setattr__(self, "except_", tuple(self.except_))


class ClassRenamer:
    """Renames class names consistently and records every rename it performs."""

    def __init__(self, config: RenamingConfig, seed: Mapping[str, str] | None = None) -> None:
        self._config = config
        self._skip = create_skip_predicate(config.except_)
        builder = RecordingSubstitutionMapBuilder().with_substitution_map(self._build_chain())
        if seed:
            builder.with_mappings(seed)
        self._map: RecordingSubstitutionMap = builder.build()

    @property
    def config(self) -> RenamingConfig:
        return self._config

    @property
    def substitution_map(self) -> RecordingSubstitutionMap:
        return self._map

    @property
    def mappings(self) -> Mapping[str, str]:
        return self._map.get_mappings()

    def rename(self, name: str) -> str:
        if self._skip(name):
            return name
        return self._map.get(name)

    def rename_all(self, names: Iterable[str]) -> list[str]:
        return [self.rename(name) for name in names]

    def _build_chain(self) -> SubstitutionMap:
        chain = create_substitution_map(self._config.strategy, skip=self._skip)
        if self._config.by == "part":
            # Excepted fragments of a compound name stay as they are.
            chain = SplittingSubstitutionMap(
                SkippingSubstitutionMap(chain, self._skip), separator=self._config.separator
            )
        return prefixing_map(chain, self._config.prefix)
