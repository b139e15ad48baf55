"""Substitution maps for consistent CSS class renaming."""

from css_rename.substitution.base import (
    InitializableSubstitutionMap,
    MultipleMappingSubstitutionMap,
    SubstitutionMap,
    ValueWithMappings,
)
from css_rename.substitution.identity import IdentitySubstitutionMap, SimpleSubstitutionMap
from css_rename.substitution.minimal import MinimalSubstitutionMap
from css_rename.substitution.prefixing import (
    MultipleMappingPrefixingSubstitutionMap,
    PrefixingSubstitutionMap,
    prefixing_map,
)
from css_rename.substitution.recording import (
    RecordingSubstitutionMap,
    RecordingSubstitutionMapBuilder,
)
from css_rename.substitution.splitting import SplittingSubstitutionMap


__all__ = [
    "IdentitySubstitutionMap",
    "InitializableSubstitutionMap",
    "MinimalSubstitutionMap",
    "MultipleMappingPrefixingSubstitutionMap",
    "MultipleMappingSubstitutionMap",
    "PrefixingSubstitutionMap",
    "RecordingSubstitutionMap",
    "RecordingSubstitutionMapBuilder",
    "SimpleSubstitutionMap",
    "SplittingSubstitutionMap",
    "SubstitutionMap",
    "ValueWithMappings",
    "prefixing_map",
]
