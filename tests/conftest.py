"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from css_rename.substitution import MinimalSubstitutionMap


@pytest.fixture
def minimal_map() -> MinimalSubstitutionMap:
    """Provide a fresh MinimalSubstitutionMap with the default character sets."""
    return MinimalSubstitutionMap()


@pytest.fixture
def ab_minimal_map() -> MinimalSubstitutionMap:
    """Provide a MinimalSubstitutionMap limited to the characters ``a`` and ``b``."""
    return MinimalSubstitutionMap(start_chars="ab", chars="ab")
