"""Substitution maps that derive the output directly from the key."""

from __future__ import annotations

from css_rename.substitution.base import check_key


class IdentitySubstitutionMap:
    """Returns every key unchanged."""

    def get(self, key: str) -> str:
        return check_key(key)


class SimpleSubstitutionMap:
    """Appends an underscore to every key.

    Handy while debugging: the renamed class stays recognizable, yet markup
    that hardcodes the original class name stops matching its styles.
    """

    def get(self, key: str) -> str:
        return check_key(key) + "_"
