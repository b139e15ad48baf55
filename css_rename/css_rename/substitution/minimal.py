"""Substitution map that renames CSS classes to the shortest string possible."""

from __future__ import annotations

import itertools
import logging
import string
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType

from css_rename.errors import ConflictingMappingError, NamespaceExhaustedError
from css_rename.substitution.base import check_key


logger = logging.getLogger(__name__)

# Possible first chars in a CSS class name. ASCII only, and no "-" so that
# generated names stay usable as fragments of a split class name.
START_CHARS = string.ascii_lowercase + string.ascii_uppercase

# Possible non-first chars in a CSS class name.
CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits

DEFAULT_MAX_LENGTH = 6


def _enumerate_names(
    start_chars: tuple[str, ...], chars: tuple[str, ...], max_length: int
) -> Iterator[str]:
    """Yield every name up to *max_length*, shortest first, then lexicographically."""
    for length in range(1, max_length + 1):
        for first in start_chars:
            for rest in itertools.product(chars, repeat=length - 1):
                yield first + "".join(rest)


class MinimalSubstitutionMap:
    """Generates the shortest unused identifier for each new key.

    Generated values never repeat, never appear in the blacklist and never
    satisfy the ``reserved`` predicate. Seeded values are treated as taken.
    """

    def __init__(
        self,
        start_chars: Iterable[str] = START_CHARS,
        chars: Iterable[str] = CHARS,
        output_value_blacklist: Iterable[str] = (),
        *,
        reserved: Callable[[str], bool] | None = None,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self._start_chars = tuple(start_chars)
        self._chars = tuple(chars)
        if not self._start_chars:
            raise ValueError("start_chars must not be empty")
        if not self._chars:
            raise ValueError("chars must not be empty")
        if max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {max_length}")

        self._blacklist = frozenset(output_value_blacklist)
        self._reserved = reserved
        self._max_length = max_length
        self._renamed: dict[str, str] = {}
        # Reverse index of _renamed: every value handed out or seeded -> its key.
        self._owners: dict[str, str] = {}
        self._candidates = _enumerate_names(self._start_chars, self._chars, max_length)

    @property
    def output_value_blacklist(self) -> frozenset[str]:
        return self._blacklist

    @property
    def mappings(self) -> Mapping[str, str]:
        """Snapshot of every key renamed so far, seeded keys first."""
        return MappingProxyType(dict(self._renamed))

    def get(self, key: str) -> str:
        check_key(key)
        value = self._renamed.get(key)
        if value is None:
            value = self._next_value(key)
            self._renamed[key] = value
            self._owners[value] = key
        return value

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        """Seed the map so that earlier output is reproduced and never reissued.

        The whole seed is checked before any of it is applied.
        """
        owners = dict(self._owners)
        pending: dict[str, str] = {}
        for key, value in mappings.items():
            check_key(key)
            check_key(value)
            current = self._renamed.get(key, pending.get(key))
            if current is not None and current != value:
                raise ConflictingMappingError(
                    f"Cannot seed {key!r} -> {value!r}: already mapped to {current!r}"
                )
            owner = owners.get(value)
            if owner is not None and owner != key:
                raise ConflictingMappingError(
                    f"Cannot seed {key!r} -> {value!r}: value already used by {owner!r}"
                )
            owners[value] = key
            pending[key] = value

        for key, value in pending.items():
            self._renamed[key] = value
            self._owners[value] = key
        logger.debug("Seeded minimal map with %d mapping(s)", len(pending))

    def to_short_string(self, index: int) -> str:
        """Return the name at position *index* of the enumeration.

        Position 0 is the first start char; all names of length n come before
        any name of length n + 1. Taken and blacklisted names are not skipped.
        """
        if index < 0:
            raise ValueError(f"index must not be negative, got {index}")

        length = 1
        block = len(self._start_chars)
        while index >= block:
            index -= block
            length += 1
            block *= len(self._chars)

        tail_size = block // len(self._start_chars)
        first, rest = divmod(index, tail_size)
        tail: list[str] = []
        for _ in range(length - 1):
            rest, digit = divmod(rest, len(self._chars))
            tail.append(self._chars[digit])
        return self._start_chars[first] + "".join(reversed(tail))

    def _next_value(self, key: str) -> str:
        for candidate in self._candidates:
            if candidate in self._owners or candidate in self._blacklist:
                continue
            if self._reserved is not None and self._reserved(candidate):
                continue
            return candidate

        logger.error("Minimal map exhausted while renaming %r", key)
        raise NamespaceExhaustedError(
            f"No identifier of at most {self._max_length} character(s) is left for {key!r}"
        )
