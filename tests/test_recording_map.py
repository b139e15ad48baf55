"""Tests for the RecordingSubstitutionMap and its builder."""

from __future__ import annotations

import pytest

from css_rename.errors import BuilderConsumedError, UnsupportedDelegateError
from css_rename.substitution import (
    IdentitySubstitutionMap,
    MinimalSubstitutionMap,
    RecordingSubstitutionMapBuilder,
    SplittingSubstitutionMap,
    prefixing_map,
)


class TestRecordingSubstitutionMap:
    """Test recording of produced mappings."""

    def test_records_in_first_query_order(self, minimal_map: MinimalSubstitutionMap) -> None:
        """Test that repeated queries neither reorder nor duplicate entries."""
        recording = RecordingSubstitutionMapBuilder().with_substitution_map(minimal_map).build()

        for key in ["a", "b", "a", "c"]:
            recording.get(key)

        assert list(recording.get_mappings().items()) == [("a", "a"), ("b", "b"), ("c", "c")]

    def test_get_delegates(self, minimal_map: MinimalSubstitutionMap) -> None:
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(prefixing_map(minimal_map, "x-"))
            .build()
        )

        assert recording.get("header") == "x-a"
        assert recording.get("header") == "x-a"
        assert dict(recording.get_mappings()) == {"header": "x-a"}

    def test_predicate_filters_recording(self, minimal_map: MinimalSubstitutionMap) -> None:
        """Test that only keys accepted by the predicate are recorded."""
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(minimal_map)
            .should_record_mapping_for_code_generation(lambda key: not key.startswith("goog"))
            .build()
        )

        assert recording.get("goog-menu") == "a"
        assert recording.get("menu") == "b"
        assert dict(recording.get_mappings()) == {"menu": "b"}

    def test_predicate_replaced_by_later_call(self, minimal_map: MinimalSubstitutionMap) -> None:
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(minimal_map)
            .should_record_mapping_for_code_generation(lambda key: False)
            .should_record_mapping_for_code_generation(lambda key: True)
            .build()
        )

        recording.get("menu")

        assert dict(recording.get_mappings()) == {"menu": "a"}

    def test_mappings_snapshot_is_read_only(self, minimal_map: MinimalSubstitutionMap) -> None:
        recording = RecordingSubstitutionMapBuilder().with_substitution_map(minimal_map).build()
        recording.get("menu")

        snapshot = recording.get_mappings()
        recording.get("header")

        assert dict(snapshot) == {"menu": "a"}
        with pytest.raises(TypeError):
            snapshot["other"] = "z"  # type: ignore[index]

    def test_records_compound_keys(self, minimal_map: MinimalSubstitutionMap) -> None:
        """Test that a splitting delegate still records the queried key."""
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(SplittingSubstitutionMap(minimal_map))
            .build()
        )

        recording.get("full-height")

        assert dict(recording.get_mappings()) == {"full-height": "a-b"}


class TestRecordingSubstitutionMapBuilder:
    """Test the builder."""

    def test_seed_reproduces_previous_run(self) -> None:
        """Test that persisted mappings seed a fresh chain to the same output."""
        first = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(
                prefixing_map(SplittingSubstitutionMap(MinimalSubstitutionMap()), "p-")
            )
            .build()
        )
        previous = {key: first.get(key) for key in ["full-height", "image", "full-width"]}

        second = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(
                prefixing_map(SplittingSubstitutionMap(MinimalSubstitutionMap()), "p-")
            )
            .with_mappings(first.get_mappings())
            .build()
        )

        assert second.get("new-name") == "p-e-f"
        for key, value in previous.items():
            assert second.get(key) == value
        assert list(second.get_mappings())[:3] == ["full-height", "image", "full-width"]

    def test_with_mappings_merges(self, minimal_map: MinimalSubstitutionMap) -> None:
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(minimal_map)
            .with_mappings({"header": "x"})
            .with_mappings({"footer": "y"})
            .build()
        )

        assert recording.get("header") == "x"
        assert recording.get("footer") == "y"
        assert dict(recording.get_mappings()) == {"header": "x", "footer": "y"}

    def test_with_substitution_map_replaces(self, minimal_map: MinimalSubstitutionMap) -> None:
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(IdentitySubstitutionMap())
            .with_substitution_map(minimal_map)
            .build()
        )

        assert recording.delegate is minimal_map

    def test_build_requires_delegate(self) -> None:
        with pytest.raises(UnsupportedDelegateError):
            RecordingSubstitutionMapBuilder().build()

    def test_rejects_non_map(self) -> None:
        with pytest.raises(UnsupportedDelegateError):
            RecordingSubstitutionMapBuilder().with_substitution_map(42)  # type: ignore[arg-type]

    def test_seed_requires_initializable_delegate(self) -> None:
        builder = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(IdentitySubstitutionMap())
            .with_mappings({"foo": "bar"})
        )

        with pytest.raises(UnsupportedDelegateError):
            builder.build()

    def test_builder_is_one_shot(self, minimal_map: MinimalSubstitutionMap) -> None:
        """Test that the builder cannot be built or configured again."""
        builder = RecordingSubstitutionMapBuilder().with_substitution_map(minimal_map)
        builder.build()

        with pytest.raises(BuilderConsumedError):
            builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.with_mappings({"foo": "a"})
        with pytest.raises(BuilderConsumedError):
            builder.with_substitution_map(minimal_map)

    def test_built_maps_are_independent(self) -> None:
        """Test that mutating a seed dict after build does not leak into the map."""
        seed = {"header": "x"}
        recording = (
            RecordingSubstitutionMapBuilder()
            .with_substitution_map(MinimalSubstitutionMap())
            .with_mappings(seed)
            .build()
        )
        seed["footer"] = "y"

        assert dict(recording.get_mappings()) == {"header": "x"}
