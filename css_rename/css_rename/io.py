from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

import pandas as pd

from css_rename.errors import ConflictingMappingError


logger = logging.getLogger(__name__)

ORIGINAL_COLUMN = "original"
RENAMED_COLUMN = "renamed"


class _JsonObject(list):
    """Key/value pairs of a JSON object, duplicates included."""


class MappingFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    PARQUET = "parquet"


SUFFIX_FORMATS: dict[str, MappingFormat] = {
    ".json": MappingFormat.JSON,
    ".csv": MappingFormat.CSV,
    ".parquet": MappingFormat.PARQUET,
}


def format_for_path(path: Path) -> MappingFormat:
    fmt = SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        supported = ", ".join(SUFFIX_FORMATS)
        raise ValueError(f"Unsupported renaming map format: {path} (expected {supported})")
    return fmt


def write_renaming_map(
    mapping: Mapping[str, str], path: Path, fmt: MappingFormat | None = None
) -> None:
    fmt = fmt or format_for_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == MappingFormat.JSON:
        path.write_text(json.dumps(dict(mapping), indent=2))
    else:
        df = pd.DataFrame(
            {
                ORIGINAL_COLUMN: list(mapping.keys()),
                RENAMED_COLUMN: list(mapping.values()),
            },
            dtype="string",
        )
        if fmt == MappingFormat.CSV:
            df.to_csv(path, index=False)
        elif fmt == MappingFormat.PARQUET:
            df.to_parquet(path, index=False)
        else:
            raise ValueError(f"Unsupported renaming map format: {fmt}")

    logger.info("Wrote %d mapping(s) to %s", len(mapping), path)


def read_renaming_map(path: Path, fmt: MappingFormat | None = None) -> dict[str, str]:
    """Read a map written by :func:`write_renaming_map`, keeping its order."""
    fmt = fmt or format_for_path(path)

    if fmt == MappingFormat.JSON:
        data = json.loads(path.read_text(), object_pairs_hook=_JsonObject)
        if not isinstance(data, _JsonObject):
            raise ValueError(f"Expected a JSON object in {path}")
        pairs = list(data)
        for original, renamed in pairs:
            if not isinstance(renamed, str):
                raise ValueError(f"{path} maps {original!r} to a non-string value {renamed!r}")
    else:
        if fmt == MappingFormat.CSV:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        elif fmt == MappingFormat.PARQUET:
            df = pd.read_parquet(path)
        else:
            raise ValueError(f"Unsupported renaming map format: {fmt}")
        missing = {ORIGINAL_COLUMN, RENAMED_COLUMN} - set(df.columns)
        if missing:
            raise ValueError(f"Renaming map {path} is missing column(s): {sorted(missing)}")
        pairs = list(
            zip(df[ORIGINAL_COLUMN].astype(str), df[RENAMED_COLUMN].astype(str))
        )

    mapping: dict[str, str] = {}
    for original, renamed in pairs:
        previous = mapping.setdefault(original, renamed)
        if previous != renamed:
            raise ConflictingMappingError(
                f"{path} maps {original!r} to both {previous!r} and {renamed!r}"
            )

    logger.info("Read %d mapping(s) from %s", len(mapping), path)
    return mapping


SUPPORTED_INPUT_EXTENSIONS: tuple[str, ...] = (".txt",)


def discover_name_files(input_path: Path) -> list[Path]:
    if input_path.is_file():
        return [input_path]

    files: list[Path] = []
    for candidate in sorted(input_path.rglob("*")):
        if candidate.is_file() and candidate.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS:
            files.append(candidate)
    return files


def output_path_for_file(input_file: Path, input_root: Path, output_root: Path) -> Path:
    if input_root.is_dir():
        return output_root / input_file.relative_to(input_root)
    return output_root / input_file.name


def read_class_names(path: Path) -> list[str]:
    """Return the whitespace-separated class names in *path*, in order."""
    return path.read_text().split()


def write_class_names(names: list[str], output_file: Path) -> None:
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text("".join(f"{name}\n" for name in names))
