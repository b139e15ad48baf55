from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

from css_rename.errors import RenamingError
from css_rename.io import (
    MappingFormat,
    discover_name_files,
    format_for_path,
    output_path_for_file,
    read_class_names,
    read_renaming_map,
    write_class_names,
    write_renaming_map,
)
from css_rename.renamer import RENAME_BY_CHOICES, ClassRenamer, RenamingConfig
from css_rename.strategy import RenamingStrategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="css-rename",
        description="Rename CSS class names consistently and write the renamed lists.",
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="Path to a file or folder of .txt files with whitespace-separated class names.",
    )
    parser.add_argument(
        "output_path",
        type=Path,
        help="Destination folder for renamed class name files.",
    )
    parser.add_argument(
        "--strategy",
        type=RenamingStrategy,
        choices=list(RenamingStrategy),
        default=RenamingStrategy.NONE,
        help="Renaming strategy (default: none).",
    )
    parser.add_argument(
        "--by",
        choices=RENAME_BY_CHOICES,
        default="whole",
        help="Rename whole class names or each dash-separated part (default: whole).",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="Prefix prepended to every renamed class name.",
    )
    parser.add_argument(
        "--except",
        dest="except_names",
        action="append",
        default=[],
        metavar="NAME",
        help="Class name to leave untouched and never generate. May be repeated.",
    )
    parser.add_argument(
        "--except-pattern",
        dest="except_patterns",
        action="append",
        default=[],
        metavar="REGEX",
        help="Regular expression of class names to leave untouched. May be repeated.",
    )
    parser.add_argument(
        "--export-mappings",
        type=Path,
        default=None,
        metavar="PATH",
        help="Optional path to write the renaming map after processing.",
    )
    parser.add_argument(
        "--load-mappings",
        type=Path,
        default=None,
        metavar="PATH",
        help="Optional path to a renaming map from a previous run to keep renaming stable.",
    )
    parser.add_argument(
        "--mapping-format",
        type=MappingFormat,
        choices=list(MappingFormat),
        default=None,
        help="Renaming map format (default: inferred from the file suffix).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path: Path = args.input_path
    output_path: Path = args.output_path
    export_mappings: Path | None = args.export_mappings
    load_mappings: Path | None = args.load_mappings
    mapping_format: MappingFormat | None = args.mapping_format

    files = discover_name_files(input_path)
    if not files:
        parser.error("No supported input files found (.txt).")

    try:
        except_patterns = [re.compile(pattern) for pattern in args.except_patterns]
    except re.error as exc:
        parser.error(f"Invalid --except-pattern: {exc}")

    try:
        config = RenamingConfig(
            strategy=args.strategy,
            by=args.by,
            prefix=args.prefix,
            except_=(*args.except_names, *except_patterns),
        )
    except ValueError as exc:
        parser.error(str(exc))

    # Load existing mappings if provided
    if load_mappings is not None and not load_mappings.exists():
        parser.error(f"Mapping file not found: {load_mappings}")
    if mapping_format is None:
        for mapping_path in (load_mappings, export_mappings):
            if mapping_path is not None:
                try:
                    format_for_path(mapping_path)
                except ValueError as exc:
                    parser.error(str(exc))

    seed = None
    if load_mappings is not None:
        try:
            seed = read_renaming_map(load_mappings, mapping_format)
        except RenamingError as exc:
            print(f"Renaming failed: {type(exc).__name__}: {exc}")
            return 1
        except ValueError as exc:
            parser.error(f"Cannot read mapping file {load_mappings}: {exc}")
        print(f"Loaded mappings from: {load_mappings}")

    try:
        renamer = ClassRenamer(config, seed=seed)
        for input_file in files:
            renamed = renamer.rename_all(read_class_names(input_file))
            destination = output_path_for_file(
                input_file=input_file, input_root=input_path, output_root=output_path
            )
            write_class_names(renamed, destination)
            print(f"Processed: {input_file} -> {destination}")
    except RenamingError as exc:
        print(f"Renaming failed: {type(exc).__name__}: {exc}")
        return 1

    print(f"Done. Processed {len(files)} file(s) with strategy '{config.strategy.value}'.")

    if export_mappings is not None:
        write_renaming_map(renamer.mappings, export_mappings, mapping_format)
        print(f"Mappings written to: {export_mappings}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
