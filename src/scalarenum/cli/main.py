# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ScalarEnum command-line interface."""

import argparse
import sys
from pathlib import Path

from scalarenum.core.coercion import dump_value
from scalarenum.core.errors import EnumError
from scalarenum.core.registry import EnumRegistry
from scalarenum.definitions.builder import build_enums
from scalarenum.definitions.config import DEFINITION_FILE_SUFFIXES, EnumDefinitionFile, load_enum_definitions
from scalarenum.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ScalarEnum CLI."""
    parser = argparse.ArgumentParser(
        prog="scalarenum",
        description="ScalarEnum - scalar key-value enumerations",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check enum definition files for defects",
        description="Validate enum definition files: schema, value kinds and duplicate values.",
    )
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Definition files or directories to search for *.yaml/*.yml files (default: current directory)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the pairs of the enums in a definition file",
        description="Print every key and value declared in an enum definition file.",
    )
    show_parser.add_argument("file", help="Enum definition file")
    show_parser.add_argument(
        "--enum",
        dest="enum_name",
        default=None,
        help="Only print the enum with this name",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    files: list[Path] = []
    for raw in args.paths:
        path = Path(raw).resolve()
        if not path.exists():
            print(f"Error: path '{path}' does not exist.", file=sys.stderr)
            return 1
        if path.is_dir():
            files.extend(sorted(f for f in path.rglob("*") if f.is_file() and f.suffix in DEFINITION_FILE_SUFFIXES))
        else:
            files.append(path)

    if not files:
        print("No enum definition files found.")
        return 0

    print(f"Checking {len(files)} enum definition file(s)...")
    registry = EnumRegistry()
    has_errors = False
    for path in files:
        try:
            definitions = load_enum_definitions(path)
        except EnumError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
            continue

        for enum_type in build_enums(definitions, module=path.stem, registry=registry).values():
            result = validate(enum_type)
            for warning in result.warnings:
                print(f"Warning: {warning.message}")
            for error in result.errors:
                print(f"Error: {error.message}", file=sys.stderr)
                has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    path = Path(args.file).resolve()
    try:
        definitions = load_enum_definitions(path)
    except EnumError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.enum_name is not None:
        definition = definitions.get(args.enum_name)
        if definition is None:
            print(f"Error: enum '{args.enum_name}' is not defined in '{path}'.", file=sys.stderr)
            return 1
        definitions = EnumDefinitionFile(enums=[definition])

    enum_types = build_enums(definitions, module=path.stem, registry=EnumRegistry())
    for index, (name, enum_type) in enumerate(enum_types.items()):
        if index > 0:
            print()
        print(f"{name} ({enum_type.count()} pair(s))")
        for key, value in enum_type.get_map().items():
            print(f"  {key} = {dump_value(value)}")
    return 0
