# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the exspork command-line interface."""

import argparse
import sys
from pathlib import Path

from exspork.generator.build import GenerationError, generate_readme, read_declaration_file
from exspork.project.config import CONFIG_NAME, ProjectConfigError, load_project_config_or_default

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the exspork CLI."""
    parser = argparse.ArgumentParser(
        prog="exspork",
        description="exspork: README generator for WebAssembly packages",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a README from Cargo.toml and TypeScript declarations",
        description=(
            "Read the package manifest and the exported function declarations "
            f"of a project and write a markdown README. Settings are read from {CONFIG_NAME} "
            "when present; command-line options take precedence."
        ),
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    generate_parser.add_argument(
        "--manifest",
        type=_non_empty,
        help="Path to the Cargo manifest, relative to the project directory",
    )
    generate_parser.add_argument(
        "--declaration",
        action="append",
        type=_non_empty,
        dest="declarations",
        metavar="FILE",
        help="Declaration file to document (repeatable; default: discover pkg/**/*.d.ts)",
    )
    generate_parser.add_argument(
        "--output",
        type=_non_empty,
        help="Output path for the README, relative to the project directory",
    )
    generate_parser.add_argument(
        "--title",
        type=_non_empty,
        help="README heading (default: the package name)",
    )

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a declaration file and print its functions",
        description="Parse a TypeScript declaration file and print one signature per line.",
    )
    parse_parser.add_argument("file", help="Path to the .d.ts file")
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed declarations as JSON instead",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _non_empty(value: str) -> str:
    """argparse type for options that must not be blank."""
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "parse":
        return _cmd_parse(args)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.is_dir():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    try:
        config = load_project_config_or_default(directory)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.manifest is not None:
        config.manifest = args.manifest
    if args.declarations is not None:
        config.declarations = args.declarations
    if args.output is not None:
        config.output = args.output
    if args.title is not None:
        config.title = args.title

    try:
        result = generate_readme(directory, config)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not result.declaration_files:
        print("Warning: no declaration files found; the API section is omitted.")
    print(
        f"Documented {len(result.functions)} function(s) from "
        f"{len(result.declaration_files)} declaration file(s)."
    )
    print(f"README written to '{result.output_path}'.")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    from exspork.rendering.display import format_function

    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        declarations = read_declaration_file(path)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(declarations.model_dump_json(indent=2))
        return 0

    for function in declarations.functions:
        print(format_function(function))
    return 0
