# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""README generation workflow for a wasm-pack project.

The generator:
1. Loads package metadata from the Cargo manifest.
2. Resolves the declaration files, either listed in the project
   configuration or discovered as ``pkg/**/*.d.ts``. The
   ``*_bg.wasm.d.ts`` typings wasm-pack writes for the raw module are skipped.
3. Parses every declaration file completely before writing anything. A file
   that fails to parse aborts the run, so a partial README is never produced.
4. Renders the markdown and writes it to the configured output path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from exspork.model.entities import DeclarationFile, Function
from exspork.parser.parser import ParseError, parse
from exspork.project.config import ProjectConfig
from exspork.project.manifest import ManifestError, load_manifest
from exspork.rendering.markdown import generate_markdown

# ###############
# Public Interface
# ###############

DISCOVERY_DIRECTORY = "pkg"
DECLARATION_SUFFIX = ".d.ts"
WASM_MODULE_SUFFIX = "_bg.wasm.d.ts"


class GenerationError(Exception):
    """Raised when README generation fails.

    Covers manifest errors, missing or unreadable declaration files, parse
    errors, and failures writing the output.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass
class GenerationResult:
    """Outcome of a successful generation run.

    Attributes:
        output_path: Absolute path of the written README.
        declaration_files: The declaration files that were parsed, in order.
        functions: All documented functions, in file then source order.
    """

    output_path: Path
    declaration_files: list[Path] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)


def read_declaration_file(path: Path) -> DeclarationFile:
    """Read and fully parse one declaration file.

    Raises:
        GenerationError: If the file cannot be read, is not valid UTF-8, or
            does not parse.
    """
    try:
        source_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Cannot read declaration file '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise GenerationError(f"Declaration file '{path}' is not valid UTF-8: {exc}") from exc

    try:
        return parse(source_text)
    except ParseError as exc:
        raise GenerationError(f"Parse error in '{path}': {exc}") from exc


def find_declaration_files(project_dir: Path, config: ProjectConfig) -> list[Path]:
    """Return the declaration files to document, in processing order.

    Configured paths are used as given (relative to *project_dir*) and must
    exist. Without configured paths, ``*.d.ts`` files under ``pkg/`` are
    discovered and sorted by path, skipping the ``*_bg.wasm.d.ts`` module
    typings; finding none is not an error.

    Raises:
        GenerationError: If a configured declaration file does not exist.
    """
    if config.declarations:
        files = [(project_dir / rel).resolve() for rel in config.declarations]
        for path in files:
            if not path.is_file():
                raise GenerationError(f"Declaration file not found: {path}")
        return files

    discovery_dir = project_dir / DISCOVERY_DIRECTORY
    if not discovery_dir.is_dir():
        return []
    return sorted(
        p.resolve()
        for p in discovery_dir.rglob(f"*{DECLARATION_SUFFIX}")
        if p.is_file() and not p.name.endswith(WASM_MODULE_SUFFIX)
    )


def generate_readme(project_dir: Path, config: ProjectConfig) -> GenerationResult:
    """Generate the README for the project in *project_dir*.

    Args:
        project_dir: Root directory of the project; relative config paths
            are resolved against it.
        config: Generation settings.

    Returns:
        A GenerationResult describing what was written.

    Raises:
        GenerationError: On any failure. No output is written in that case.
    """
    try:
        manifest = load_manifest(project_dir / config.manifest)
    except ManifestError as exc:
        raise GenerationError(str(exc)) from exc

    declaration_files = find_declaration_files(project_dir, config)
    functions: list[Function] = []
    for path in declaration_files:
        functions.extend(read_declaration_file(path).functions)

    markdown = generate_markdown(manifest, functions, title=config.title)

    output_path = (project_dir / config.output).resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Cannot write README '{output_path}': {exc}") from exc

    return GenerationResult(
        output_path=output_path,
        declaration_files=declaration_files,
        functions=functions,
    )
