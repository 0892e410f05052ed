# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the README generation workflow."""

from __future__ import annotations

from pathlib import Path

import pytest

from exspork.generator.build import (
    GenerationError,
    find_declaration_files,
    generate_readme,
    read_declaration_file,
)
from exspork.project.config import ProjectConfig

# ###############
# Test data directory
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"

# ###############
# Helpers
# ###############

CARGO_TOML = """\
[package]
name = "hello-wasm"
version = "0.2.0"
description = "Bindings for hello."
license = "MIT"
"""


def _write(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _project(tmp_path: Path, declarations: dict[str, str]) -> Path:
    """Create a project with a Cargo.toml and the given declaration files."""
    _write(tmp_path / "Cargo.toml", CARGO_TOML)
    for rel, content in declarations.items():
        _write(tmp_path / rel, content)
    return tmp_path


# ###############
# Reading Declaration Files
# ###############


def test_read_fixture_declaration_file() -> None:
    result = read_declaration_file(DATA_DIR / "parsing.d.ts")
    assert [f.name for f in result.functions] == ["greet", "exponent", "fill", "compare"]


def test_read_missing_declaration_file(tmp_path: Path) -> None:
    with pytest.raises(GenerationError, match="Cannot read declaration file"):
        read_declaration_file(tmp_path / "missing.d.ts")


def test_read_malformed_declaration_file_names_the_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.d.ts", "export function greet(person: ): void;\n")
    with pytest.raises(GenerationError, match="Parse error in '.*bad.d.ts': Line 1"):
        read_declaration_file(path)


def test_read_non_utf8_declaration_file(tmp_path: Path) -> None:
    """Undecodable bytes are reported as a GenerationError, not a UnicodeDecodeError."""
    path = tmp_path / "bad.d.ts"
    path.write_bytes(b"export function f(a: \xff): void;\n")
    with pytest.raises(GenerationError, match="not valid UTF-8"):
        read_declaration_file(path)


# ###############
# Discovery
# ###############


def test_discovers_declarations_under_pkg_sorted(tmp_path: Path) -> None:
    project = _project(
        tmp_path,
        {
            "pkg/b.d.ts": "",
            "pkg/a.d.ts": "",
            "pkg/nested/c.d.ts": "",
            "pkg/a.js": "",
            "src/ignored.d.ts": "",
        },
    )
    files = find_declaration_files(project, ProjectConfig())
    assert [f.relative_to(project.resolve()).as_posix() for f in files] == [
        "pkg/a.d.ts",
        "pkg/b.d.ts",
        "pkg/nested/c.d.ts",
    ]


def test_discovery_skips_wasm_module_typings(tmp_path: Path) -> None:
    project = _project(
        tmp_path,
        {
            "pkg/hello.d.ts": "",
            "pkg/hello_bg.wasm.d.ts": "",
            "pkg/nested/other_bg.wasm.d.ts": "",
        },
    )
    files = find_declaration_files(project, ProjectConfig())
    assert [f.name for f in files] == ["hello.d.ts"]


def test_configured_wasm_module_typings_are_kept(tmp_path: Path) -> None:
    project = _project(tmp_path, {"pkg/hello_bg.wasm.d.ts": ""})
    config = ProjectConfig(declarations=["pkg/hello_bg.wasm.d.ts"])
    assert [f.name for f in find_declaration_files(project, config)] == ["hello_bg.wasm.d.ts"]


def test_no_pkg_directory_finds_nothing(tmp_path: Path) -> None:
    assert find_declaration_files(tmp_path, ProjectConfig()) == []


def test_configured_declarations_keep_given_order(tmp_path: Path) -> None:
    project = _project(tmp_path, {"types/z.d.ts": "", "types/a.d.ts": ""})
    config = ProjectConfig(declarations=["types/z.d.ts", "types/a.d.ts"])
    files = find_declaration_files(project, config)
    assert [f.name for f in files] == ["z.d.ts", "a.d.ts"]


def test_configured_declaration_must_exist(tmp_path: Path) -> None:
    config = ProjectConfig(declarations=["pkg/missing.d.ts"])
    with pytest.raises(GenerationError, match="Declaration file not found"):
        find_declaration_files(tmp_path, config)


# ###############
# Generation
# ###############


def test_generate_readme_writes_markdown(tmp_path: Path) -> None:
    project = _project(tmp_path, {"pkg/hello.d.ts": (DATA_DIR / "parsing.d.ts").read_text(encoding="utf-8")})

    result = generate_readme(project, ProjectConfig())

    assert result.output_path == (project / "generated_readme.md").resolve()
    assert len(result.functions) == 4
    text = result.output_path.read_text(encoding="utf-8")
    assert text.startswith("# hello-wasm\n\n### Version: 0.2.0\n\nBindings for hello.\n\n## API\n\n")
    assert "### `exponent(x: number, y: number) -> number`" in text
    assert text.endswith("## License\n\nMIT\n")


def test_functions_are_concatenated_in_file_order(tmp_path: Path) -> None:
    project = _project(
        tmp_path,
        {
            "pkg/a.d.ts": "export function first(): void;\nexport function second(): void;\n",
            "pkg/b.d.ts": "export function third(): void;\n",
        },
    )
    result = generate_readme(project, ProjectConfig())
    assert [f.name for f in result.functions] == ["first", "second", "third"]


def test_generate_without_declarations_omits_api(tmp_path: Path) -> None:
    project = _project(tmp_path, {})
    result = generate_readme(project, ProjectConfig())
    assert result.declaration_files == []
    assert "## API" not in result.output_path.read_text(encoding="utf-8")


def test_custom_output_title_and_manifest(tmp_path: Path) -> None:
    _write(tmp_path / "crate" / "Cargo.toml", CARGO_TOML)
    config = ProjectConfig(manifest="crate/Cargo.toml", output="docs/API.md", title="Hello")
    result = generate_readme(tmp_path, config)
    assert result.output_path == (tmp_path / "docs" / "API.md").resolve()
    assert result.output_path.read_text(encoding="utf-8").startswith("# Hello\n")


def test_wasm_pack_layout_generates(tmp_path: Path) -> None:
    """The raw module typings wasm-pack writes next to the bindings do not break generation."""
    project = _project(
        tmp_path,
        {
            "pkg/hello.d.ts": "export function greet(name: string): void;\n",
            "pkg/hello_bg.wasm.d.ts": (
                "export const memory: WebAssembly.Memory;\n"
                "export function greet(a: number, b: number): void;\n"
            ),
        },
    )
    result = generate_readme(project, ProjectConfig())
    assert [p.name for p in result.declaration_files] == ["hello.d.ts"]
    assert [f.name for f in result.functions] == ["greet"]


def test_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(GenerationError, match="Manifest not found"):
        generate_readme(tmp_path, ProjectConfig())


def test_parse_failure_writes_nothing(tmp_path: Path) -> None:
    project = _project(
        tmp_path,
        {
            "pkg/a.d.ts": "export function ok(): void;\n",
            "pkg/b.d.ts": "export function broken(: void;\n",
        },
    )
    with pytest.raises(GenerationError, match="b.d.ts"):
        generate_readme(project, ProjectConfig())
    assert not (project / "generated_readme.md").exists()


def test_trailing_content_fails_generation(tmp_path: Path) -> None:
    project = _project(tmp_path, {"pkg/a.d.ts": "export function ok(): void;\nexport class Foo {}\n"})
    with pytest.raises(GenerationError, match="Parse error"):
        generate_readme(project, ProjectConfig())
